from sleep_dashboard.config.config_manager import ConfigManager

__all__ = ['ConfigManager']
