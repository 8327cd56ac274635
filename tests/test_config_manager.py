import pytest

from sleep_dashboard.config.config_manager import ConfigManager


def test_defaults_when_no_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = ConfigManager()

    assert config.get('targets.bed_time') == '23:00'
    assert config.get('targets.wake_time') == '6:20'
    assert config.get('analysis.top_correlation_count') == 5


def test_yaml_overrides_are_merged(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('targets:\n  bed_time: "22:30"\ndata:\n  path: other.csv\n')
    config = ConfigManager(str(path))

    assert config.get('targets.bed_time') == '22:30'
    assert config.get('targets.wake_time') == '6:20'
    assert config.get('data.path') == 'other.csv'


def test_get_missing_key_returns_default(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('')
    config = ConfigManager(str(path))

    assert config.get('targets.nap_time') is None
    assert config.get('targets.nap_time', '14:00') == '14:00'
    assert config.get('targets.bed_time.hour', 'x') == 'x'


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(str(tmp_path / 'nope.yaml'))


@pytest.mark.parametrize('content', ['targets: [unclosed', '- just\n- a list\n'])
def test_invalid_yaml_raises_value_error(tmp_path, content):
    path = tmp_path / 'config.yaml'
    path.write_text(content)
    with pytest.raises(ValueError):
        ConfigManager(str(path))


def test_analysis_config(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('analysis:\n  top_correlation_count: 3\n')
    assert ConfigManager(str(path)).analysis_config() == {
        'target_bed_time': '23:00',
        'target_wake_time': '6:20',
        'top_correlation_count': 3,
    }


def test_unquoted_target_times_are_read_as_clock_times(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('targets:\n  bed_time: 22:45\n  wake_time: 6:20\n')
    analysis = ConfigManager(str(path)).analysis_config()

    assert analysis['target_bed_time'] == '22:45'
    assert analysis['target_wake_time'] == '6:20'


@pytest.mark.parametrize('value', ['"25:00"', '"soon"', 'true', '[6, 20]'])
def test_invalid_target_time_raises_value_error(tmp_path, value):
    path = tmp_path / 'config.yaml'
    path.write_text(f'targets:\n  wake_time: {value}\n')
    with pytest.raises(ValueError, match='targets.wake_time'):
        ConfigManager(str(path)).analysis_config()
