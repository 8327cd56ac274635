"""
Core modules for the Sleep Dashboard.

This package contains the statistics engine behind the dashboard:
- Parsing the sleep tracker CSV export
- Per-night feature derivation
- Aggregate sleep metrics (averages, circular-mean times, correlations)
- Score distribution and report formatting
"""

__version__ = "0.3.0"
