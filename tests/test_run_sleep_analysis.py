import importlib.util
import json
import os

import pytest

SCRIPT_PATH = os.path.join(os.path.dirname(__file__), '..', 'scripts', 'run_sleep_analysis.py')


@pytest.fixture
def runner():
    spec = importlib.util.spec_from_file_location('run_sleep_analysis', SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_runner_writes_json(runner, sample_csv_file, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    output = tmp_path / 'stats.json'

    exit_code = runner.main(['--data', sample_csv_file, '--year', '2025', '--month', '3',
                             '--output', str(output), '--verbose'])

    assert exit_code == 0
    printed = capsys.readouterr().out
    assert 'SLEEP STATISTICS: All' in printed
    assert 'SLEEP STATISTICS: 2025-3' in printed
    assert 'CORRELATIONS' in printed
    loaded = json.loads(output.read_text())
    assert loaded['monthly']['total_days'] == 3


def test_runner_missing_data_file(runner, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert runner.main(['--data', str(tmp_path / 'missing.csv')]) == 1
    assert 'File Error' in capsys.readouterr().out


def test_runner_requires_year_and_month_together(runner, sample_csv_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert runner.main(['--data', sample_csv_file, '--year', '2025']) == 1


def test_runner_reports_invalid_target_time(runner, sample_csv_file, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    config_path = tmp_path / 'config.yaml'
    config_path.write_text('targets:\n  bed_time: "late"\n')

    assert runner.main(['--config', str(config_path), '--data', sample_csv_file]) == 1
    assert 'Config Error' in capsys.readouterr().out
