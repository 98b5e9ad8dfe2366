import logging
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from click.testing import CliRunner

from overtime_tracker.config import get_settings_module
from overtime_tracker.main import create_cli, resolve_log_level
from overtime_tracker.storage.data_file import DataFile, DataFileConfig


@pytest.mark.parametrize(
    "env, module",
    [
        (None, "overtime_tracker.config.development"),
        ("production", "overtime_tracker.config.production"),
        ("PROD", "overtime_tracker.config.production"),
        ("testing", "overtime_tracker.config.testing"),
        ("staging", "overtime_tracker.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    if env is None:
        monkeypatch.delenv("APP_ENV", raising=False)
    else:
        monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_data_file_defaults_to_platform_app_dir(monkeypatch, tmp_path):
    monkeypatch.setattr("click.get_app_dir", lambda name: str(tmp_path / name))

    data_file = DataFile(DataFileConfig())

    assert data_file.path() == tmp_path / "overtime" / "overtime.json"
    assert (tmp_path / "overtime").is_dir()


def test_explicit_data_dir_wins(tmp_path):
    data_file = DataFile(DataFileConfig(data_dir=str(tmp_path / "custom"), file_name="ot.json"))

    assert data_file.path() == Path(tmp_path / "custom" / "ot.json")


@pytest.fixture
def fresh_settings(monkeypatch):
    # Settings modules read the environment at import time.
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.delitem(sys.modules, "overtime_tracker.config.development", raising=False)
    monkeypatch.setenv("OVERTIME_DATA_DIR", "unset")
    monkeypatch.delenv("OVERTIME_DATA_DIR")


def test_data_dir_env_var_is_used_by_cli(fresh_settings, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OVERTIME_DATA_DIR", str(tmp_path / "from-env"))

    result = CliRunner().invoke(create_cli(), ["add", "45m", "02012024"])

    assert result.exit_code == 0
    assert (tmp_path / "from-env" / "overtime.json").exists()


def test_data_dir_is_read_from_dotenv_file(fresh_settings, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text(f"OVERTIME_DATA_DIR={tmp_path / 'from-dotenv'}\n")

    result = CliRunner().invoke(create_cli(), ["add", "45m", "02012024"])

    assert result.exit_code == 0
    assert (tmp_path / "from-dotenv" / "overtime.json").exists()


@pytest.mark.parametrize(
    "settings, level",
    [
        (SimpleNamespace(DEBUG=True, LOG_LEVEL="ERROR"), logging.DEBUG),
        (SimpleNamespace(DEBUG=False, LOG_LEVEL="info"), logging.INFO),
        (SimpleNamespace(DEBUG=False, LOG_LEVEL="verbose"), logging.WARNING),
        (SimpleNamespace(), logging.WARNING),
    ],
)
def test_log_level_resolution(settings, level):
    assert resolve_log_level(settings) == level
