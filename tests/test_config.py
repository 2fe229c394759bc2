import pytest
from pydantic import ValidationError

from infra import DEFAULT_LOGFILE, ExplorerSettings


def test_defaults(monkeypatch):
    for name in ("EXPLORER_LOG_LEVEL", "EXPLORER_LOG_JSON", "EXPLORER_LOG_TO_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = ExplorerSettings.from_env()

    assert settings.log_level == "WARNING"
    assert not settings.log_json
    assert settings.logfile is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("EXPLORER_LOG_LEVEL", "debug")
    monkeypatch.setenv("EXPLORER_LOG_JSON", "yes")
    monkeypatch.setenv("EXPLORER_LOG_TO_FILE", "1")

    settings = ExplorerSettings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.log_json
    assert settings.logfile == DEFAULT_LOGFILE


def test_unknown_level_is_rejected():
    with pytest.raises(ValidationError):
        ExplorerSettings(log_level="LOUD")
