from genai_relay.core.config import Settings
from genai_relay.core.logging import LogConfig


def test_settings_defaults(monkeypatch):
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "PORT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.gemini_api_key == ""
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.port == 3000


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.0-flash")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.gemini_api_key == "test-key"
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.port == 8080


def test_log_config_applies_level():
    config = LogConfig(LOG_LEVEL="debug").to_dict_config()

    assert config["loggers"]["genai_relay"]["level"] == "DEBUG"
    assert config["loggers"]["genai_relay"]["handlers"] == ["default", "file"]
    assert "LOG_LEVEL" not in config
