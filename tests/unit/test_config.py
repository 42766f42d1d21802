"""Unit tests for configuration."""

from config import Settings
from services.competitor_detection.config import DetectionConfig


def test_default_settings(monkeypatch):
    """Test that default settings are loaded correctly."""
    for name in ["ENABLE_NER_FALLBACK", "DATABASE_URL", "OPENAI_API_KEY"]:
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "Llumos"
    assert settings.debug is False
    assert settings.database_url == "sqlite:///./llumos.db"
    assert settings.openai_api_key is None
    assert settings.enable_ner_fallback is True
    assert settings.ner_timeout_seconds == 15.0
    assert settings.ner_max_candidates == 15
    assert settings.ner_text_limit == 2000
    assert settings.max_competitors == 20
    assert settings.history_window_days == 90
    assert settings.history_min_mentions == 3


def test_custom_settings(monkeypatch):
    """Test that custom settings can be loaded from environment."""
    monkeypatch.setenv("APP_NAME", "TestApp")
    monkeypatch.setenv("NER_MAX_CANDIDATES", "5")
    monkeypatch.setenv("enable_ner_fallback", "false")
    monkeypatch.setenv("API_PORT", "9000")

    settings = Settings(_env_file=None)

    assert settings.app_name == "TestApp"
    assert settings.ner_max_candidates == 5
    assert settings.enable_ner_fallback is False
    assert settings.api_port == 9000


def test_detection_config_from_settings(monkeypatch):
    monkeypatch.setenv("MAX_COMPETITORS", "7")
    monkeypatch.setenv("HISTORY_TOP_N", "10")

    config = DetectionConfig.from_settings(Settings(_env_file=None))

    assert config.max_competitors == 7
    assert config.history_top_n == 10
    assert config.ner_text_limit == 2000
