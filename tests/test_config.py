"""
Tests for environment-driven settings.
"""
from src.utils.config import get_settings, load_settings


def test_defaults():
    settings = load_settings()

    assert settings.model == "gemini-2.0-flash"
    assert settings.temperature == 0.9
    assert settings.retry_temperature == 0.95
    assert settings.max_output_tokens == 1000
    assert settings.request_delay == 1.0
    assert settings.strict is False
    assert settings.include_grocery_list is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GEMINI_TEMPERATURE", "0.5")
    monkeypatch.setenv("GEMINI_MAX_OUTPUT_TOKENS", "2048")
    monkeypatch.setenv("MEAL_PLAN_REQUEST_DELAY", "0")
    monkeypatch.setenv("MEAL_PLAN_STRICT", "true")
    monkeypatch.setenv("MEAL_PLAN_INCLUDE_GROCERY_LIST", "0")

    settings = load_settings()

    assert settings.temperature == 0.5
    assert settings.max_output_tokens == 2048
    assert settings.request_delay == 0
    assert settings.strict is True
    assert settings.include_grocery_list is False


def test_settings_cached():
    assert get_settings() is get_settings()
