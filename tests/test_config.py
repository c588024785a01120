import pytest
from pydantic import ValidationError as PydanticValidationError

from config import DEFAULT_MODEL, Settings
from errors import ConfigError


def test_defaults_from_empty_environment(no_api_env):
    settings = Settings.from_env()

    assert settings.api_key is None
    assert settings.model == DEFAULT_MODEL
    assert settings.mode == "search"
    assert settings.temperature == 0.2
    assert settings.max_tokens == 4096
    assert settings.timeout_seconds == 30.0
    assert settings.max_searches == 5


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_api_key_counts_as_missing(no_api_env, monkeypatch, value):
    monkeypatch.setenv("ANTHROPIC_API_KEY", value)

    assert Settings.from_env().api_key is None


def test_blank_mode_falls_back_to_search(no_api_env, monkeypatch):
    monkeypatch.setenv("AD_OPTIMIZER_MODE", "")

    assert Settings.from_env().mode == "search"


def test_overrides(no_api_env, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    monkeypatch.setenv("AD_OPTIMIZER_MODEL", "claude-haiku-4-5")
    monkeypatch.setenv("AD_OPTIMIZER_MODE", "Schema")
    monkeypatch.setenv("AD_OPTIMIZER_TEMPERATURE", "0.5")
    monkeypatch.setenv("AD_OPTIMIZER_MAX_TOKENS", "2048")
    monkeypatch.setenv("AD_OPTIMIZER_TIMEOUT", "10")
    monkeypatch.setenv("AD_OPTIMIZER_MAX_SEARCHES", "2")

    settings = Settings.from_env()

    assert settings.api_key == "sk-test"
    assert settings.model == "claude-haiku-4-5"
    assert settings.mode == "schema"
    assert settings.temperature == 0.5
    assert settings.max_tokens == 2048
    assert settings.timeout_seconds == 10.0
    assert settings.max_searches == 2


def test_unknown_mode_rejected(no_api_env, monkeypatch):
    monkeypatch.setenv("AD_OPTIMIZER_MODE", "browse")

    with pytest.raises(ConfigError) as exc_info:
        Settings.from_env()

    assert "AD_OPTIMIZER_MODE" in str(exc_info.value)


@pytest.mark.parametrize(
    "key, value",
    [
        ("AD_OPTIMIZER_TIMEOUT", "soon"),
        ("AD_OPTIMIZER_TIMEOUT", "0"),
        ("AD_OPTIMIZER_MAX_TOKENS", "many"),
        ("AD_OPTIMIZER_TEMPERATURE", "3"),
    ],
)
def test_invalid_number_names_variable(no_api_env, monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigError) as exc_info:
        Settings.from_env()

    assert key in str(exc_info.value)


def test_explicit_values_for_tests(no_api_env):
    settings = Settings(api_key="injected", mode="schema", timeout_seconds=5)

    assert settings.api_key == "injected"
    assert settings.mode == "schema"
    assert settings.timeout_seconds == 5.0


def test_settings_are_frozen(settings):
    with pytest.raises(PydanticValidationError):
        settings.api_key = "other"
