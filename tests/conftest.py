import pytest

from config import Settings


@pytest.fixture
def no_api_env(monkeypatch):
    for key in (
        "ANTHROPIC_API_KEY",
        "AD_OPTIMIZER_MODEL",
        "AD_OPTIMIZER_MODE",
        "AD_OPTIMIZER_TEMPERATURE",
        "AD_OPTIMIZER_MAX_TOKENS",
        "AD_OPTIMIZER_TIMEOUT",
        "AD_OPTIMIZER_MAX_SEARCHES",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings(no_api_env):
    return Settings(api_key="test-key")


@pytest.fixture
def schema_settings(no_api_env):
    return Settings(api_key="test-key", mode="schema")
