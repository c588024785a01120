from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from errors import ConfigError

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
ENV_PREFIX = "AD_OPTIMIZER_"


class Settings(BaseSettings):
    """광고 최적화 설정. 인스턴스 생성 시점의 환경변수를 읽는다."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
        populate_by_name=True,
        frozen=True,
    )

    api_key: str | None = Field(
        default=None,
        validation_alias="ANTHROPIC_API_KEY",
        description="Anthropic API 키.",
    )
    model: str = Field(default=DEFAULT_MODEL, min_length=1)
    mode: Literal["search", "schema"] = Field(
        default="search",
        description="search: 웹 검색 + 출처, schema: 도구 스키마 강제.",
    )
    temperature: float = Field(default=0.2, ge=0.0, le=1.0)
    max_tokens: int = Field(default=4096, gt=0)
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias="AD_OPTIMIZER_TIMEOUT",
        description="API 호출 타임아웃 (초).",
    )
    max_searches: int = Field(default=5, ge=1, le=20)

    @field_validator("api_key")
    @classmethod
    def _blank_key_is_missing(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @classmethod
    def from_env(cls) -> "Settings":
        try:
            return cls()
        except ValidationError as e:
            first = e.errors()[0]
            key = str(first["loc"][0]).upper() if first["loc"] else ""
            if not key.startswith(ENV_PREFIX) and key != "ANTHROPIC_API_KEY":
                key = f"{ENV_PREFIX}{key}"
            raise ConfigError(f"Valor inválido para {key}: {first['msg']}.") from None
