from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MARKETCONTEXT_",
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )
    fmp_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("FMP_API_KEY", "MARKETCONTEXT_FMP_API_KEY"),
    )
    fmp_base_url: str = "https://financialmodelingprep.com/api/v3"
    request_timeout_seconds: float = 10.0
    news_request_limit: int = 10


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MARKETCONTEXT_",
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    providers: ProviderSettings = Field(default_factory=ProviderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


settings = Settings()
