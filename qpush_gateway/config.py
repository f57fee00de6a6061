"""Application configuration via pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    log_level: str = "INFO"
    allowed_origins: list[str] = ["http://localhost:3000"]
    # API key (optional): if set, required on management routes, never on provider pushes
    api_key: str = ""
    rate_limit: str = "60/minute"

    # Dispatch
    log_events: bool = True  # Log every dispatched notification event


settings = Settings()
