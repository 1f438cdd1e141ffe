"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    # Listener; an empty PORT counts as unset
    host: str = "0.0.0.0"
    port: int = 3000

    # uvicorn logging only; the startup line is always emitted
    log_level: str = "info"


def load_settings(**overrides) -> Settings:
    """Resolve settings once at startup; keyword overrides win over the environment."""
    return Settings(**overrides)
