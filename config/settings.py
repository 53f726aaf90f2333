"""Configuration settings for the EatSafe compliance core."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Deployment variant whose framework GET /framework serves by default
    # (see eatsafe.registry.variants)
    app_variant: str = "chefos"

    # Framework Registry Configuration
    extra_frameworks_dir: str | None = None

    # API Configuration
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8081",
        "http://localhost:5173",
    ]

    # Tracing Configuration
    tracing_enabled: bool = True
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
