"""Application configuration from environment."""
from pydantic_settings import BaseSettings

DEFAULT_SECRET_KEY = "change-me-in-production-use-env"


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "REST API Tutor"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./restapi_tutor.db"
    create_tables: bool = True  # create_all on startup; use alembic otherwise

    # JWT bearer sessions
    secret_key: str = DEFAULT_SECRET_KEY
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days

    # Password hashing
    bcrypt_rounds: int = 12

    # Browser clients of the tutorial
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
