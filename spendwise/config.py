"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SPENDWISE_",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./spendwise.db"

    # Service
    service_name: str = "spendwise"
    log_level: str = "INFO"

    # Identity: user id is set upstream by the identity provider
    user_id_header: str = "X-User-ID"

    # Listing limits
    recent_nudge_limit: int = 5
    expense_page_size: int = 200


settings = Settings()
