"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./billing.sqlite3"

    # Service
    service_name: str = "billing-gateway"
    log_level: str = "INFO"

    # Identity
    profile_header: str = "profile_id"

    # Billing rules
    deposit_limit_percent: int = 25  # Share of outstanding job value a client may deposit at once
    best_clients_default_limit: int = 2
    best_clients_max_limit: int = 100  # Larger requested limits are clamped


settings = Settings()
