"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./rentatool.db"
    seed_default_tools: bool = True  # Load the stock inventory on startup

    # Service
    service_name: str = "rentatool-gateway"
    log_level: str = "INFO"


settings = Settings()
