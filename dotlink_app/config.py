from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = False

    # Application
    app_name: str = "dotlink"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # Public prefix for short links: <base_url>/r/<code>
    base_url: str = "https://dotlink.glitch.me"

    # Record storage
    record_store_backend: str = "json"  # Options: "json", "sql"
    urls_file_path: str = "urls.json"
    database_url: str = "sqlite:///./dotlink.db"

    # Blacklist (curated externally, never written by the service)
    blacklist_file_path: str = "blacklist.json"

    # Short code generation strategy
    short_code_strategy: str = "random"  # Options: "random", "base62"
    short_code_length: int = 9
    short_code_salt: int = 1256  # Salt for Base62 strategy
    max_retries: int = 5

    # Logging
    log_level: str = "INFO"
    log_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )

    # Views
    templates_dir: str = str(PACKAGE_DIR / "templates")
    static_dir: str = str(PACKAGE_DIR / "static")

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
