# mailsift/config.py
from pydantic_settings import BaseSettings
import os


class Settings(BaseSettings):
    APP_NAME: str = "mailsift"

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG: bool = os.environ.get("DEBUG", "False").lower() in ("1", "true", "yes")

    # ---------------------------------------------------------
    # Domain scoring tiers
    # ---------------------------------------------------------
    TRUSTED_DOMAIN_SCORE: float = float(os.environ.get("TRUSTED_DOMAIN_SCORE", 95.0))
    DEFAULT_DOMAIN_SCORE: float = float(os.environ.get("DEFAULT_DOMAIN_SCORE", 80.0))
    DISPOSABLE_DOMAIN_SCORE: float = float(os.environ.get("DISPOSABLE_DOMAIN_SCORE", 10.0))

    # comma separated, merged into the built-in lists
    EXTRA_TRUSTED_DOMAINS: str = os.environ.get("EXTRA_TRUSTED_DOMAINS", "")
    EXTRA_DISPOSABLE_DOMAINS: str = os.environ.get("EXTRA_DISPOSABLE_DOMAINS", "")

    # ---------------------------------------------------------
    # HTTP API
    # ---------------------------------------------------------
    CORS_ORIGINS: str = os.environ.get("CORS_ORIGINS", "*")
    MAX_UPLOAD_SIZE_MB: int = int(os.environ.get("MAX_UPLOAD_SIZE_MB", 16))
    MAX_BATCH_SIZE: int = int(os.environ.get("MAX_BATCH_SIZE", 1000))

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


def split_csv_setting(value: str) -> list:
    return [v.strip() for v in (value or "").split(",") if v.strip()]


settings = Settings()
