import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


@lru_cache
def get_env_filename():
    runtime_env = os.getenv("ENV")
    return f".env.{runtime_env}" if runtime_env else ".env"


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    APP_NAME: str = "Coloring Page Creator"
    APP_VERSION: str = "0.1.0"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    GOOGLE_API_KEY: str = ""
    GOOGLE_IMAGE_MODEL: str = "imagen-4.0-generate-001"
    IMAGE_ASPECT_RATIO: str = "1:1"

    # directory | webhook | webhook_text | none
    SHARE_PROVIDER: str = "directory"
    SHARE_EXPORT_DIR: str = "exports"
    SHARE_WEBHOOK_URL: str = ""
    SHARE_WEBHOOK_TIMEOUT: int = 30

    class Config:
        env_file = get_env_filename()


@lru_cache
def get_settings():
    return Settings()
