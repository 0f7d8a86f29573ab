from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # -----------------------------
    # Database
    # -----------------------------
    DATABASE_URL: str = "sqlite:///./locations.db"
    SQL_ECHO: bool = False

    # -----------------------------
    # API
    # -----------------------------
    API_PREFIX: str = "/api/v1"
    MAX_PAGE_SIZE: int = 500

    # -----------------------------
    # Sample data
    # -----------------------------
    SEED_SAMPLE_DATA: bool = False

    # -----------------------------
    # App Environment
    # -----------------------------
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# -----------------------------
# Cached settings instance
# -----------------------------
@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
