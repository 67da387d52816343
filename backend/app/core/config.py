from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application configuration settings."""

    # Application
    APP_NAME: str = "DataCanvas"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5000,http://localhost:5173"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Seed a demo project on startup when the store is empty
    DEMO_MODE: bool = False

    # Charts
    TOP_TERMS_LIMIT: int = 10  # Distribution and grouped-average charts

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
