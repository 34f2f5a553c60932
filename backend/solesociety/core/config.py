from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # App
    APP_NAME: str = "SoleSociety Sneaker API"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Database (local user store)
    DATABASE_URL: str = "sqlite+aiosqlite:///./solesociety.db"
    SEED_DEMO_USER: bool = False

    # KicksDB aggregator (StockX + GOAT)
    KICKS_API_KEY: Optional[str] = None
    KICKS_API_BASE_URL: str = "https://api.kicks.dev"
    UPSTREAM_TIMEOUT_SECONDS: float = 15.0
    UPSTREAM_RETRY_ATTEMPTS: int = 1  # 1 = single attempt, no retry

    # Search
    DEFAULT_SEARCH_LIMIT: int = 20
    DEFAULT_BRAND_LIMIT: int = 10
    CURATED_BRAND: str = "Nike"
    LIKED_LOOKUP_CONCURRENCY: int = 8

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
