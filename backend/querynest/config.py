"""Configuration settings for the Query Nest backend"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    PROJECT_NAME: str = "Query Nest"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    # Database Settings
    POSTGRES_USER: str = "querynest"
    POSTGRES_PASSWORD: str = "querynest_pass"
    POSTGRES_HOST: str = "postgres"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "query_nest"
    DATABASE_URL: Optional[str] = None  # Overrides the POSTGRES_* parts when set

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Session credential Settings
    ACCESS_TOKEN_SECRET: str
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None  # None = token never expires
    JWT_ALGORITHM: str = "HS256"
    COOKIE_NAME: str = "token"

    # CORS Settings
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "https://query-nest.web.app",
        "https://query-nest.firebaseapp.com",
    ]

    # Authorization policy
    GUARD_ALL_WRITES: bool = False

    # Counter reconciliation
    RECONCILE_ON_STARTUP: bool = False
    RECONCILE_INTERVAL_MINUTES: int = 60

    # Celery Settings
    CELERY_BROKER_URL: str = "redis://redis:6379/2"
    CELERY_RESULT_BACKEND: str = "redis://redis:6379/3"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def COOKIE_SECURE(self) -> bool:
        return self.is_production

    @property
    def COOKIE_SAMESITE(self) -> str:
        return "none" if self.is_production else "strict"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
