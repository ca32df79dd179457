"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from .env or environment.

    ADMIN_API_KEY has no default: a missing key aborts startup.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./rides.db"
    ADMIN_API_KEY: str
    CORS_ORIGINS: str = "http://localhost:3000"
    DB_POOL_SIZE: int = 5
    LOG_LEVEL: str = "INFO"
    SEED_SAMPLE_DATA: bool = False


settings = Settings()
