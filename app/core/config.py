from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./qads.db"
    ENVIRONMENT: str = "development"  # "development" or "production"
    LOG_LEVEL: str = "INFO"
    APP_VERSION: str = "1.0.0"

    CORS_ORIGINS: List[str] = ["*"]

    # Admin maintenance endpoints are disabled while this is unset
    ADMIN_API_KEY: Optional[str] = None

    @property
    def is_production(self):
        return self.ENVIRONMENT == "production"

    @property
    def is_sqlite(self):
        return self.DATABASE_URL.startswith("sqlite")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
