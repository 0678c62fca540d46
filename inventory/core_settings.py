from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    POSTGRES_HOST: str = "postgres"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "sweetshop"
    POSTGRES_USER: str = "sweetshop"
    POSTGRES_PASSWORD: str = "sweetshop"
    # Overrides the Postgres settings above when set (e.g. sqlite:// for local runs)
    DATABASE_URL: Optional[str] = None

    SERVICE_NAME: str = "inventory-service"
    SERVICE_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    API_PREFIX: str = "/api"
    CORS_ORIGINS: str = "*"

    API_BASE_URL: str = "http://localhost:5000/api"
    CLIENT_TIMEOUT: float = 5.0

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()
