"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "LiftLog progress analytics"
    VERSION: str = "0.1.0"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "liftlog"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        return (f"postgresql+psycopg2://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
