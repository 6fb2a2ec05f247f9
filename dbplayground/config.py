from typing import Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Playground settings, read from the environment and `.env`."""

    app_name: str = "DB Playground"
    debug: bool = False
    environment: Literal["development", "test", "production"] = "development"

    # Database
    database_url: str = "sqlite:///./dbplayground.db"
    echo_sql: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Playground
    lookup_first_name: str = "Nick"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if "://" not in v or not v.split("://", 1)[0]:
            raise ValueError("database_url must look like '<dialect>[+driver]://...'")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

def get_settings() -> Settings:
    return Settings()

settings = Settings()
