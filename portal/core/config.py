from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(RuntimeError):
    """Raised when configuration values are missing or invalid."""


class Settings(BaseSettings):
    project_name: str = "department_portal"
    load_dotenv()

    # ODBC connection string. TLS options for the store belong in here too.
    db_url: Optional[str] = None
    db_connect_timeout: int = 30

    upload_root: str = "uploads"
    report_missing_records: bool = False

    cors_origins: List[str] = ["*"]
    port: int = 3000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def require_db_url(self) -> str:
        if not self.db_url:
            raise ConfigError("DB_URL is not set. Define it in .env.")
        return self.db_url


@lru_cache()
def get_settings():
    return Settings()
