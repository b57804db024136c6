import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _normalize_url(url: str) -> str:
    # Heroku-style URLs use the scheme SQLAlchemy dropped.
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


@dataclass
class Settings:
    app_env: str = os.getenv("APP_ENV", "development")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./books.db")
    test_database_url: str = os.getenv("TEST_DATABASE_URL", "sqlite:///./books-test.db")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    sql_echo: bool = _env_flag("SQL_ECHO")
    cors_origins: List[str] = field(
        default_factory=lambda: [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]
    )

    @property
    def active_database_url(self) -> str:
        url = self.test_database_url if self.app_env == "test" else self.database_url
        return _normalize_url(url)


settings = Settings()
