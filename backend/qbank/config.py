"""
Application configuration from environment variables.
Loads .env from the backend directory so settings are found regardless of cwd.
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env next to backend/ (parent of qbank/) — load explicitly so it applies even when run from repo root
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"

if _ENV_FILE.exists():
    from dotenv import load_dotenv
    load_dotenv(_ENV_FILE, override=False)


class Settings(BaseSettings):
    """Load and validate config from env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database: sqlite for local dev and tests, postgresql for production
    database_url: str = "sqlite:///./qbank_dev.db"
    # Echo SQL statements (development only)
    sql_echo: bool = False

    # Environment: set ENV=production in production
    env: str = ""
    debug: bool = False
    log_level: str = "INFO"

    # CORS: comma-separated origins, "*" for any
    cors_origins: str = "*"

    # Seed HTML/CSS/JavaScript categories on startup when the table is empty
    seed_categories: bool = True

    # GET /categories paging
    default_page_size: int = 10
    max_page_size: int = 100

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    @property
    def origins(self) -> list[str]:
        """CORS origins as a list."""
        return [o.strip() for o in (self.cors_origins or "").split(",") if o.strip()]


settings = Settings()
