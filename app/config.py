"""
Application configuration
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _get_env_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return int(raw)
    except ValueError:
        return default


class Settings:
    """Service settings from environment variables"""

    # Database - a full SQLAlchemy URL wins over the SQLite file path
    DATABASE_PATH: str = os.getenv("DATABASE_PATH", "cricket_scorer.db")
    DATABASE_URL: str = os.getenv("DATABASE_URL", f"sqlite:///{DATABASE_PATH}")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_env_int("PORT", 3000)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma-separated extra CORS origins
    CORS_ORIGINS: list[str] = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()
    ]


settings = Settings()
