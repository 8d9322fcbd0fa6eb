import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# backend/ directory, parent of the store_admin package
PROJECT_ROOT = Path(__file__).parent.parent.parent


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        self.DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./catalog.db")
        self.API_PREFIX = os.getenv("API_PREFIX", "/api")
        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]
        self.IDENTITY_HEADER = os.getenv("IDENTITY_HEADER", "X-User-Id")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_DIR = Path(os.getenv("LOG_DIR", str(PROJECT_ROOT / "logs")))
        self.LOG_TO_FILE = _as_bool(os.getenv("LOG_TO_FILE", "true"))


settings = Settings()
