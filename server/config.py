"""
Runtime configuration for the GitHub Guardian server.

Values come from the process environment, optionally seeded from a `.env`
file next to this module or in the working directory.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the server directory explicitly, then the working directory
load_dotenv(Path(__file__).resolve().parent / ".env")
load_dotenv()

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_RATE_LIMIT = "10/minute"
DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:5173",
    "http://localhost:3000",
    "http://localhost:8000",
    "http://localhost:8080",
)


def _split_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_MODEL
    environment: str = "development"
    log_level: str = "INFO"
    rate_limit: str = DEFAULT_RATE_LIMIT
    allowed_origins: tuple[str, ...] = field(default=DEFAULT_ALLOWED_ORIGINS)

    @classmethod
    def from_env(cls) -> "Settings":
        # API_KEY is accepted for deployments configured with the older name
        api_key = (os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or "").strip()
        return cls(
            gemini_api_key=api_key or None,
            gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
            environment=os.getenv("ENVIRONMENT", "development").lower(),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            rate_limit=os.getenv("RATE_LIMIT", DEFAULT_RATE_LIMIT),
            allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS")),
        )


def get_settings() -> Settings:
    """Read settings fresh so a missing key fails the request, not startup."""
    return Settings.from_env()
