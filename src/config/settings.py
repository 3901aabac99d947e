# src/config/settings.py

"""Central configuration for the storefront catalog client."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront catalog client."""

    # --- Upstream API ---
    API_BASE_URL: str = "https://fakestoreapi.com"
    REQUEST_TIMEOUT: float = 10.0       # Seconds per attempt
    MAX_RETRIES: int = 3                # Extra attempts after the first
    RETRY_DELAY: float = 1.0            # Base for linear backoff (secs)
    DEFAULT_HEADERS: dict[str, str] = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"

    # --- Catalog ---
    CACHE_TTL: float = 60.0             # Revalidation window (secs)
    FEATURED_LIMIT: int = 4

    # --- Runtime ---
    ENVIRONMENT: str = os.getenv("STOREFRONT_ENV", "production")

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"

    @classmethod
    def is_development(cls) -> bool:
        """Return True when per-attempt diagnostics should be logged."""
        return cls.ENVIRONMENT.lower() == "development"


@dataclass(frozen=True)
class ApiConfig:
    """Immutable settings handed to an ApiClient at construction."""

    base_url: str = Settings.API_BASE_URL
    timeout: float = Settings.REQUEST_TIMEOUT
    retries: int = Settings.MAX_RETRIES
    retry_delay: float = Settings.RETRY_DELAY
    headers: dict[str, str] = field(
        default_factory=lambda: dict(Settings.DEFAULT_HEADERS)
    )
    impersonate: BrowserTypeLiteral = Settings.IMPERSONATE_BROWSER
    verbose: bool = False

    @classmethod
    def from_settings(cls) -> "ApiConfig":
        """Build a config from the current Settings values."""
        return cls(
            base_url=Settings.API_BASE_URL,
            timeout=Settings.REQUEST_TIMEOUT,
            retries=Settings.MAX_RETRIES,
            retry_delay=Settings.RETRY_DELAY,
            headers=dict(Settings.DEFAULT_HEADERS),
            impersonate=Settings.IMPERSONATE_BROWSER,
            verbose=Settings.is_development(),
        )
