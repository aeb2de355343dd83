"""Centralised settings for the eksi client.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Site
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get("EKSI_BASE_URL", "https://eksisozluk.com/")
    )

    # ------------------------------------------------------------------
    # Transport gate
    # ------------------------------------------------------------------
    rate_limit_delay: float = field(
        default_factory=lambda: float(os.environ.get("EKSI_RATE_LIMIT_DELAY", "0.25"))
    )
    retry_cooldown: float = field(
        default_factory=lambda: float(os.environ.get("EKSI_RETRY_COOLDOWN", "5.0"))
    )
    max_retries: int = field(
        default_factory=lambda: int(os.environ.get("EKSI_MAX_RETRIES", "5"))
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("EKSI_REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("EKSI_LOG_LEVEL", "WARNING").upper()
    )


# Module-level singleton — import this everywhere:
#   from eksi.config import settings
settings = Settings()
