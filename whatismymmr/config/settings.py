"""Client settings and configuration."""
import os
import sys
from pathlib import Path
from typing import Optional
from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))


def _float_or_none(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    """
    whatismymmr.com asks every client to identify itself and to stay under
    60 requests per minute. The defaults below are those published limits;
    the environment overrides exist for tests and self-hosted mirrors.
    """

    VERSION:   str = "1.0.0"
    CLIENT_ID: str = "com.whatismymmr.python-client"

    # ── Rate limit (tokens per interval, shared by every client) ──────────
    RATE_LIMIT_TOKENS:   int   = int(os.getenv('WHATISMYMMR_RATE_LIMIT_TOKENS', '60'))
    RATE_LIMIT_INTERVAL: float = float(os.getenv('WHATISMYMMR_RATE_LIMIT_INTERVAL', '60'))

    # ── HTTP ───────────────────────────────────────────────────────────────
    BASE_DOMAIN:     str             = os.getenv('WHATISMYMMR_BASE_DOMAIN', 'whatismymmr.com')
    DEFAULT_REGION:  str             = os.getenv('WHATISMYMMR_DEFAULT_REGION', 'na')
    # None means no timeout at all, only what the transport does by itself
    REQUEST_TIMEOUT: Optional[float] = _float_or_none(os.getenv('WHATISMYMMR_REQUEST_TIMEOUT'))

    # ── Logging ────────────────────────────────────────────────────────────
    LOG_LEVEL: str           = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR:   Optional[Path] = Path(os.environ['WHATISMYMMR_LOG_DIR']) if os.getenv('WHATISMYMMR_LOG_DIR') else None

    @classmethod
    def validate(cls) -> None:
        if cls.RATE_LIMIT_TOKENS <= 0:
            raise ValueError("WHATISMYMMR_RATE_LIMIT_TOKENS must be a positive integer")
        if cls.RATE_LIMIT_INTERVAL <= 0:
            raise ValueError("WHATISMYMMR_RATE_LIMIT_INTERVAL must be a positive number of seconds")

    @classmethod
    def user_agent(cls) -> str:
        """Identifying header value: ``<platform>:<client-id>:v<version>``."""
        return f"{sys.platform}:{cls.CLIENT_ID}:v{cls.VERSION}"


settings = Settings()
