"""
Environment-driven settings for countryfetch.
"""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://restcountries.com/v3.1"
DEFAULT_TIMEOUT = 20.0
DEFAULT_LOG_LEVEL = "WARNING"


def env_bool(key: str, default: bool = False) -> bool:
    return os.getenv(key, str(default)).lower() in ("1", "true", "yes", "on")


def env_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool | None = None  # None = decide from the stream (TTY)

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the process environment (and a .env file, if any)."""
        color = None
        if os.getenv("NO_COLOR"):
            color = False
        elif os.getenv("COUNTRYFETCH_COLOR"):
            color = env_bool("COUNTRYFETCH_COLOR")
        return cls(
            base_url=(os.getenv("RESTCOUNTRIES_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            timeout=env_float("COUNTRYFETCH_TIMEOUT", DEFAULT_TIMEOUT),
            log_level=(os.getenv("COUNTRYFETCH_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            color=color,
        )
