"""
storefront/config/settings.py
Environment-driven settings for the storefront API.

Values are read from the process environment after loading `.env`
from the project root. Anything read at call time (simulation delays,
rate limiting) goes through the helpers so tests can patch the env.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ENV_FILE = PROJECT_ROOT / ".env"

load_dotenv(dotenv_path=ENV_FILE)


def get_bool_env(key: str, default: bool = False) -> bool:
    """Get a boolean value from environment variable."""
    value = os.getenv(key, str(default)).lower()
    return value in ('true', '1', 'yes', 'on', 'enabled')


def get_float_env(key: str, default: float) -> float:
    """Get a float value from environment variable, falling back on garbage."""
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def get_int_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ================= DATABASE =================

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./storefront.db")

# ================= AUTH =================

SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-key-change-in-production")
REFRESH_SECRET_KEY = os.getenv("JWT_REFRESH_SECRET_KEY", "refresh-secret-key-change-in-production")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = get_int_env("ACCESS_TOKEN_EXPIRE_MINUTES", 30)
REFRESH_TOKEN_EXPIRE_DAYS = get_int_env("REFRESH_TOKEN_EXPIRE_DAYS", 7)

# ================= SERVER =================

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = get_int_env("PORT", 8000)

DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8080",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:8080",
]


def allowed_origins() -> list:
    origins = list(DEFAULT_ORIGINS)
    extra = os.getenv("ALLOWED_ORIGINS", "").split(",")
    origins.extend(o.strip() for o in extra if o.strip())
    return origins


def rate_limit_enabled() -> bool:
    return get_bool_env("RATE_LIMIT_ENABLED", True)


# ================= SIMULATION =================

def payment_delay_seconds() -> float:
    """Artificial latency of the demo payment step."""
    return max(0.0, get_float_env("PAYMENT_SIMULATION_DELAY_SECONDS", 1.0))


def contact_delay_seconds() -> float:
    return max(0.0, get_float_env("CONTACT_SIMULATION_DELAY_SECONDS", 1.0))
