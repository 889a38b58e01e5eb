
import os
from dotenv import load_dotenv

# Load .env before reading anything else
load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./coupons.db")

# Percent discounts are floored to a multiple of this (amounts are minor units)
PERCENT_DISCOUNT_ROUNDING_UNIT = _positive_int("PERCENT_DISCOUNT_ROUNDING_UNIT", 100)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_JSON = _env_bool("LOG_JSON")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
