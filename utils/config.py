import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./restaurant_ops.db")
SQL_ECHO = _get_bool("SQL_ECHO")

API_PREFIX = os.getenv("API_PREFIX", "/api").rstrip("/")
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# bcrypt cost factor for restaurant passwords
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))

# Order and booking status changes are unrestricted unless this is switched on
ENFORCE_STATUS_TRANSITIONS = _get_bool("ENFORCE_STATUS_TRANSITIONS")
