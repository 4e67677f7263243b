import os
import json
from typing import Any, List

from dotenv import load_dotenv

load_dotenv()


def parse_cors_origins(v: Any) -> List[str]:
    """Parse CORS origins from string or list"""
    if isinstance(v, list):
        return v
    if isinstance(v, str):
        if v.startswith('['):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                pass
        return [origin.strip() for origin in v.split(',') if origin.strip()]
    return []


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ===========
# Application
# ===========
APP_NAME = "Portfolio API"
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")
PORT = int(os.getenv("PORT", 5000))

# ========
# Database
# ========
DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_NAME = os.getenv("DATABASE_NAME")
SEED_ON_STARTUP = env_flag("SEED_ON_STARTUP")

# ====
# Auth
# ====
DEFAULT_JWT_SECRET = "super-secret-key-change"
JWT_SECRET = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

DEFAULT_ADMIN_EMAIL = "admin@portfolio.dev"
DEFAULT_ADMIN_PASSWORD = "admin123"
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", DEFAULT_ADMIN_EMAIL)
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)
# A precomputed passlib hash wins over the plain password
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH")

# ====
# CORS
# ====
FRONTEND_URL = os.getenv("FRONTEND_URL")
CORS_ORIGINS = parse_cors_origins(
    os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:5174")
)
if FRONTEND_URL and FRONTEND_URL not in CORS_ORIGINS:
    CORS_ORIGINS.append(FRONTEND_URL)


def insecure_defaults() -> List[str]:
    """Names of auth settings still running on their development defaults."""
    names = []
    if JWT_SECRET == DEFAULT_JWT_SECRET:
        names.append("JWT_SECRET")
    if ADMIN_EMAIL == DEFAULT_ADMIN_EMAIL:
        names.append("ADMIN_EMAIL")
    if not ADMIN_PASSWORD_HASH and ADMIN_PASSWORD == DEFAULT_ADMIN_PASSWORD:
        names.append("ADMIN_PASSWORD")
    return names
