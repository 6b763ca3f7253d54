import os
from datetime import timedelta

from dotenv import load_dotenv

# Pick up a local .env before reading anything below
load_dotenv()


def _flag(name, default="false"):
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes")


def database_url():
    url = os.environ.get("DATABASE_URL")

    # LOCAL FALLBACK
    if not url:
        url = "sqlite:///job_board.db"

    # Fix postgres:// issue
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    return url


class Config:
    # ================= SECRET KEY =================
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")

    # ================= DATABASE =================
    SQLALCHEMY_DATABASE_URI = database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # ================= SESSIONS =================
    SESSION_BACKEND = os.environ.get("SESSION_BACKEND", "memory")
    SESSION_TTL_HOURS = int(os.environ.get("SESSION_TTL_HOURS", 24))
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = _flag("RENDER") or _flag("SESSION_COOKIE_SECURE")
    PERMANENT_SESSION_LIFETIME = timedelta(hours=SESSION_TTL_HOURS)

    # JSON API authenticated by cookie, no HTML forms to protect
    WTF_CSRF_ENABLED = False

    # ================= FRONTEND / LOGGING =================
    FRONTEND_DIR = os.environ.get("FRONTEND_DIR", "frontend")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR = os.environ.get("LOG_DIR")
    PORT = int(os.environ.get("PORT", 8080))
