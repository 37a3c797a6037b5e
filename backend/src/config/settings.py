"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    TESTING = _flag("TESTING")
    DEBUG = _flag("DEBUG")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Auth
    # Signing secret for access tokens. Empty means every authenticated call fails closed.
    JWT_SECRET = os.getenv("JWT_SECRET", "")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_ISSUER = os.getenv("JWT_ISSUER", "")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "")

    # Storage: "prisma" (PostgreSQL) or "memory" (process-local, dev/tests)
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "prisma")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Links placed in notifications and e-mails
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000").rstrip("/")

    # E-mail escalation
    MAIL_BACKEND = os.getenv("MAIL_BACKEND", "smtp")  # "smtp" or "memory"
    SMTP_SERVER = os.getenv("SMTP_HOST", "localhost")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USER = os.getenv("SMTP_EMAIL", "")
    SMTP_PASSWORD = os.getenv("SMTP_PASSWORD", "")
    SMTP_TIMEOUT = float(os.getenv("SMTP_TIMEOUT", "15"))
    FROM_EMAIL = os.getenv("FROM_EMAIL", "")
    FROM_NAME = os.getenv("FROM_NAME", "Threadline")
    BRAND_NAME = os.getenv("BRAND_NAME", "Threadline")
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "")
    EMAIL_PREVIEW_CHARS = int(os.getenv("EMAIL_PREVIEW_CHARS", "200"))

    # Live delivery
    REPLAY_LIMIT = int(os.getenv("REPLAY_LIMIT", "20"))
    SSE_KEEPALIVE_SECONDS = float(os.getenv("SSE_KEEPALIVE_SECONDS", "25"))

    # Payload shapes for the two notification types that have two observed
    # client payloads. See DESIGN.md before changing the defaults.
    NEW_ADMIN_COMMENT_SHAPE = os.getenv("NEW_ADMIN_COMMENT_SHAPE", "spread")
    FILE_ADDED_SHAPE = os.getenv("FILE_ADDED_SHAPE", "dispatch")

    # Listing limits
    NOTIFICATIONS_PAGE_SIZE: int = int(os.getenv("NOTIFICATIONS_PAGE_SIZE", "10"))
    THREAD_MESSAGE_LIMIT: int = int(os.getenv("THREAD_MESSAGE_LIMIT", "500"))
    ADMIN_THREADS_PAGE_SIZE: int = int(os.getenv("ADMIN_THREADS_PAGE_SIZE", "20"))
    ADMIN_MESSAGES_PAGE_SIZE: int = int(os.getenv("ADMIN_MESSAGES_PAGE_SIZE", "50"))

    # Attachment storage
    UPLOAD_BASE = os.getenv("UPLOAD_BASE", "uploads")
    PUBLIC_FILES_URL = os.getenv("PUBLIC_FILES_URL", "http://localhost:5001/files").rstrip("/")
    MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "25"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    STORAGE_BACKEND = "memory"
    MAIL_BACKEND = "memory"


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
