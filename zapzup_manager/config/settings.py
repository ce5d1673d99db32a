"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # DEBUG forces DEBUG-level logging for the zapzup_manager loggers
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Postgresql Database settings (read by Prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Redis settings
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")

    # Notifications
    # Each user receives updated chat lists on "{CHAT_TOPIC_PREFIX}/{user_id}"
    CHAT_TOPIC_PREFIX: str = os.getenv("CHAT_TOPIC_PREFIX", "/topic/chats")

    # File upload (group icons)
    UPLOAD_BASE = os.getenv("UPLOAD_BASE", "uploads")
    MAX_ICON_MB = float(os.getenv("MAX_ICON_MB", "5"))
    ALLOWED_ICON_TYPES = os.getenv(
        "ALLOWED_ICON_TYPES", "image/png,image/jpeg,image/gif,image/webp"
    ).split(",")


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    UPLOAD_BASE = os.getenv("TEST_UPLOAD_BASE", "test_uploads")


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


def effective_log_level(app_config=Config):
    """Log level for the zapzup_manager loggers under the given config"""
    return "DEBUG" if app_config.DEBUG else app_config.LOG_LEVEL
