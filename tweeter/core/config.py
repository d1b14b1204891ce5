"""Configuration management for the Tweeter server."""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


# Load environment variables
load_dotenv()

DEFAULT_PORT = 3000
PACKAGE_PUBLIC_DIR = str(Path(__file__).resolve().parent.parent / "public")


class Config:
    """Base configuration for the Tweeter server."""

    # Application
    APP_NAME = os.environ.get("APP_NAME", "Tweeter")

    # Server
    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = int(os.environ.get("PORT") or DEFAULT_PORT)

    # Static resources
    PUBLIC_DIR = os.environ.get("PUBLIC_DIR") or PACKAGE_PUBLIC_DIR

    # Logging (empty LOG_PATH disables the file handler)
    LOG_PATH = os.environ.get("LOG_PATH", "tweeter.log")

    TESTING = False

    @classmethod
    def validate(cls, overrides: dict[str, Any] | None = None) -> None:
        """Validate required configuration, taking overrides into account."""
        settings = {"PORT": cls.PORT, "PUBLIC_DIR": cls.PUBLIC_DIR}
        settings.update(overrides or {})

        port = settings["PORT"]
        if not isinstance(port, int) or not 1 <= port <= 65535:
            raise ValueError(f"PORT must be an integer between 1 and 65535: {port}")

        public_dir = settings["PUBLIC_DIR"]
        if not os.path.isdir(public_dir):
            raise ValueError(f"PUBLIC_DIR is not a directory: {public_dir}")


class DevelopmentConfig(Config):
    """Development configuration."""


class ProductionConfig(Config):
    """Production configuration."""


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    LOG_PATH = ""


# Select configuration based on environment
config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
