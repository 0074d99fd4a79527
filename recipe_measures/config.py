"""Configuration and logging setup for recipe-measures."""

import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

APP_NAME = "recipe-measures"

LOG_LEVEL_ENV = "RECIPE_MEASURES_LOG_LEVEL"
DEFAULT_SERVINGS_ENV = "RECIPE_MEASURES_DEFAULT_SERVINGS"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_log_level() -> str:
    """Get the configured log level name."""
    return os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def get_default_servings() -> int | None:
    """Get the fallback serving size for recipes that don't state one."""
    raw = os.getenv(DEFAULT_SERVINGS_ENV)
    if not raw:
        return None
    try:
        servings = int(raw)
    except ValueError:
        return None
    return servings if servings > 0 else None


def configure_logging(level: str | None = None) -> None:
    """
    Send package log records to stderr.

    Args:
        level: Log level name; defaults to the configured level
    """
    level_name = (level or get_log_level()).upper()
    package_logger = logging.getLogger("recipe_measures")
    package_logger.setLevel(getattr(logging, level_name, logging.WARNING))

    # Replace rather than stack handlers when called twice
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
