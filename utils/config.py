"""
Configuration module for the selector condition.

Centralizes environment variable handling so the allow-list seed, the
administrator set and the notification switches can be provided through a
.env file or the process environment.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from utils.logging import get_logger

# Load environment variables from .env file
load_dotenv()

logger = get_logger("utils.config")


@dataclass
class ConditionConfig:
    """Settings used to build an allow-list and its gate."""

    allowed_selectors: List[str] = field(default_factory=list)
    admins: List[str] = field(default_factory=list)
    enable_notifications: bool = True
    resolve_signatures: bool = False


class Config:
    """Global configuration handler."""

    DEFAULT_TIMEOUT = 30  # seconds

    @staticmethod
    def get_env_int(key: str, default: int) -> int:
        """Get environment variable as integer with fallback to default."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s. Using default %s", key, value, default)
            return default

    @staticmethod
    def get_env_bool(key: str, default: bool) -> bool:
        """Get environment variable as boolean with fallback to default."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("true", "yes", "1")

    @staticmethod
    def get_env_list(key: str) -> List[str]:
        """Get a comma-separated environment variable as a list, dropping blanks."""
        value = os.getenv(key) or ""
        return [item.strip() for item in value.split(",") if item.strip()]

    @staticmethod
    def get_condition_config() -> ConditionConfig:
        """Get allow-list and notification settings."""
        return ConditionConfig(
            allowed_selectors=Config.get_env_list("ALLOWED_SELECTORS"),
            admins=Config.get_env_list("CONDITION_ADMINS"),
            enable_notifications=Config.get_env_bool("CONDITION_ENABLE_NOTIFICATIONS", True),
            resolve_signatures=Config.get_env_bool("CONDITION_RESOLVE_SIGNATURES", False),
        )

    @classmethod
    def get_request_timeout(cls) -> int:
        """Get HTTP request timeout in seconds."""
        return cls.get_env_int("REQUEST_TIMEOUT", cls.DEFAULT_TIMEOUT)
