"""Process-wide settings and logging configuration."""

from lambdapush.core.config import Settings, get_settings
from lambdapush.core.logging import configure_structlog

__all__ = ["Settings", "get_settings", "configure_structlog"]
