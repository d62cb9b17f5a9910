"""Core module - configuration, logging, connections, and shared models."""

from surveylens.core.config import Settings, get_settings
from surveylens.core.models import Result

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models
    "Result",
]
