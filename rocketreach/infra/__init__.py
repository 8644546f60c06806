# Infrastructure - configuration and logging

from .config import ConfigManager, Settings, load_settings
from .logging import RequestContext, configure_logging, get_logger

__all__ = [
    "ConfigManager",
    "Settings",
    "load_settings",
    "RequestContext",
    "configure_logging",
    "get_logger",
]
