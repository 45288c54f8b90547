"""
Ghostwriter Core Module

Contains core systems including configuration, constants, exceptions, and logging.
"""

from .config import ClientSettings, load_config, get_settings, set_settings
from .constants import *
from .exceptions import *
from .logging_config import setup_logging, get_logger, LogLevel

__all__ = [
    'ClientSettings',
    'load_config',
    'get_settings',
    'set_settings',
    'setup_logging',
    'get_logger',
    'LogLevel',
]
