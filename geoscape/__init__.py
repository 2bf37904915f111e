"""
geoscape: configuration core for a turn-based strategy game

Default options, command-line overrides, typed option access and the
settings file shared by every game subsystem.
"""

__version__ = "0.5.0"
__author__ = "geoscape Contributors"

from .settings import Configuration
from .utils.logging_config import setup_logging

__all__ = [
    "Configuration",
    "setup_logging",
]
