"""
Settings package for geoscape.

This package holds the game configuration: default options, command-line
overrides, typed option access and the settings file.

Usage:
    from geoscape.settings import Configuration

    config = Configuration()
    if config.init(sys.argv[1:]):
        width = config.get_int("displayWidth")
"""

from .core import Configuration
from .types import (
    CliOverrides,
    ConfigError,
    FolderResolution,
    Platform,
    ResolutionState,
    ValidationResult,
)
from .paths import PlatformPaths, QtPlatformPaths
from .rulesets import RulesetList

__all__ = [
    "Configuration",
    "CliOverrides",
    "ConfigError",
    "FolderResolution",
    "Platform",
    "ResolutionState",
    "ValidationResult",
    "PlatformPaths",
    "QtPlatformPaths",
    "RulesetList",
]
