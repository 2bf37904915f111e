"""
Configuration type definitions and exceptions for geoscape.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class Platform(Enum):
    """Platform profile selecting the device-dependent defaults."""
    DESKTOP = "desktop"
    HANDHELD = "handheld"


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be accessed."""
    pass


class ResolutionState(Enum):
    """How the user folder was settled at startup."""
    PRESET = "preset"
    FOUND = "found"
    CREATED = "created"
    UNRESOLVED = "unresolved"


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]


@dataclass
class CliOverrides:
    """What a command-line overlay changed."""
    options: List[str] = field(default_factory=list)
    data_folder: Optional[Path] = None
    user_folder: Optional[Path] = None
    unknown: List[str] = field(default_factory=list)


@dataclass
class FolderResolution:
    """Outcome of the startup folder search."""
    state: ResolutionState
    user_folder: Optional[Path] = None
    config_folder: Optional[Path] = None
    data_list: List[Path] = field(default_factory=list)
    loaded: bool = False
    saved: bool = False
