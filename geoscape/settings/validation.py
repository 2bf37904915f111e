"""
Settings validation system for geoscape.
"""

import logging
import re
from typing import List, TYPE_CHECKING

from .defaults import default_options
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import Configuration

logger = logging.getLogger(__name__)

_INT_VALUE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)
_BOOL_VALUE = re.compile(r"\s*(true|false)\s*", re.ASCII)


class SettingsValidator:
    """Validates resolved folders and stored option values."""

    def __init__(self, config: "Configuration"):
        self.config = config

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        if self.config.user_folder is None:
            errors.append("No user folder could be found or created")

        data_folder = self.config.data_folder
        if data_folder is not None:
            if not data_folder.is_dir():
                errors.append(f"Data folder does not exist: {data_folder}")
        elif not any(folder.is_dir() for folder in self.config.data_list):
            errors.append("No data folder found")

        if not self.config.ruleset_names():
            warnings.append("Ruleset list is empty")

        for key, default in default_options(self.config.platform).items():
            if key not in self.config.option_keys():
                continue
            value = self.config.get_string(key)
            if isinstance(default, bool):
                if not _BOOL_VALUE.fullmatch(value):
                    warnings.append(f"Option {key} is not true/false: {value!r}")
            elif isinstance(default, int):
                if not _INT_VALUE.fullmatch(value):
                    warnings.append(f"Option {key} is not a whole number: {value!r}")

        for warning in warnings:
            logger.debug(f"Validation warning: {warning}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
