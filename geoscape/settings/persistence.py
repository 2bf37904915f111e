"""
Settings file storage for geoscape.

Options and rulesets are stored together in one JSON document per profile::

    {
      "options": {"displayHeight": "400", "displayWidth": "640", ...},
      "rulesets": ["Xcom1Ruleset"]
    }

Option keys are always written in sorted order so the same option set gives
byte-identical files. Ruleset order is kept as is.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import orjson

from .cache import format_bool
from .defaults import DEFAULT_PROFILE_NAME
from .registry import OptionRegistry

logger = logging.getLogger(__name__)

SETTINGS_EXTENSION = ".json"
OPTIONS_KEY = "options"
RULESETS_KEY = "rulesets"


def settings_path(folder: Optional[Path], name: str = DEFAULT_PROFILE_NAME) -> Path:
    """Path of the settings file for profile ``name`` inside ``folder``."""
    filename = name + SETTINGS_EXTENSION
    return Path(folder) / filename if folder else Path(filename)


def _to_option_string(value: Any) -> Optional[str]:
    """Canonical string form of a scalar read from a hand-edited file."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, (int, float)):
        return str(value)
    if value is None:
        return ""
    return None


class SettingsStore:
    """Reads and writes the option registry and its ruleset list."""

    def __init__(self, registry: OptionRegistry):
        self.registry = registry
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load(self, folder: Optional[Path], name: str = DEFAULT_PROFILE_NAME) -> bool:
        """Merge a settings file into the registry.

        A missing file is not an error: nothing changes and False is returned.
        An unreadable or malformed file is reported and also leaves the
        registry untouched.

        Returns:
            True if the file was read and applied.
        """
        path = settings_path(folder, name)
        if not path.is_file():
            self.logger.debug(f"No settings file at {path}")
            return False

        try:
            with path.open("rb") as f:
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.warning(f"Failed to load {path.name}: {e}")
            return False

        if not isinstance(data, dict):
            self.logger.warning(f"Failed to load {path.name}: document is not a mapping")
            return False

        options = data.get(OPTIONS_KEY)
        if not isinstance(options, dict):
            # Flat document: every top-level entry except rulesets is an option
            options = {k: v for k, v in data.items() if k != RULESETS_KEY}

        values: Dict[str, str] = {}
        for key, value in options.items():
            text = _to_option_string(value)
            if text is None:
                self.logger.warning(f"Ignoring non-scalar option '{key}' in {path.name}")
                continue
            values[str(key)] = text
        self.registry.update(values)

        rulesets = data.get(RULESETS_KEY)
        if isinstance(rulesets, list):
            self.registry.rulesets.replace(str(item) for item in rulesets)
        elif rulesets is not None:
            self.logger.warning(f"Ignoring malformed rulesets in {path.name}")

        self.logger.debug(f"Loaded {len(values)} options from {path}")
        return True

    def dumps(self) -> bytes:
        """Serialize the registry; identical option sets give identical bytes."""
        document = {
            OPTIONS_KEY: self.registry.snapshot(),
            RULESETS_KEY: self.registry.rulesets.to_list(),
        }
        return orjson.dumps(
            document, option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE
        )

    def save(self, folder: Optional[Path], name: str = DEFAULT_PROFILE_NAME) -> bool:
        """Write the registry to its settings file.

        The document is written to a temporary file next to the target and
        then swapped in, so a failed save leaves the previous file intact.

        Returns:
            True on success, False if the registry could not be encoded or
            the file could not be written.
        """
        path = settings_path(folder, name)
        try:
            payload = self.dumps()
        except orjson.JSONEncodeError as e:
            self.logger.warning(f"Failed to save {path.name}: {e}")
            return False

        tmp_path = path.with_name(path.name + ".tmp")
        try:
            with tmp_path.open("wb") as f:
                f.write(payload)
            os.replace(tmp_path, path)
        except OSError as e:
            self.logger.warning(f"Failed to save {path.name}: {e}")
            tmp_path.unlink(missing_ok=True)
            return False

        self.logger.debug(f"Saved {len(self.registry)} options to {path}")
        return True
