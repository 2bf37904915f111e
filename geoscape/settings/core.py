"""
Core configuration object for geoscape.
"""

import logging
import os
import sys
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, KeysView, List, Optional, Sequence, Union

from .. import __version__
from .cli import CliOverlay, help_text, wants_help
from .defaults import DEFAULT_PROFILE_NAME, default_options, resolve_platform
from .folders import FolderResolver
from .paths import PlatformPaths, QtPlatformPaths
from .persistence import SettingsStore, settings_path
from .registry import OptionRegistry
from .rulesets import RulesetList
from .types import CliOverrides, FolderResolution, Platform, ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)

PLATFORM_ENV = "GEOSCAPE_PLATFORM"


class Configuration:
    """
    Process-wide game configuration.

    One instance is created at startup and handed to every subsystem that
    reads options. It owns the option registry, its parsed-value cache, the
    ruleset list and the resolved data/user/config folders.

    Typed reads that hit the cache take no lock, so they stay cheap on hot
    paths. Writes, loads, saves and cache misses are serialized by one lock.
    """

    def __init__(
        self,
        platform: Union[str, Platform, None] = None,
        paths: Optional[PlatformPaths] = None,
        user_folder: Optional[Path] = None,
        data_folder: Optional[Path] = None,
    ):
        """Create a configuration with empty options.

        Args:
            platform: Default profile; falls back to $GEOSCAPE_PLATFORM, then "desktop"
            paths: Folder discovery; defaults to QtPlatformPaths
            user_folder: User folder known before the command line is parsed
            data_folder: Data folder known before the command line is parsed
        """
        if platform is None:
            platform = os.environ.get(PLATFORM_ENV, Platform.DESKTOP.value)
        self.platform = resolve_platform(platform)
        self.paths: PlatformPaths = paths if paths is not None else QtPlatformPaths()

        self._lock = threading.RLock()
        self._registry = OptionRegistry(RulesetList())
        self._cache = self._registry.cache
        self._store = SettingsStore(self._registry)
        self._overlay = CliOverlay(self._registry)
        self._resolver = FolderResolver(
            self.paths,
            load=lambda folder: self._store.load(folder, DEFAULT_PROFILE_NAME),
            save=lambda folder: self._store.save(folder, DEFAULT_PROFILE_NAME),
        )

        self._data_folder = Path(data_folder) if data_folder is not None else None
        self._data_list: List[Path] = []
        self._user_folder = Path(user_folder) if user_folder is not None else None
        self._config_folder = self._user_folder
        self.resolution: Optional[FolderResolution] = None

    # === STARTUP ===

    def init(self, args: Sequence[str]) -> bool:
        """Set up defaults, command-line overrides and settings storage.

        Order: defaults, then the settings file if the user folder is already
        known, then command-line overrides. A user folder given on the command
        line or discovered afterwards is loaded after the overrides, so its
        file wins for keys present in both.

        Args:
            args: Command-line arguments without the program name

        Returns:
            False if help was requested and startup should stop.
        """
        args = list(args)
        if wants_help(args):
            sys.stdout.write(help_text(self.version))
            return False

        self.create_defaults()
        if self._user_folder is not None:
            self.load()
        self.apply_args(args)

        with self._lock:
            self.resolution = self._resolver.resolve(
                self._data_folder, self._user_folder
            )
            self._data_list = list(self.resolution.data_list)
            self._user_folder = self.resolution.user_folder
            self._config_folder = self.resolution.config_folder
        return True

    def apply_args(self, args: Sequence[str]) -> CliOverrides:
        """Apply command-line overrides; a ``-user`` folder is loaded right away."""
        with self._lock:
            overrides = self._overlay.apply(args)
            if overrides.data_folder is not None:
                self._data_folder = overrides.data_folder
            if overrides.user_folder is not None:
                self._user_folder = overrides.user_folder
                self._config_folder = overrides.user_folder
                self.load()
        return overrides

    def log_folders(self) -> None:
        """Report the resolved folders."""
        logger.info(f"Data folder is: {self._data_folder or ''}")
        for folder in self._data_list:
            logger.info(f"  {folder}")
        logger.info(f"User folder is: {self._user_folder or ''}")
        logger.info(f"Config folder is: {self._config_folder or ''}")
        logger.info("Options loaded successfully.")

    # === DEFAULTS AND STORAGE ===

    def create_defaults(self) -> None:
        """Reset every option and the ruleset list to the platform defaults."""
        with self._lock:
            self._registry.create_defaults(default_options(self.platform))

    def load(self, name: str = DEFAULT_PROFILE_NAME) -> bool:
        """Merge settings file ``name`` from the config folder (no-op if absent)."""
        with self._lock:
            return self._store.load(self._config_folder, name)

    def save(self, name: str = DEFAULT_PROFILE_NAME) -> bool:
        """Write settings file ``name`` into the config folder."""
        with self._lock:
            return self._store.save(self._config_folder, name)

    def settings_file(self, name: str = DEFAULT_PROFILE_NAME) -> Path:
        """Path of settings file ``name``."""
        return settings_path(self._config_folder, name)

    # === OPTION ACCESS ===

    def get_string(self, key: str) -> str:
        return self._registry.get_string(key)

    def set_string(self, key: str, value: str) -> None:
        with self._lock:
            self._registry.set_string(key, value)

    def get_int(self, key: str) -> int:
        try:
            return self._cache.ints[key]
        except KeyError:
            with self._lock:
                return self._registry.get_int(key)

    def set_int(self, key: str, value: int) -> None:
        with self._lock:
            self._registry.set_int(key, value)

    def get_bool(self, key: str) -> bool:
        try:
            return self._cache.bools[key]
        except KeyError:
            with self._lock:
                return self._registry.get_bool(key)

    def set_bool(self, key: str, value: bool) -> None:
        with self._lock:
            self._registry.set_bool(key, value)

    def option_keys(self) -> KeysView[str]:
        return self._registry.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._registry

    # === FOLDERS AND METADATA ===

    @property
    def version(self) -> str:
        """Game version string."""
        return __version__

    @property
    def data_folder(self) -> Optional[Path]:
        """Folder the game resources are loaded from."""
        return self._data_folder

    @data_folder.setter
    def data_folder(self, value: Optional[Path]) -> None:
        self._data_folder = Path(value) if value is not None else None

    @property
    def data_list(self) -> List[Path]:
        """Candidate data folders found at startup."""
        return list(self._data_list)

    @property
    def user_folder(self) -> Optional[Path]:
        """Folder holding saved games."""
        return self._user_folder

    @property
    def config_folder(self) -> Optional[Path]:
        """Folder holding the settings file."""
        return self._config_folder

    @property
    def rulesets(self) -> RulesetList:
        """Rulesets to load, base ruleset first.

        This is the live list. Mutating it directly is only safe from the
        thread that owns the configuration; other threads go through
        set_rulesets() or edit_rulesets().
        """
        return self._registry.rulesets

    def ruleset_names(self) -> List[str]:
        """Copy of the ruleset order, taken under the lock."""
        with self._lock:
            return self._registry.rulesets.to_list()

    def set_rulesets(self, names: Iterable[str]) -> None:
        """Replace the ruleset list."""
        with self._lock:
            self._registry.rulesets.replace(names)

    @contextmanager
    def edit_rulesets(self) -> Iterator[RulesetList]:
        """Hold the lock while the ruleset list is edited in place."""
        with self._lock:
            yield self._registry.rulesets

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate folders and option values."""
        return SettingsValidator(self).validate()
