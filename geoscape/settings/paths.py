"""
Platform folder discovery for geoscape.
"""

import logging
from pathlib import Path
from typing import List, Optional, Protocol

from PySide6.QtCore import QStandardPaths

logger = logging.getLogger(__name__)

APP_FOLDER = "geoscape"


class PlatformPaths(Protocol):
    """Supplies candidate folders and filesystem primitives."""

    def data_folders(self) -> List[Path]:
        """Candidate data folders, most preferred first."""
        ...

    def user_folders(self) -> List[Path]:
        """Candidate user folders, most preferred first."""
        ...

    def config_folder(self) -> Optional[Path]:
        """Dedicated config folder, or None to keep settings in the user folder."""
        ...

    def folder_exists(self, path: Path) -> bool:
        ...

    def create_folder(self, path: Path) -> bool:
        ...


def _writable(location: QStandardPaths.StandardLocation) -> Optional[Path]:
    folder = QStandardPaths.writableLocation(location)
    return Path(folder) if folder else None


class QtPlatformPaths:
    """PlatformPaths backed by QStandardPaths.

    Locations (Linux shown; Qt picks the native equivalents elsewhere):
    - data: ``<each generic data dir>/geoscape/data``, then ``./data``
    - user: ``~/.local/share/geoscape``, ``~/.geoscape``, ``./user``
    - config: ``~/.config/geoscape``
    """

    def __init__(self, app_folder: str = APP_FOLDER):
        self.app_folder = app_folder

    def data_folders(self) -> List[Path]:
        locations = QStandardPaths.standardLocations(
            QStandardPaths.StandardLocation.GenericDataLocation
        )
        folders = [Path(loc) / self.app_folder / "data" for loc in locations if loc]
        folders.append(Path.cwd() / "data")
        return folders

    def user_folders(self) -> List[Path]:
        folders: List[Path] = []
        data_home = _writable(QStandardPaths.StandardLocation.GenericDataLocation)
        if data_home is not None:
            folders.append(data_home / self.app_folder)
        folders.append(Path.home() / f".{self.app_folder}")
        folders.append(Path.cwd() / "user")
        return folders

    def config_folder(self) -> Optional[Path]:
        config_home = _writable(QStandardPaths.StandardLocation.GenericConfigLocation)
        if config_home is None:
            return None
        return config_home / self.app_folder

    def folder_exists(self, path: Path) -> bool:
        return Path(path).is_dir()

    def create_folder(self, path: Path) -> bool:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.debug(f"Could not create folder {path}: {e}")
            return False
        return True
