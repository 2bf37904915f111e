"""
Startup folder resolution for geoscape.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from .paths import PlatformPaths
from .types import FolderResolution, ResolutionState

logger = logging.getLogger(__name__)


class FolderResolver:
    """Picks the user and config folders and loads or seeds the settings file.

    Steps, in order:
    1. Without a fixed data folder, collect the data folder candidates.
    2. With a fixed user folder, stop: the settings were loaded from it
       already. A fixed folder that does not exist yet is created and seeded.
    3. Otherwise take the first existing user folder candidate,
    4. or else the first candidate that can be created.
    5. Without a dedicated config folder, settings live in the user folder.
    6. Load settings from an existing config folder, or create the folder and
       save the defaults into it.

    Failing to create any user folder is not fatal here: the result simply
    carries no user folder and the caller decides what to do.
    """

    def __init__(
        self,
        paths: PlatformPaths,
        load: Callable[[Path], bool],
        save: Callable[[Path], bool],
    ):
        self.paths = paths
        self._load = load
        self._save = save

    def resolve(
        self,
        data_folder: Optional[Path] = None,
        user_folder: Optional[Path] = None,
    ) -> FolderResolution:
        data_list: List[Path] = []
        if data_folder is None:
            data_list = list(self.paths.data_folders())

        if user_folder is not None:
            result = FolderResolution(
                state=ResolutionState.PRESET,
                user_folder=user_folder,
                config_folder=user_folder,
                data_list=data_list,
            )
            if not self.paths.folder_exists(user_folder):
                if self.paths.create_folder(user_folder):
                    result.saved = self._save(user_folder)
                else:
                    logger.warning(f"Could not create user folder {user_folder}")
            return result

        candidates = list(self.paths.user_folders())
        config_folder = self.paths.config_folder()

        state = ResolutionState.UNRESOLVED
        for candidate in candidates:
            if self.paths.folder_exists(candidate):
                user_folder = candidate
                state = ResolutionState.FOUND
                break

        if user_folder is None:
            for candidate in candidates:
                if self.paths.create_folder(candidate):
                    user_folder = candidate
                    state = ResolutionState.CREATED
                    break

        if user_folder is None:
            logger.warning("No user folder could be found or created")

        if config_folder is None:
            config_folder = user_folder

        result = FolderResolution(
            state=state,
            user_folder=user_folder,
            config_folder=config_folder,
            data_list=data_list,
        )
        if config_folder is None:
            return result

        if self.paths.folder_exists(config_folder):
            result.loaded = self._load(config_folder)
        else:
            self.paths.create_folder(config_folder)
            result.saved = self._save(config_folder)
        return result
