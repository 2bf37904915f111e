"""Pytest configuration and common fixtures for geoscape tests."""

import logging
from pathlib import Path
from typing import List, Optional, Set

import pytest

from geoscape.settings import Configuration


class FakePlatformPaths:
    """PlatformPaths over a temporary directory that records every call."""

    def __init__(
        self,
        user: List[Path],
        config: Optional[Path],
        data: List[Path],
        uncreatable: Optional[Set[Path]] = None,
    ):
        self.user = user
        self.config = config
        self.data = data
        self.uncreatable = uncreatable or set()
        self.created: List[Path] = []
        self.create_attempts: List[Path] = []

    def data_folders(self) -> List[Path]:
        return list(self.data)

    def user_folders(self) -> List[Path]:
        return list(self.user)

    def config_folder(self) -> Optional[Path]:
        return self.config

    def folder_exists(self, path: Path) -> bool:
        return path.is_dir()

    def create_folder(self, path: Path) -> bool:
        self.create_attempts.append(path)
        if path in self.uncreatable:
            return False
        path.mkdir(parents=True, exist_ok=True)
        self.created.append(path)
        return True


@pytest.fixture
def fake_paths(tmp_path: Path) -> FakePlatformPaths:
    """Two user folder candidates, a config folder and one data folder, none existing."""
    return FakePlatformPaths(
        user=[tmp_path / "user_a", tmp_path / "user_b"],
        config=tmp_path / "config",
        data=[tmp_path / "data"],
    )


@pytest.fixture
def config(fake_paths: FakePlatformPaths) -> Configuration:
    """Desktop configuration wired to the fake folders (not yet initialized)."""
    return Configuration(platform="desktop", paths=fake_paths)


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        # pytest manages its own capture handlers per test phase
        if type(handler).__module__.startswith("_pytest"):
            continue
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
