"""Tests for the configuration object and its startup sequence."""

import threading
from pathlib import Path

import orjson
import pytest

from geoscape import __version__
from geoscape.settings import Configuration, ConfigError, ResolutionState
from geoscape.settings.defaults import MAX_VOLUME

from .conftest import FakePlatformPaths


def write_settings(folder: Path, options: dict, rulesets: list | None = None) -> None:
    folder.mkdir(parents=True, exist_ok=True)
    document: dict = {"options": options}
    if rulesets is not None:
        document["rulesets"] = rulesets
    (folder / "options.json").write_bytes(orjson.dumps(document))


class TestInit:
    """Test the startup sequence."""

    def test_first_run_writes_defaults(
        self, config: Configuration, fake_paths: FakePlatformPaths
    ) -> None:
        """Test a first run creates the folders and saves defaults."""
        assert config.init([]) is True
        assert config.user_folder == fake_paths.user[0]
        assert config.config_folder == fake_paths.config
        assert config.resolution is not None
        assert config.resolution.state is ResolutionState.CREATED
        saved = orjson.loads(config.settings_file().read_bytes())
        assert saved["options"]["displayWidth"] == "640"
        assert saved["rulesets"] == ["Xcom1Ruleset"]

    def test_second_run_loads_saved(self, fake_paths: FakePlatformPaths) -> None:
        """Test settings saved in one run are read by the next."""
        first = Configuration(platform="desktop", paths=fake_paths)
        first.init([])
        first.set_bool("mute", True)
        first.rulesets.replace(["Custom", "Xcom1Ruleset"])
        assert first.save() is True

        second = Configuration(platform="desktop", paths=fake_paths)
        second.init([])
        assert second.resolution is not None
        assert second.resolution.state is ResolutionState.FOUND
        assert second.resolution.loaded is True
        assert second.get_bool("mute") is True
        assert second.rulesets.to_list() == ["Custom", "Xcom1Ruleset"]

    def test_help_stops_startup(
        self, config: Configuration, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test help prints usage and applies nothing."""
        assert config.init(["-displayWidth", "800", "-help"]) is False
        out = capsys.readouterr().out
        assert "Usage: geoscape" in out
        assert __version__ in out
        assert len(config.option_keys()) == 0
        assert config.user_folder is None

    def test_cli_override_applied(self, config: Configuration) -> None:
        """Test a command-line override on a first run."""
        config.init(["-displaywidth", "800"])
        assert config.get_int("displayWidth") == 800

    def test_cli_data_folder(self, config: Configuration, tmp_path: Path) -> None:
        """Test -data fixes the data folder and skips discovery."""
        config.init(["-data", str(tmp_path / "assets")])
        assert config.data_folder == tmp_path / "assets"
        assert config.data_list == []

    def test_data_candidates_listed(
        self, config: Configuration, fake_paths: FakePlatformPaths
    ) -> None:
        """Test data folder candidates are exposed when none is given."""
        config.init([])
        assert config.data_folder is None
        assert config.data_list == fake_paths.data

    def test_cli_user_folder_loaded_after_overrides(
        self, config: Configuration, fake_paths: FakePlatformPaths, tmp_path: Path
    ) -> None:
        """Test a -user settings file is read after the overrides and wins."""
        user = tmp_path / "cli_user"
        write_settings(user, {"displayWidth": "1024", "displayHeight": "768"})
        config.init(["-user", str(user), "-displaywidth", "800", "-fullscreen", "true"])
        assert config.user_folder == user
        assert config.config_folder == user
        assert config.get_int("displayWidth") == 1024
        assert config.get_int("displayHeight") == 768
        assert config.get_bool("fullscreen") is True
        assert fake_paths.create_attempts == []

    def test_preset_user_folder_loaded_before_overrides(
        self, fake_paths: FakePlatformPaths, tmp_path: Path
    ) -> None:
        """Test a user folder known up front is loaded first, so overrides win."""
        user = tmp_path / "known_user"
        write_settings(user, {"displayWidth": "1024"}, ["Other"])
        config = Configuration(platform="desktop", paths=fake_paths, user_folder=user)
        config.init(["-displaywidth", "800"])
        assert config.get_int("displayWidth") == 800
        assert config.rulesets.to_list() == ["Other"]
        assert config.resolution is not None
        assert config.resolution.state is ResolutionState.PRESET

    def test_cli_user_folder_created_when_missing(
        self, config: Configuration, fake_paths: FakePlatformPaths, tmp_path: Path
    ) -> None:
        """Test a -user folder that does not exist yet is created and seeded."""
        user = tmp_path / "fresh_user"
        config.init(["-user", str(user), "-displaywidth", "800"])
        assert user.is_dir()
        assert fake_paths.create_attempts == [user]
        assert config.resolution is not None
        assert config.resolution.saved is True
        saved = orjson.loads((user / "options.json").read_bytes())
        assert saved["options"]["displayWidth"] == "800"
        config.set_bool("mute", True)
        assert config.save() is True

    def test_preset_user_folder_created_when_missing(
        self, fake_paths: FakePlatformPaths, tmp_path: Path
    ) -> None:
        """Test a missing user folder given up front is created and seeded."""
        user = tmp_path / "nested" / "known_user"
        config = Configuration(platform="desktop", paths=fake_paths, user_folder=user)
        config.init([])
        assert user.is_dir()
        assert config.settings_file() == user / "options.json"
        assert config.settings_file().is_file()
        assert config.save() is True

    def test_unknown_platform(self, fake_paths: FakePlatformPaths) -> None:
        """Test an unknown platform profile is rejected."""
        with pytest.raises(ConfigError):
            Configuration(platform="toaster", paths=fake_paths)

    def test_platform_from_environment(
        self, fake_paths: FakePlatformPaths, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the platform profile can come from the environment."""
        monkeypatch.setenv("GEOSCAPE_PLATFORM", "handheld")
        config = Configuration(paths=fake_paths)
        config.init([])
        assert config.get_int("displayWidth") == 320
        assert config.get_bool("fullscreen") is True


class TestOptionAccess:
    """Test typed access through the configuration."""

    def test_mute_scenario(self, fake_paths: FakePlatformPaths) -> None:
        """Test defaults, a typed write, a save and a fresh load."""
        config = Configuration(platform="desktop", paths=fake_paths)
        config.init([])
        assert config.get_int("musicVolume") == MAX_VOLUME
        config.set_bool("mute", True)
        assert config.get_bool("mute") is True
        config.save()

        fresh = Configuration(platform="desktop", paths=fake_paths)
        fresh.init([])
        assert fresh.get_bool("mute") is True

    def test_string_write_invalidates(self, config: Configuration) -> None:
        """Test a string write is visible to the next typed read."""
        config.create_defaults()
        config.set_int("battleScrollSpeed", 16)
        assert config.get_int("battleScrollSpeed") == 16
        config.set_string("battleScrollSpeed", "40")
        assert config.get_int("battleScrollSpeed") == 40

    def test_load_missing_profile(self, config: Configuration) -> None:
        """Test loading a profile that does not exist changes nothing."""
        config.init([])
        config.set_int("displayWidth", 960)
        assert config.load("nonexistent") is False
        assert config.get_int("displayWidth") == 960

    def test_version(self, config: Configuration) -> None:
        """Test the version string is fixed."""
        assert config.version == __version__

    def test_data_folder_setter(self, config: Configuration, tmp_path: Path) -> None:
        """Test the data folder can be changed after startup."""
        config.data_folder = tmp_path
        assert config.data_folder == tmp_path
        config.data_folder = None
        assert config.data_folder is None

    def test_set_rulesets(self, config: Configuration) -> None:
        """Test replacing the ruleset list returns a detached copy on read."""
        config.create_defaults()
        config.set_rulesets(["Xcom1Ruleset", "Extra"])
        names = config.ruleset_names()
        names.append("NotStored")
        assert config.ruleset_names() == ["Xcom1Ruleset", "Extra"]
        assert config.rulesets.primary == "Xcom1Ruleset"

    def test_edit_rulesets_holds_lock(self, config: Configuration) -> None:
        """Test in-place edits run with other threads shut out."""
        config.create_defaults()
        blocked: list = []

        def other_writer() -> None:
            config.set_rulesets(["Other"])
            blocked.append(config.ruleset_names())

        with config.edit_rulesets() as rulesets:
            rulesets.add("Extra")
            thread = threading.Thread(target=other_writer)
            thread.start()
            thread.join(timeout=0.2)
            assert thread.is_alive()
            assert config.ruleset_names() == ["Xcom1Ruleset", "Extra"]
        thread.join()
        assert blocked == [["Other"]]

    def test_concurrent_writers_keep_cache_coherent(self, config: Configuration) -> None:
        """Test reads after concurrent writes see the final stored value."""
        config.create_defaults()

        def writer(offset: int) -> None:
            for i in range(200):
                config.set_int("changeValueByMouseWheel", offset + i)
                config.get_int("changeValueByMouseWheel")

        threads = [threading.Thread(target=writer, args=(n * 1000,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stored = int(config.get_string("changeValueByMouseWheel"))
        assert config.get_int("changeValueByMouseWheel") == stored


class TestValidation:
    """Test configuration validation."""

    def test_missing_data_folder_is_error(self, config: Configuration) -> None:
        """Test no data folder candidate on disk is reported."""
        config.init([])
        result = config.validate()
        assert result.is_valid is False
        assert "No data folder found" in result.errors

    def test_valid_with_data_folder(
        self, config: Configuration, fake_paths: FakePlatformPaths
    ) -> None:
        """Test an existing data candidate makes the configuration valid."""
        fake_paths.data[0].mkdir()
        config.init([])
        result = config.validate()
        assert result.is_valid is True
        assert result.warnings == []

    def test_missing_user_folder_is_error(
        self, config: Configuration, fake_paths: FakePlatformPaths, tmp_path: Path
    ) -> None:
        """Test an unresolvable user folder is surfaced to the caller."""
        fake_paths.uncreatable = set(fake_paths.user)
        fake_paths.config = None
        config.init(["-data", str(tmp_path)])
        result = config.validate()
        assert config.user_folder is None
        assert result.errors == ["No user folder could be found or created"]

    def test_bad_values_are_warnings(
        self, config: Configuration, fake_paths: FakePlatformPaths
    ) -> None:
        """Test values that do not parse cleanly are flagged."""
        fake_paths.data[0].mkdir()
        config.init(["-displayWidth", "wide", "-mute", "yes"])
        config.rulesets.replace([])
        result = config.validate()
        assert result.is_valid is True
        assert "Ruleset list is empty" in result.warnings
        assert any("displayWidth" in w for w in result.warnings)
        assert any("mute" in w for w in result.warnings)

    def test_non_ascii_digits_are_warnings(
        self, config: Configuration, fake_paths: FakePlatformPaths
    ) -> None:
        """Test a value written with non-ASCII digits is flagged, not accepted."""
        fake_paths.data[0].mkdir()
        config.init(["-displayWidth", "٨٠٠"])
        result = config.validate()
        assert config.get_int("displayWidth") == 0
        assert any("displayWidth" in w for w in result.warnings)
