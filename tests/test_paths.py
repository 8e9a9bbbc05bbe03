"""Tests for per-user configuration path resolution."""

import os

import pytest

from config import config_dir, config_path, user_config_dir, user_home_dir


@pytest.fixture
def linux(monkeypatch, tmp_path):
    """Pretend to run on Linux with a fresh home directory."""
    monkeypatch.setattr("config.paths.sys.platform", "linux")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return tmp_path


class TestUserConfigDir:
    """Tests for user_config_dir."""

    def test_linux_default(self, linux):
        assert user_config_dir() == os.path.join(str(linux), ".config")

    def test_xdg_config_home(self, linux, monkeypatch):
        xdg = str(linux / "xdg")
        monkeypatch.setenv("XDG_CONFIG_HOME", xdg)

        assert user_config_dir() == xdg

    def test_relative_xdg_config_home(self, linux, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", "relative/dir")

        assert user_config_dir() == ""

    def test_no_home(self, linux, monkeypatch):
        monkeypatch.delenv("HOME")

        assert user_config_dir() == ""
        assert user_home_dir() == ""

    def test_macos(self, linux, monkeypatch):
        monkeypatch.setattr("config.paths.sys.platform", "darwin")

        assert user_config_dir() == os.path.join(str(linux), "Library", "Application Support")

    def test_windows(self, monkeypatch):
        monkeypatch.setattr("config.paths.sys.platform", "win32")
        monkeypatch.setenv("AppData", "C:\\Users\\me\\AppData\\Roaming")
        monkeypatch.setenv("USERPROFILE", "C:\\Users\\me")

        assert user_config_dir() == "C:\\Users\\me\\AppData\\Roaming"
        assert user_home_dir() == "C:\\Users\\me"


class TestConfigDir:
    """Tests for config_dir."""

    def test_joins_app_name(self, linux):
        assert config_dir("myapp") == os.path.join(str(linux), ".config", "myapp")

    def test_empty_app_name(self, linux):
        assert config_dir("") == os.path.join(str(linux), ".config")

    def test_falls_back_to_home(self, linux, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", "not/absolute")

        assert config_dir("myapp") == os.path.join(str(linux), "myapp")

    def test_nothing_available(self, linux, monkeypatch):
        monkeypatch.delenv("HOME")

        assert config_dir("myapp") == ""

    def test_rejects_separator(self, linux):
        assert config_dir("my/app") == ""

    def test_windows_backslash(self, monkeypatch):
        monkeypatch.setattr("config.paths.sys.platform", "win32")
        monkeypatch.setenv("AppData", "/appdata")

        assert config_dir("my\\app") == ""


class TestConfigPath:
    """Tests for config_path."""

    def test_full_path(self, linux):
        expected = os.path.join(str(linux), ".config", "myapp", "settings.env")

        assert config_path("myapp", "settings.env") == expected

    def test_home_fallback(self, linux, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", "rel")

        assert config_path("myapp", "a.json") == os.path.join(str(linux), "myapp", "a.json")

    @pytest.mark.parametrize(
        "app_name, file_name",
        [
            ("my/app", "a.json"),
            ("myapp", "sub/a.json"),
            ("myapp", ""),
        ],
    )
    def test_no_result(self, linux, app_name, file_name):
        assert config_path(app_name, file_name) == ""

    def test_no_base_directory(self, linux, monkeypatch):
        monkeypatch.delenv("HOME")

        assert config_path("myapp", "a.json") == ""

    def test_has_no_side_effects(self, linux):
        config_path("myapp", "a.json")

        assert not (linux / ".config").exists()
