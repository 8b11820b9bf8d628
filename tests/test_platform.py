"""Tests for platform detection and the environment accessor."""

import os
import sys

import pytest

from appfolders.utils.platform import Environment, PlatformClass, detect_platform


class TestDetectPlatform:
    """Test detect_platform function."""

    @pytest.mark.parametrize("system", ["darwin", "Darwin", "MacOS", "mac"])
    def test_mac(self, system):
        """Test that darwin and mac strings map to MAC."""
        assert detect_platform(Environment(system=system)) is PlatformClass.MAC

    @pytest.mark.parametrize("system", ["win32", "Windows", "win"])
    def test_windows(self, system):
        """Test that windows strings map to WINDOWS."""
        assert detect_platform(Environment(system=system)) is PlatformClass.WINDOWS

    @pytest.mark.parametrize("system", ["linux", "freebsd13", "sunos5", ""])
    def test_unknown_defaults_to_unix(self, system):
        """Test that anything else maps to UNIX."""
        assert detect_platform(Environment(system=system)) is PlatformClass.UNIX

    def test_reads_host_on_every_call(self, monkeypatch):
        """Test that the host platform is not cached between calls."""
        monkeypatch.setattr(sys, "platform", "darwin")
        assert detect_platform() is PlatformClass.MAC

        monkeypatch.setattr(sys, "platform", "linux")
        assert detect_platform() is PlatformClass.UNIX

    def test_environment_platform_property(self):
        """Test the platform shortcut on Environment."""
        assert Environment(system="win32").platform is PlatformClass.WINDOWS


class TestPlatformClass:
    """Test PlatformClass separators."""

    def test_separators(self):
        """Test native separators for each family."""
        assert PlatformClass.WINDOWS.sep == "\\"
        assert PlatformClass.MAC.sep == "/"
        assert PlatformClass.UNIX.sep == "/"


class TestEnvironment:
    """Test Environment accessor."""

    def test_get_returns_value(self):
        """Test reading a set variable."""
        env = Environment(variables={"XDG_CACHE_HOME": "/custom/cache"})
        assert env.get("XDG_CACHE_HOME") == "/custom/cache"

    def test_get_missing_or_empty_is_none(self):
        """Test that unset and empty variables read as None."""
        env = Environment(variables={"EMPTY": ""})
        assert env.get("EMPTY") is None
        assert env.get("MISSING") is None

    def test_home_override(self):
        """Test explicit home directory."""
        assert Environment(home="/home/me").home_dir() == "/home/me"

    def test_home_defaults_to_os(self):
        """Test default home directory comes from the OS."""
        assert Environment().home_dir() == os.path.expanduser("~")

    def test_expanduser(self):
        """Test leading tilde expansion."""
        env = Environment(home="/home/me")
        assert env.expanduser("~/.cache") == "/home/me/.cache"
        assert env.expanduser("~") == "/home/me"
        assert env.expanduser("/etc/xdg") == "/etc/xdg"
        assert env.expanduser("/tmp/~x") == "/tmp/~x"

    def test_current(self, monkeypatch):
        """Test accessor for the running process."""
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", "/custom/config")

        env = Environment.current()

        assert env.host is True
        assert env.system == "linux"
        assert env.get("XDG_CONFIG_HOME") == "/custom/config"

    def test_simulated_environment_is_not_host(self):
        """Test that constructed environments never query native APIs."""
        assert Environment(system="win32").host is False

    def test_expanduser_only_current_user(self):
        """Test ~user forms are kept when home is overridden."""
        env = Environment(home="/home/me")
        assert env.expanduser("~other/cfg") == "~other/cfg"
        assert env.expanduser("~\\AppData") == "/home/me\\AppData"

    def test_expanduser_user_form_uses_os(self, monkeypatch):
        """Test ~user forms go to the OS when no home is set."""
        monkeypatch.setattr(os.path, "expanduser", lambda path: "/users/other/cfg")
        assert Environment().expanduser("~other/cfg") == "/users/other/cfg"
