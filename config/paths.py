"""Per-user configuration directory and file locations.

Resolution never touches the filesystem: nothing is created or checked for
existence. Every function returns an empty string when no location applies.
"""

import os
import sys


def _is_windows() -> bool:
    return sys.platform == "win32"


def _has_separator(name: str) -> bool:
    """Report whether a name contains a path separator for the running OS."""
    if not name:
        return False
    if _is_windows():
        name = name.replace("\\", "/")
    return "/" in name


def user_config_dir() -> str:
    """
    Return the OS canonical per-user configuration directory.

    - Windows: ``%AppData%``
    - macOS: ``$HOME/Library/Application Support``
    - other Unix: ``$XDG_CONFIG_HOME`` when set (it must be absolute),
      otherwise ``$HOME/.config``

    Returns an empty string when the directory cannot be determined.
    """
    if _is_windows():
        return os.environ.get("AppData", "") or os.environ.get("APPDATA", "")

    if sys.platform == "darwin":
        home = os.environ.get("HOME", "")
        if not home:
            return ""
        return os.path.join(home, "Library", "Application Support")

    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        # A relative XDG_CONFIG_HOME is invalid rather than a reason to use $HOME/.config
        return xdg if os.path.isabs(xdg) else ""
    home = os.environ.get("HOME", "")
    if not home:
        return ""
    return os.path.join(home, ".config")


def user_home_dir() -> str:
    """Return the current user's home directory, or an empty string."""
    if _is_windows():
        return os.environ.get("USERPROFILE", "")
    return os.environ.get("HOME", "")


def config_dir(app_name: str) -> str:
    """Return the configuration directory for an application.

    Falls back to the home directory when the OS has no configuration
    directory for the user.
    """
    if _has_separator(app_name):
        return ""
    base = user_config_dir() or user_home_dir()
    if not base:
        return ""
    if not app_name:
        return base
    return os.path.join(base, app_name)


def config_path(app_name: str, file_name: str) -> str:
    """
    Return the path of a configuration file for an application.

    Args:
        app_name: Plain application directory name
        file_name: Plain file name

    Returns:
        ``<config-dir>/<app_name>/<file_name>``, or an empty string when either
        name contains a path separator, the file name is empty, or no base
        directory is available.
    """
    if not file_name or _has_separator(file_name):
        return ""
    directory = config_dir(app_name)
    if not directory:
        return ""
    return os.path.join(directory, file_name)
