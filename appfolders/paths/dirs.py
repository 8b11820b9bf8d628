"""Standard per-application directories.

Typical results for appname "SuperApp" by "Acme":

==========================  ===============================================
user_cache_dir              macOS: ~/Library/Caches/SuperApp
                            Unix: ~/.cache/superapp ($XDG_CACHE_HOME)
                            Windows: %LOCALAPPDATA%\\Acme\\SuperApp\\Cache
user_data_dir               macOS: ~/Library/Application Support/SuperApp
                            Unix: ~/.config/superapp ($XDG_CONFIG_HOME)
                            Windows: %LOCALAPPDATA%\\Acme\\SuperApp
                            Windows (roaming): %APPDATA%\\Acme\\SuperApp
site_data_dir               macOS: /Library/Application Support/SuperApp
                            Unix: /etc/xdg/superapp
                            Windows: %LOCALAPPDATA%\\Acme\\SuperApp
==========================  ===============================================
"""

import logging
from dataclasses import dataclass
from typing import Optional

from appfolders.paths.join import join_path
from appfolders.paths.windows import WindowsFolderKind, win_folder
from appfolders.utils.errors import ValidationError
from appfolders.utils.platform import Environment, PlatformClass

logger = logging.getLogger(__name__)


def _validate_appname(appname: Optional[str]) -> str:
    if not appname or not appname.strip():
        raise ValidationError("Application name cannot be empty")
    return appname


def user_cache_dir(
    appname: str,
    appauthor: Optional[str] = None,
    version: Optional[str] = None,
    opinion: bool = True,
    env: Optional[Environment] = None,
) -> str:
    """
    Get the user-specific cache directory for an application.

    On Windows, caches belong under the non-roaming app data folder. By
    default a ``Cache`` folder is appended there so cache files stay apart
    from other data.

    Args:
        appname: Application name
        appauthor: Author or publisher, used on Windows only
        version: Optional version segment appended last, e.g. "1.0"
        opinion: Append ``Cache`` on Windows (ignored elsewhere)
        env: Environment to read (default: the running process)

    Returns:
        str: Cache directory path

    Raises:
        ValidationError: If appname is empty
    """
    _validate_appname(appname)
    env = env or Environment.current()
    platform = env.platform

    if platform is PlatformClass.WINDOWS:
        base = win_folder(WindowsFolderKind.LOCAL_APPDATA, env=env)
        return join_path(
            [base, appauthor, appname, version, "Cache" if opinion else None], env=env
        )
    if platform is PlatformClass.MAC:
        return join_path(["~/Library/Caches", appname, version], env=env)

    base = env.get("XDG_CACHE_HOME") or "~/.cache"
    return join_path([base, appname.lower(), version], env=env)


def user_data_dir(
    appname: str,
    appauthor: Optional[str] = None,
    version: Optional[str] = None,
    roaming: bool = False,
    env: Optional[Environment] = None,
) -> str:
    """
    Get the user-specific data directory for an application.

    On Unix this is under ``$XDG_CONFIG_HOME`` rather than
    ``$XDG_DATA_HOME``: applications usually keep runtime data next to
    their configuration in ``~/.config/<appname>``.

    Args:
        appname: Application name
        appauthor: Author or publisher, used on Windows only
        version: Optional version segment appended last, e.g. "1.0"
        roaming: Use the roaming app data folder on Windows, which is
            synced on login for roaming profiles
        env: Environment to read (default: the running process)

    Returns:
        str: Data directory path

    Raises:
        ValidationError: If appname is empty
    """
    _validate_appname(appname)
    env = env or Environment.current()
    platform = env.platform

    if platform is PlatformClass.WINDOWS:
        kind = WindowsFolderKind.ROAMING_APPDATA if roaming else WindowsFolderKind.LOCAL_APPDATA
        return join_path([win_folder(kind, env=env), appauthor, appname, version], env=env)
    if platform is PlatformClass.MAC:
        return join_path(["~/Library/Application Support", appname, version], env=env)

    base = env.get("XDG_CONFIG_HOME") or "~/.config"
    return join_path([base, appname.lower(), version], env=env)


def site_data_dir(
    appname: str,
    appauthor: Optional[str] = None,
    version: Optional[str] = None,
    env: Optional[Environment] = None,
) -> str:
    """
    Get the directory shared by all users for an application.

    Not recommended on Windows, where the result may be a hidden or
    protected system folder. A warning is logged there.

    Args:
        appname: Application name
        appauthor: Author or publisher, used on Windows only
        version: Optional version segment appended last, e.g. "1.0"
        env: Environment to read (default: the running process)

    Returns:
        str: Shared data directory path

    Raises:
        ValidationError: If appname is empty
    """
    _validate_appname(appname)
    env = env or Environment.current()
    platform = env.platform

    if platform is PlatformClass.WINDOWS:
        logger.warning(f"site_data_dir is unreliable on Windows (appname={appname})")
        base = win_folder(WindowsFolderKind.LOCAL_APPDATA, env=env)
        return join_path([base, appauthor, appname, version], env=env)
    if platform is PlatformClass.MAC:
        return join_path(["/Library/Application Support", appname, version], env=env)

    return join_path(["/etc/xdg", appname.lower(), version], env=env)


@dataclass(frozen=True)
class AppIdentity:
    """Application identity used to derive its directories."""

    appname: str
    appauthor: Optional[str] = None
    version: Optional[str] = None

    def __post_init__(self):
        _validate_appname(self.appname)

    def user_cache_dir(self, opinion: bool = True, env: Optional[Environment] = None) -> str:
        return user_cache_dir(self.appname, self.appauthor, self.version, opinion=opinion, env=env)

    def user_data_dir(self, roaming: bool = False, env: Optional[Environment] = None) -> str:
        return user_data_dir(self.appname, self.appauthor, self.version, roaming=roaming, env=env)

    def site_data_dir(self, env: Optional[Environment] = None) -> str:
        return site_data_dir(self.appname, self.appauthor, self.version, env=env)
