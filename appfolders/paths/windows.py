"""Resolution of Windows per-user application data folders.

The folder is looked up with an ordered list of strategies. Each strategy
returns the folder path or None, and the first hit wins:

1. The shell folder API (``SHGetFolderPathW``)
2. The Explorer "Shell Folders" registry key
3. The ``LOCALAPPDATA`` / ``APPDATA`` environment variables
4. A path under ``USERPROFILE``

The two native lookups are only consulted for the running process. When
nothing resolves, a legacy folder under the home directory is returned so
callers always get a usable path.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence

from platformdirs import windows as native

from appfolders.utils.platform import Environment, PlatformClass

logger = logging.getLogger(__name__)


class WindowsFolderKind(Enum):
    """Special folder to resolve, valued by its CSIDL name."""

    LOCAL_APPDATA = "CSIDL_LOCAL_APPDATA"
    ROAMING_APPDATA = "CSIDL_APPDATA"


Strategy = Callable[[WindowsFolderKind, Environment], Optional[str]]

ENV_VARS = {
    WindowsFolderKind.LOCAL_APPDATA: "LOCALAPPDATA",
    WindowsFolderKind.ROAMING_APPDATA: "APPDATA",
}

PROFILE_SUFFIXES = {
    WindowsFolderKind.LOCAL_APPDATA: "AppData\\Local",
    WindowsFolderKind.ROAMING_APPDATA: "AppData\\Roaming",
}

# Pre-Vista layout, used when nothing else resolves
LEGACY_SUFFIXES = {
    WindowsFolderKind.LOCAL_APPDATA: "Local Settings\\Application Data",
    WindowsFolderKind.ROAMING_APPDATA: "Application Data",
}

_SEP = PlatformClass.WINDOWS.sep


def from_shell_api(kind: WindowsFolderKind, env: Environment) -> Optional[str]:
    """Ask the Windows shell for the folder."""
    if not env.host:
        return None
    try:
        return native.get_win_folder_via_ctypes(kind.value) or None
    except (AttributeError, ImportError, OSError, ValueError) as e:
        logger.debug(f"Shell folder API unavailable for {kind.value}: {e}")
        return None


def from_registry(kind: WindowsFolderKind, env: Environment) -> Optional[str]:
    """Read the folder from the Explorer "Shell Folders" registry key."""
    if not env.host:
        return None
    try:
        return native.get_win_folder_from_registry(kind.value) or None
    except (AttributeError, ImportError, OSError, ValueError) as e:
        logger.debug(f"Registry lookup unavailable for {kind.value}: {e}")
        return None


def from_environment(kind: WindowsFolderKind, env: Environment) -> Optional[str]:
    """Read the folder from LOCALAPPDATA or APPDATA."""
    return env.get(ENV_VARS[kind])


def from_user_profile(kind: WindowsFolderKind, env: Environment) -> Optional[str]:
    """Build the folder under USERPROFILE."""
    profile = env.get("USERPROFILE")
    if profile is None:
        return None
    return profile.rstrip("/" + _SEP) + _SEP + PROFILE_SUFFIXES[kind]


DEFAULT_STRATEGIES: List[Strategy] = [
    from_shell_api,
    from_registry,
    from_environment,
    from_user_profile,
]


def win_folder(
    kind: WindowsFolderKind = WindowsFolderKind.LOCAL_APPDATA,
    env: Optional[Environment] = None,
    strategies: Optional[Sequence[Strategy]] = None,
) -> str:
    """
    Resolve a Windows application data folder.

    Never raises: if no strategy resolves the folder, a legacy
    ``Application Data`` folder under the home directory is returned.

    Args:
        kind: Folder to resolve (default: non-roaming local app data)
        env: Environment to read (default: the running process)
        strategies: Lookup strategies in priority order (default: DEFAULT_STRATEGIES)

    Returns:
        str: Folder path
    """
    env = env or Environment.current()

    for strategy in strategies if strategies is not None else DEFAULT_STRATEGIES:
        folder = strategy(kind, env)
        if folder:
            logger.debug(f"Resolved {kind.value} via {strategy.__name__}: {folder}")
            return folder

    fallback = env.home_dir().rstrip("/" + _SEP) + _SEP + LEGACY_SUFFIXES[kind]
    logger.debug(f"Could not resolve {kind.value}, using {fallback}")
    return fallback
