"""appfolders - standard per-platform directories for applications.

Derives cache, data and shared data directory paths for an application on
Windows, macOS and Unix. Paths are only computed; nothing is created.
"""

from appfolders.paths import (
    AppIdentity,
    WindowsFolderKind,
    join_path,
    site_data_dir,
    user_cache_dir,
    user_data_dir,
    win_folder,
)
from appfolders.utils import (
    AppFoldersError,
    Environment,
    PlatformClass,
    ValidationError,
    detect_platform,
)

__version__ = "0.1.0"

__all__ = [
    "AppFoldersError",
    "AppIdentity",
    "Environment",
    "PlatformClass",
    "ValidationError",
    "WindowsFolderKind",
    "detect_platform",
    "join_path",
    "site_data_dir",
    "user_cache_dir",
    "user_data_dir",
    "win_folder",
]
