"""Derivation of per-application directory paths."""

from appfolders.paths.dirs import AppIdentity, site_data_dir, user_cache_dir, user_data_dir
from appfolders.paths.join import join_path
from appfolders.paths.windows import DEFAULT_STRATEGIES, WindowsFolderKind, win_folder

__all__ = [
    "AppIdentity",
    "DEFAULT_STRATEGIES",
    "WindowsFolderKind",
    "join_path",
    "site_data_dir",
    "user_cache_dir",
    "user_data_dir",
    "win_folder",
]
