"""Environment access and error types shared across appfolders."""

from appfolders.utils.errors import AppFoldersError, ValidationError
from appfolders.utils.platform import Environment, PlatformClass, detect_platform

__all__ = [
    "AppFoldersError",
    "Environment",
    "PlatformClass",
    "ValidationError",
    "detect_platform",
]
