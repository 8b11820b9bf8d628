"""Joining optional path segments into a single path string."""

from typing import Iterable, Optional

from appfolders.utils.platform import Environment


def join_path(
    segments: Iterable[Optional[str]],
    env: Optional[Environment] = None,
    sep: Optional[str] = None,
) -> str:
    """Join path segments, skipping absent ones.

    A bare root as the first segment is kept; separators around later
    segments are stripped, and segments left empty are dropped. With a
    backslash separator, forward slashes are converted so Windows paths
    come out in one style.

    Args:
        segments: Ordered segments; None and empty strings are dropped
        env: Environment used for home expansion and the default separator
        sep: Separator override (default: native separator of env's platform)

    Returns:
        str: Joined path, or an empty string when no segment is present

    Examples:
        >>> join_path(["/etc/xdg", None, "app"], sep="/")
        '/etc/xdg/app'
    """
    env = env or Environment.current()
    sep = sep or env.platform.sep
    strip = "/" + sep

    parts = [segment for segment in segments if segment]
    if not parts:
        return ""

    first = env.expanduser(parts[0])
    # Keep bare roots such as "/" intact
    path = first.rstrip(strip) or first[:1]
    rest = [part.strip(strip) for part in parts[1:]]

    for part in rest:
        if not part:
            continue
        if not path.endswith(tuple(strip)):
            path += sep
        path += part

    if sep == "\\":
        path = path.replace("/", sep)
    return path
