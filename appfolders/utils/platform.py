"""Platform detection and access to ambient environment state."""

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class PlatformClass(Enum):
    """Platform family used to pick directory conventions."""

    WINDOWS = "windows"
    MAC = "mac"
    UNIX = "unix"

    @property
    def sep(self) -> str:
        """Native path separator for this platform family."""
        return "\\" if self is PlatformClass.WINDOWS else "/"


@dataclass
class Environment:
    """
    Read-only view of the process environment.

    Every public function accepts one of these so callers (and tests) can
    describe another platform without touching ``os.environ``.

    Attributes:
        system: Operating system family string (``sys.platform`` style)
        variables: Environment variables
        home: User home directory (default: expansion of ``~`` by the OS)
        host: True when this describes the running process, which allows
            native Windows folder APIs to be queried
    """

    system: str = field(default_factory=lambda: sys.platform)
    variables: Mapping[str, str] = field(default_factory=lambda: os.environ)
    home: Optional[str] = None
    host: bool = False

    @classmethod
    def current(cls) -> "Environment":
        """
        Build an accessor for the running process.

        Returns:
            Environment: Fresh accessor, never cached
        """
        return cls(system=sys.platform, variables=os.environ, host=True)

    def get(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Args:
            name: Variable name

        Returns:
            str | None: Value, or None when unset or empty
        """
        return self.variables.get(name) or None

    def home_dir(self) -> str:
        """Get the user's home directory."""
        if self.home is not None:
            return self.home
        return os.path.expanduser("~")

    def expanduser(self, path: str) -> str:
        """
        Expand a leading ``~`` or ``~/`` to the home directory.

        ``~user`` forms are expanded by the OS unless ``home`` is set, in
        which case they are kept verbatim.
        """
        if path == "~" or path.startswith(("~/", "~\\")):
            return self.home_dir() + path[1:]
        if path.startswith("~") and self.home is None:
            return os.path.expanduser(path)
        return path

    @property
    def platform(self) -> PlatformClass:
        """Platform family detected from ``system``."""
        return detect_platform(self)


def detect_platform(env: Optional[Environment] = None) -> PlatformClass:
    """
    Determine the platform family from the reported OS string.

    Unknown systems are treated as Unix.

    Args:
        env: Environment to inspect (default: the running process)

    Returns:
        PlatformClass: Detected platform family
    """
    system = (env or Environment.current()).system.lower()

    # "darwin" contains "win", so Mac is checked first
    if "darwin" in system or "mac" in system:
        return PlatformClass.MAC
    if "win" in system:
        return PlatformClass.WINDOWS
    return PlatformClass.UNIX
