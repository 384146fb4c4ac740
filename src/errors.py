"""Error taxonomy for xcrun and the stderr diagnostic helper."""

import os
import sys

TOOL_NAME = "xcrun"


class LaunchError(Exception):
    """Base class for everything that stops a command from being launched."""


class ConfigurationError(LaunchError):
    """HOME is missing or ~/.darwinsdk.dat could not be read."""


class SearchPathError(LaunchError):
    """PATH is not set at all."""


class NotFoundError(LaunchError):
    def __init__(self, name: str, errno: int = 0) -> None:
        self.name = name
        self.errno = errno
        super().__init__(f"can't exec '{name}' (errno={os.strerror(errno)})")


class ExecError(LaunchError):
    """A candidate passed the access check but execv() itself failed."""

    def __init__(self, path: str, errno: int = 0) -> None:
        self.path = path
        self.errno = errno
        super().__init__(f"can't exec '{path}' (errno={os.strerror(errno)})")


def report(message: str) -> None:
    print(f"{TOOL_NAME}: error: {message}", file=sys.stderr)
