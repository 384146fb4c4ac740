"""Process replacement: hand the resolved command the rest of our argv.

There is a window between the access check in locate and the execv() call
here. If the file disappears or turns out not to be loadable in that window
the launch fails; the remaining candidates are not tried.
"""

import errno
import os
import sys
from collections.abc import Callable, Mapping
from typing import NoReturn

from command import CommandRequest, Resolution
from errors import ExecError
from locate import locate_command

Execv = Callable[[str, list[str]], object]


def exec_resolution(resolution: Resolution, execv: Execv = os.execv) -> NoReturn:
    """Replace the current process with *resolution*. Only returns by raising."""
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        execv(resolution.path, resolution.argv)
    except OSError as exc:
        raise ExecError(resolution.path, exc.errno or 0) from exc
    except ValueError as exc:
        # empty argv[0] or embedded NUL byte
        raise ExecError(resolution.path, errno.EINVAL) from exc
    # Only reachable with a stub execv
    raise ExecError(resolution.path)


def locate_and_exec(
    name: str,
    forward_argv: list[str],
    env: Mapping[str, str] | None = None,
    execv: Execv = os.execv,
) -> NoReturn:
    request = CommandRequest(name=name, argv=list(forward_argv))
    exec_resolution(locate_command(request, env), execv)
