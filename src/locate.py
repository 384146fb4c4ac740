"""Command lookup across PATH with an SDK bin/ fallback.

Search order:
  1. Each PATH entry, left to right: <entry>/<name>
  2. Only if no PATH entry matched: <sdk root>/bin/<name>

The first candidate that exists and is executable wins. Paths are joined by
plain concatenation: no normalisation, and names containing "/" are used
as-is. Empty PATH entries are kept, so "a::b" also probes "/<name>".
If PATH is unset the lookup fails outright and the SDK root is never
consulted.
"""

import errno
import os
from collections.abc import Callable, Iterator, Mapping

import sdk
from command import CommandRequest, Origin, Resolution
from errors import NotFoundError, SearchPathError

SdkRootResolver = Callable[[Mapping[str, str]], str | None]


def search_path(env: Mapping[str, str] | None = None) -> list[str]:
    """Return PATH entries in priority order."""
    if env is None:
        env = os.environ
    value = env.get("PATH")
    if value is None:
        raise SearchPathError("failed to read PATH variable.")
    return value.split(":")


def candidate(directory: str, name: str) -> str:
    return directory + "/" + name


def probe(path: str) -> int:
    """Return 0 if *path* exists and is executable, else the errno saying why not."""
    try:
        os.stat(path)
    except OSError as exc:
        return exc.errno or errno.ENOENT
    except ValueError:
        # embedded NUL byte
        return errno.EINVAL
    if os.access(path, os.X_OK):
        return 0
    return errno.EACCES


def iter_candidates(
    request: CommandRequest,
    env: Mapping[str, str] | None = None,
    sdk_root: SdkRootResolver | None = None,
) -> Iterator[tuple[Origin, str]]:
    """Yield (origin, path) for every location worth probing, in search order.

    The SDK root is resolved lazily, after every PATH entry has been yielded.
    """
    if env is None:
        env = os.environ
    if sdk_root is None:
        sdk_root = sdk.resolve_sdk_root
    for directory in search_path(env):
        yield "path", candidate(directory, request.name)
    root = sdk_root(env)
    if root is not None:
        yield "sdk", candidate(sdk.sdk_bin_dir(root), request.name)


def locate_command(
    request: CommandRequest,
    env: Mapping[str, str] | None = None,
    sdk_root: SdkRootResolver | None = None,
) -> Resolution:
    """Resolve *request* to the executable that should replace this process."""
    last_errno = 0
    for origin, path in iter_candidates(request, env, sdk_root):
        err = probe(path)
        if err == 0:
            return Resolution(path=path, argv=request.argv, origin=origin)
        last_errno = err
    raise NotFoundError(request.name, last_errno)
