"""SDK root resolution.

Resolution order:
  1. DEVELOPER_DIR environment variable, used verbatim (even when empty)
  2. ~/.darwinsdk.dat, whose contents are the path of the active SDK

The config file is read fresh on every call. Trailing newline, carriage
return and NUL characters are stripped; anything else is kept as written.
An empty file means no SDK root is configured.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from errors import ConfigurationError, report

DEVELOPER_DIR_VAR = "DEVELOPER_DIR"
CONFIG_FILENAME = ".darwinsdk.dat"
# One PATH_MAX worth of bytes
MAX_CONFIG_BYTES = 4096


def config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return <HOME>/.darwinsdk.dat."""
    if env is None:
        env = os.environ
    home = env.get("HOME")
    if home is None:
        raise ConfigurationError("cannot determine home directory (HOME is not set).")
    return Path(home + "/" + CONFIG_FILENAME)


def read_config(path: Path) -> str | None:
    """Read the SDK path stored in *path*, or None if the file is empty."""
    try:
        with open(path, "rb") as f:
            raw = f.read(MAX_CONFIG_BYTES)
    except OSError as exc:
        raise ConfigurationError(
            f"unable to read configuration file. (errno={exc.strerror})"
        ) from exc
    value = os.fsdecode(raw).rstrip("\r\n\0")
    return value or None


def resolve_sdk_root(env: Mapping[str, str] | None = None) -> str | None:
    """Return the active SDK root, or None when none can be determined.

    Failures to locate or read the config file are reported on stderr but
    are not fatal: the caller just loses the SDK fallback.
    """
    if env is None:
        env = os.environ
    override = env.get(DEVELOPER_DIR_VAR)
    if override is not None:
        return override
    try:
        return read_config(config_path(env))
    except ConfigurationError as exc:
        report(str(exc))
        return None


def sdk_bin_dir(root: str) -> str:
    return root + "/bin"
