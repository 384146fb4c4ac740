"""Run a developer tool found on PATH or in the active SDK.

Usage:
    xcrun <program> [args...]
    xcrun --find <program>
    xcrun --show-sdk-path
    xcrun --version
    xcrun --help
"""

import sys

import help as help_mod
from command import CommandRequest
from errors import LaunchError, report
from launch import exec_resolution
from locate import locate_command
from sdk import resolve_sdk_root

TOOL_VERSION = "0.0.1"


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    prog = argv[0] if argv else "xcrun"

    if len(argv) < 2:
        return _usage(prog)

    opt = argv[1]
    if opt in ("--help", "-h"):
        help_mod.main(prog)
        return 0
    if opt == "--version":
        print(f"xcrun version {TOOL_VERSION}")
        return 0
    if opt == "--show-sdk-path":
        return _show_sdk_path()
    if opt in ("--find", "-f"):
        if len(argv) < 3:
            return _usage(prog)
        return _find(argv[2:])

    return _run(argv[1:])


def _usage(prog: str) -> int:
    print(help_mod.usage_line(prog), file=sys.stderr)
    return 1


def _run(forward_argv: list[str]) -> int:
    request = CommandRequest.from_argv(forward_argv)
    try:
        exec_resolution(locate_command(request))
    except LaunchError as exc:
        return _abort(request.name, exc)


def _find(forward_argv: list[str]) -> int:
    request = CommandRequest.from_argv(forward_argv)
    try:
        resolution = locate_command(request)
    except LaunchError as exc:
        return _abort(request.name, exc)
    print(resolution.path)
    return 0


def _show_sdk_path() -> int:
    root = resolve_sdk_root()
    if root is None:
        report("unable to locate the active SDK path.")
        return 1
    print(root)
    return 0


def _abort(name: str, exc: LaunchError) -> int:
    report(str(exc))
    report(f"failed to execute command '{name}'. aborting.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
