"""Usage banner and option reference for xcrun."""

import sys

OPTIONS = [
    ("<program> [args...]", "Find <program> on PATH or in the SDK and run it"),
    ("-f, --find <program>", "Print the path <program> resolves to"),
    ("--show-sdk-path", "Print the active SDK root"),
    ("--version", "Print the xcrun version"),
    ("-h, --help", "Show this reference"),
]


def usage_line(prog: str) -> str:
    return f"Usage: {prog} <program>"


def main(prog: str = "xcrun", file=None) -> None:
    if file is None:
        file = sys.stdout
    print(usage_line(prog), file=file)
    print(file=file)
    _print_table(OPTIONS, file)
    print("\nenvironment\n", file=file)
    _print_table(
        [
            ("PATH", "Directories searched first, in order"),
            ("DEVELOPER_DIR", "SDK root override; <root>/bin is searched last"),
            ("HOME", "Locates ~/.darwinsdk.dat when DEVELOPER_DIR is unset"),
        ],
        file,
    )


def _print_table(rows: list[tuple[str, str]], file) -> None:
    name_w = max(len(r[0]) for r in rows)
    for name, desc in rows:
        print(f"  {name:<{name_w}}  {desc}", file=file)
