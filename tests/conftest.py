"""Shared fixtures. Tools are tiny /bin/sh scripts written into tmp dirs."""

from pathlib import Path

import pytest


def _write_tool(directory: Path, name: str, body: str = "", mode: int = 0o755) -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(mode)
    return path


@pytest.fixture
def make_tool():
    """Return a factory: make_tool(directory, name, body="", mode=0o755) -> Path."""
    return _write_tool
