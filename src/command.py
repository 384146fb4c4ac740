"""Request and resolution values passed between the locator and the exec boundary."""

from typing import Literal

import msgspec

Origin = Literal["path", "sdk"]


class CommandRequest(msgspec.Struct, frozen=True):
    name: str
    argv: list[str]

    @classmethod
    def from_argv(cls, argv: list[str]) -> "CommandRequest":
        """Build a request from the launcher's argv tail (argv[0] is the name)."""
        return cls(name=argv[0], argv=list(argv))


class Resolution(msgspec.Struct, frozen=True):
    path: str
    argv: list[str]
    origin: Origin = "path"
