from __future__ import annotations

from typing import Any


class FlagError(Exception):
    """Base flag exception."""


class DuplicateFlagNameError(FlagError):
    """Raised when a flag name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Flag {name!r} is already registered.")


class UnknownFlagError(FlagError):
    """Raised when a flag name is not present in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown/Invalid flag {name}")


class MissingValueError(FlagError):
    """Raised when a value-consuming flag is the last token on the command line."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Flag {name} requires a value")


class InvalidValueFormatError(FlagError):
    """Raised when a value cannot be converted to (or does not match) the flag's type."""

    def __init__(self, name: str | None, value: Any, type_tag: object) -> None:
        self.name = name
        self.value = value
        self.type_tag = type_tag
        msg = f"Invalid value {value!r} for type {type_tag}"
        if name is not None:
            msg = f"Invalid flag: {name} {msg}"
        super().__init__(msg)
