"""
cmdflags: typed command-line flags backed by a process-wide registry.

- Flags are declared once, with a type and a default, and register themselves.
- ``parse_command_line_flags`` applies argv to the registry and returns the
  positional arguments.
- ``--help`` and ``--version`` are built in.
- ``FlagCleanup`` resets every flag to its default when its scope ends.
"""

from __future__ import annotations

from cmdflags.app import parse_command_line_flags
from cmdflags.builtins import VERSION as __version__
from cmdflags.builtins import usage_text, version_text
from cmdflags.cleanup import FlagCleanup
from cmdflags.exceptions import (
    DuplicateFlagNameError,
    FlagError,
    InvalidValueFormatError,
    MissingValueError,
    UnknownFlagError,
)
from cmdflags.flags import (
    REGISTRY,
    Flag,
    FlagDescriptor,
    FlagRegistry,
    define_bool,
    define_double,
    define_flag,
    define_float,
    define_int32,
    define_int64,
    define_string,
    define_uint32,
    define_uint64,
    get_flag,
    list_flags,
    set_flag,
)
from cmdflags.parser import CommandLineParser, Continue, ParseResult, Terminate
from cmdflags.types import FlagType

__all__ = [
    "__version__",
    "REGISTRY",
    "Flag",
    "FlagDescriptor",
    "FlagRegistry",
    "FlagType",
    "CommandLineParser",
    "Continue",
    "Terminate",
    "ParseResult",
    "FlagCleanup",
    "parse_command_line_flags",
    "usage_text",
    "version_text",
    "define_flag",
    "define_bool",
    "define_int32",
    "define_int64",
    "define_uint32",
    "define_uint64",
    "define_float",
    "define_double",
    "define_string",
    "get_flag",
    "set_flag",
    "list_flags",
    "FlagError",
    "DuplicateFlagNameError",
    "UnknownFlagError",
    "MissingValueError",
    "InvalidValueFormatError",
]
