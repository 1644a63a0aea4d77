"""
Built-in flags present in every registry.

``help`` and ``version`` are plain booleans as far as the registry is
concerned; the parser intercepts them and ends parsing with a ``Terminate``
result instead of assigning them. ``minloglevel`` is an ordinary int32 flag
that the host applies to logging after a successful parse.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional

from cmdflags.types import FlagType

if TYPE_CHECKING:
    from cmdflags.flags.registry import FlagRegistry

logger = logging.getLogger("cmdflags.builtins")
logger.addHandler(logging.NullHandler())

__all__ = [
    "VERSION",
    "HELP",
    "VERSION_FLAG",
    "MINLOGLEVEL",
    "register_builtin_flags",
    "usage_text",
    "version_text",
    "log_level_for",
]

VERSION = "0.1.0"

HELP = "help"
VERSION_FLAG = "version"
MINLOGLEVEL = "minloglevel"

# glog-style severities
_SEVERITY_LEVELS: Dict[int, int] = {
    0: logging.INFO,
    1: logging.WARNING,
    2: logging.ERROR,
    3: logging.CRITICAL,
}


def register_builtin_flags(registry: "FlagRegistry") -> None:
    registry.define(HELP, FlagType.BOOL, "show help", False)
    registry.define(VERSION_FLAG, FlagType.BOOL, "show version", False)
    registry.define(
        MINLOGLEVEL,
        FlagType.INT32,
        "Messages logged at a lower level than this don't actually get logged anywhere",
        0,
    )
    logger.debug("Built-in flags registered on registry id=%s", hex(id(registry)))


def version_text(version: Optional[str] = None) -> str:
    return version if version else f"cmdflags {VERSION}"


def usage_text(
    program_name: str, registry: "FlagRegistry", version: Optional[str] = None
) -> str:
    lines = [version_text(version), "", f"Usage: {program_name} [options] files", ""]
    for descriptor in registry.enumerate():
        lines.append(
            f"   --{descriptor.name} ({descriptor.help})"
            f"  type: {descriptor.type_tag}"
            f"  default: {descriptor.format_value(descriptor.default_value)}"
        )
    lines.append("")
    return "\n".join(lines) + "\n"


def log_level_for(minloglevel: int) -> int:
    """Map a glog severity threshold onto a ``logging`` level.

    Negative values log everything; values above 3 are clamped to CRITICAL.
    """
    if minloglevel < 0:
        return logging.DEBUG
    return _SEVERITY_LEVELS.get(minloglevel, logging.CRITICAL)
