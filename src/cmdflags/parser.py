"""
Command-line parsing against a FlagRegistry.

The parser never ends the process itself. ``parse`` returns ``Continue`` with
the compacted argv, or ``Terminate`` carrying an exit code and the text the
host should print before exiting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from cmdflags.builtins import HELP, VERSION_FLAG, usage_text, version_text
from cmdflags.exceptions import FlagError, MissingValueError, UnknownFlagError
from cmdflags.flags.registry import FlagRegistry

logger = logging.getLogger("cmdflags.parser")
logger.addHandler(logging.NullHandler())

__all__ = ["CommandLineParser", "Continue", "Terminate", "ParseResult", "split_flag_token"]


@dataclass(frozen=True)
class Continue:
    argv: List[str] = field(default_factory=list)

    @property
    def argc(self) -> int:
        return len(self.argv)


@dataclass(frozen=True)
class Terminate:
    exit_code: int
    message: str
    error: Optional[FlagError] = None


ParseResult = Union[Continue, Terminate]


def split_flag_token(token: str) -> Optional[Tuple[str, Optional[str]]]:
    """
    Return ``(name, inline_value)`` for a flag token, or None for a positional.

    A flag token is one or two dashes followed by a non-empty name, optionally
    followed by ``=value``.
    """
    if token.startswith("--"):
        body = token[2:]
    elif token.startswith("-"):
        body = token[1:]
    else:
        return None
    name, sep, value = body.partition("=")
    if not name:
        return None
    return name, (value if sep else None)


class CommandLineParser:
    def __init__(
        self,
        registry: FlagRegistry,
        *,
        version: Optional[str] = None,
        remove_flags: bool = True,
    ) -> None:
        self._registry = registry
        self._version = version
        self._remove_flags = remove_flags
        self._positional: List[str] = []
        self._program_name = ""

    @property
    def positional(self) -> Tuple[str, ...]:
        """Positional tokens collected by the last parse."""
        return tuple(self._positional)

    def parse(self, argv: Sequence[str]) -> ParseResult:
        self.reset()
        args = list(argv)
        self._program_name = args[0] if args else ""
        try:
            early = self._consume(args)
        except FlagError as exc:
            logger.error("Command line rejected: %s", exc)
            message = str(exc)
            if isinstance(exc, UnknownFlagError):
                message = f"{message}\n\n{self.usage()}"
            return Terminate(exit_code=1, message=message, error=exc)
        if early is not None:
            return early

        out = [self._program_name] + self._positional if self._remove_flags else args
        logger.debug("Parse complete: argc=%d positional=%r", len(out), self._positional)
        return Continue(argv=out)

    def usage(self) -> str:
        return usage_text(self._program_name, self._registry, self._version)

    def reset(self) -> None:
        self._positional = []
        self._program_name = ""

    def _consume(self, args: List[str]) -> Optional[Terminate]:
        i = 1
        while i < len(args):
            token = args[i]
            split = split_flag_token(token)
            if split is None:
                self._positional.append(token)
                i += 1
                continue

            name, inline_value = split
            descriptor = self._registry.lookup(name)

            if name == HELP:
                logger.debug("Help requested at argv[%d]", i)
                return Terminate(exit_code=0, message=self.usage())
            if name == VERSION_FLAG:
                logger.debug("Version requested at argv[%d]", i)
                return Terminate(exit_code=0, message=version_text(self._version) + "\n")

            if inline_value is not None:
                descriptor.set_value_as_str(inline_value)
                i += 1
            elif descriptor.is_bool:
                descriptor.set_value(True)
                i += 1
            else:
                if i + 1 >= len(args):
                    logger.error("Flag %r given without a value", name)
                    raise MissingValueError(name)
                descriptor.set_value_as_str(args[i + 1])
                i += 2
        return None
