from __future__ import annotations

import logging
from types import TracebackType
from typing import Iterable, List, Optional, Type

from cmdflags.flags import REGISTRY
from cmdflags.flags.registry import FlagRegistry
from cmdflags.parser import CommandLineParser

logger = logging.getLogger("cmdflags.cleanup")
logger.addHandler(logging.NullHandler())


class FlagCleanup:
    """
    Scoped teardown for flag state.

    Leaving the ``with`` block, by return, exception or SystemExit, resets
    every flag in the registry to its default, discards the buffers of
    tracked parsers and puts back the root logger level that was in effect
    when the scope opened. Declarations survive, so the same flags can be
    parsed again afterwards.
    """

    def __init__(
        self,
        registry: Optional[FlagRegistry] = None,
        parsers: Iterable[CommandLineParser] = (),
    ) -> None:
        self._registry = REGISTRY if registry is None else registry
        self._parsers: List[CommandLineParser] = list(parsers)
        self._released = False
        self._root_level = logging.getLogger().level

    @property
    def released(self) -> bool:
        return self._released

    def track(self, parser: CommandLineParser) -> CommandLineParser:
        self._parsers.append(parser)
        return parser

    def release(self) -> None:
        if self._released:
            return
        self._registry.reset_all()
        for parser in self._parsers:
            parser.reset()
        self._parsers.clear()
        logging.getLogger().setLevel(self._root_level)
        self._released = True
        logger.debug("Flag state released for registry id=%s", hex(id(self._registry)))

    def __enter__(self) -> "FlagCleanup":
        self._released = False
        self._root_level = logging.getLogger().level
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.release()
