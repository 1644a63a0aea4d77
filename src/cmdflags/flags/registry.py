from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, Tuple, Union

from cmdflags.exceptions import DuplicateFlagNameError, UnknownFlagError
from cmdflags.types import FlagType

from .spec import FlagDescriptor

logger = logging.getLogger("cmdflags.flags")
logger.addHandler(logging.NullHandler())


class FlagRegistry:
    """Mapping of flag name to descriptor, kept in registration order.

    A new registry carries the ``help``, ``version`` and ``minloglevel``
    built-ins unless ``builtins=False`` is passed.
    """

    def __init__(self, *, builtins: bool = True) -> None:
        self._flags: Dict[str, FlagDescriptor] = {}
        if builtins:
            from cmdflags.builtins import register_builtin_flags

            register_builtin_flags(self)
        logger.debug("FlagRegistry initialized id=%s flags=%d", hex(id(self)), len(self._flags))

    def register(self, descriptor: FlagDescriptor) -> FlagDescriptor:
        name = descriptor.name
        logger.debug("Register called: name=%r type=%s", name, descriptor.type_tag)
        if name in self._flags:
            logger.error("Register failed: %r already registered", name)
            raise DuplicateFlagNameError(name)
        self._flags[name] = descriptor
        return descriptor

    def define(
        self, name: str, type_tag: Union[FlagType, str], help: str, default_value: Any
    ) -> FlagDescriptor:
        return self.register(FlagDescriptor(name, type_tag, help, default_value))

    def has(self, name: str) -> bool:
        return name in self._flags

    def lookup(self, name: str) -> FlagDescriptor:
        try:
            descriptor = self._flags[name]
        except KeyError:
            logger.error("Unknown flag: %r | flags=%d", name, len(self._flags))
            raise UnknownFlagError(name) from None
        logger.debug("Lookup(%r) -> %s", name, descriptor.type_tag)
        return descriptor

    def enumerate(self) -> Iterator[FlagDescriptor]:
        # a new generator per call, over a snapshot so registration during iteration is safe
        yield from tuple(self._flags.values())

    def names(self) -> Tuple[str, ...]:
        return tuple(self._flags)

    def snapshot(self) -> MappingProxyType[str, Any]:
        return MappingProxyType({name: d.current_value for name, d in self._flags.items()})

    def reset_all(self) -> None:
        logger.debug("Resetting %d flags to defaults", len(self._flags))
        for descriptor in self._flags.values():
            descriptor.reset()

    def clear(self) -> None:
        logger.debug("Clearing registry: flags=%d", len(self._flags))
        self._flags.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._flags

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._flags))

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        return f"<FlagRegistry flags={len(self._flags)}>"
