from __future__ import annotations

import logging
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

from cmdflags.types import FlagType

from .registry import FlagRegistry
from .spec import FlagDescriptor

logger = logging.getLogger("cmdflags.flags")
logger.addHandler(logging.NullHandler())

__all__ = [
    "Flag",
    "FlagDescriptor",
    "FlagRegistry",
    "REGISTRY",
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
]

T = TypeVar("T")

# Default process registry; declarations without an explicit registry land here.
REGISTRY = FlagRegistry()


class Flag(Generic[T]):
    """
    Typed handle to a registered flag.

    Constructing a Flag registers its descriptor; a second Flag with the same
    name in the same registry raises DuplicateFlagNameError.
    """

    def __init__(
        self,
        name: str,
        type_tag: Union[FlagType, str],
        help: str,
        default_value: T,
        *,
        registry: Optional[FlagRegistry] = None,
    ) -> None:
        self._registry = REGISTRY if registry is None else registry
        self._descriptor = self._registry.define(name, type_tag, help, default_value)

    @property
    def name(self) -> str:
        return self._descriptor.name

    @property
    def type_tag(self) -> FlagType:
        return self._descriptor.type_tag  # type: ignore[return-value]

    @property
    def help(self) -> str:
        return self._descriptor.help

    @property
    def default(self) -> T:
        return self._descriptor.default_value

    @property
    def descriptor(self) -> FlagDescriptor:
        return self._descriptor

    @property
    def value(self) -> T:
        return self._descriptor.current_value

    def set_value(self, value: T) -> None:
        self._descriptor.set_value(value)

    def set_value_as_str(self, text: str) -> None:
        self._descriptor.set_value_as_str(text)

    def reset(self) -> None:
        self._descriptor.reset()

    def __repr__(self) -> str:
        return f"<Flag {self.name}:{self.type_tag}={self.value!r}>"


def define_flag(
    name: str,
    type_tag: Union[FlagType, str],
    default: Any,
    help: str,
    *,
    registry: Optional[FlagRegistry] = None,
) -> Flag[Any]:
    return Flag(name, type_tag, help, default, registry=registry)


def define_bool(
    name: str, default: bool, help: str, *, registry: Optional[FlagRegistry] = None
) -> Flag[bool]:
    return Flag(name, FlagType.BOOL, help, default, registry=registry)


def define_int32(
    name: str, default: int, help: str, *, registry: Optional[FlagRegistry] = None
) -> Flag[int]:
    return Flag(name, FlagType.INT32, help, default, registry=registry)


def define_int64(
    name: str, default: int, help: str, *, registry: Optional[FlagRegistry] = None
) -> Flag[int]:
    return Flag(name, FlagType.INT64, help, default, registry=registry)


def define_uint32(
    name: str, default: int, help: str, *, registry: Optional[FlagRegistry] = None
) -> Flag[int]:
    return Flag(name, FlagType.UINT32, help, default, registry=registry)


def define_uint64(
    name: str, default: int, help: str, *, registry: Optional[FlagRegistry] = None
) -> Flag[int]:
    return Flag(name, FlagType.UINT64, help, default, registry=registry)


def define_float(
    name: str, default: float, help: str, *, registry: Optional[FlagRegistry] = None
) -> Flag[float]:
    return Flag(name, FlagType.FLOAT, help, default, registry=registry)


def define_double(
    name: str, default: float, help: str, *, registry: Optional[FlagRegistry] = None
) -> Flag[float]:
    return Flag(name, FlagType.DOUBLE, help, default, registry=registry)


def define_string(
    name: str, default: str, help: str, *, registry: Optional[FlagRegistry] = None
) -> Flag[str]:
    return Flag(name, FlagType.STRING, help, default, registry=registry)


def get_flag(flag: Flag[T]) -> T:
    return flag.value


def set_flag(flag: Flag[T], value: Any) -> None:
    """Assign ``value`` to ``flag``; strings are parsed for non-string flags."""
    if isinstance(value, str) and flag.type_tag is not FlagType.STRING:
        flag.set_value_as_str(value)
    else:
        flag.set_value(value)


def list_flags(registry: Optional[FlagRegistry] = None) -> Tuple[str, ...]:
    return (REGISTRY if registry is None else registry).names()
