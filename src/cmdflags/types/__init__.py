from __future__ import annotations

import logging
import math
import re
import struct
from enum import Enum
from typing import Any, Dict

from cmdflags.exceptions import InvalidValueFormatError

from .protocol import ValueCodec

logger = logging.getLogger("cmdflags.types")
logger.addHandler(logging.NullHandler())

__all__ = [
    "FlagType",
    "ValueCodec",
    "BoolCodec",
    "IntCodec",
    "FloatCodec",
    "StringCodec",
]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _require_str(text: Any, tag: str) -> None:
    if not isinstance(text, str):
        raise InvalidValueFormatError(None, text, tag)


def _has_nonzero_mantissa(text: str) -> bool:
    mantissa = re.split(r"[eE]", text, maxsplit=1)[0]
    return any(c in "123456789" for c in mantissa)


class BoolCodec:
    TRUE = ("true", "1")
    FALSE = ("false", "0")

    def __init__(self, tag: str = "bool") -> None:
        self.tag = tag

    def parse(self, text: str) -> bool:
        _require_str(text, self.tag)
        lowered = text.lower()
        if lowered in self.TRUE:
            return True
        if lowered in self.FALSE:
            return False
        raise InvalidValueFormatError(None, text, self.tag)

    def format(self, value: Any) -> str:
        return "true" if value else "false"

    def check(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise InvalidValueFormatError(None, value, self.tag)
        return value


class IntCodec:
    """Fixed-width integer codec; strict base-10 parsing with range checks."""

    def __init__(self, tag: str, bits: int, signed: bool) -> None:
        self.tag = tag
        if signed:
            self.min = -(1 << (bits - 1))
            self.max = (1 << (bits - 1)) - 1
        else:
            self.min = 0
            self.max = (1 << bits) - 1

    def parse(self, text: str) -> int:
        _require_str(text, self.tag)
        if not _INT_RE.fullmatch(text):
            raise InvalidValueFormatError(None, text, self.tag)
        return self._in_range(int(text), text)

    def format(self, value: Any) -> str:
        return str(value)

    def check(self, value: Any) -> int:
        # bool is an int subclass but never a valid integer flag value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidValueFormatError(None, value, self.tag)
        return self._in_range(value, value)

    def _in_range(self, value: int, original: Any) -> int:
        if not (self.min <= value <= self.max):
            logger.debug("%s value %r out of range [%d, %d]", self.tag, original, self.min, self.max)
            raise InvalidValueFormatError(None, original, self.tag)
        return value


class FloatCodec:
    """
    Floating-point codec.

    With ``single=True`` values are rounded to IEEE single precision and
    anything that rounds to infinity is rejected. A finite literal that
    overflows, or a nonzero literal that underflows to zero, is rejected the
    way strtod/strtof report ERANGE.
    """

    def __init__(self, tag: str, single: bool = False) -> None:
        self.tag = tag
        self.single = single

    def parse(self, text: str) -> float:
        _require_str(text, self.tag)
        if not _FLOAT_RE.fullmatch(text):
            raise InvalidValueFormatError(None, text, self.tag)
        if "inf" in text.lower() or "nan" in text.lower():
            return float(text)
        value = self._narrowed(float(text), text)
        if math.isinf(value):
            raise InvalidValueFormatError(None, text, self.tag)
        if value == 0.0 and _has_nonzero_mantissa(text):
            logger.debug("%s literal %r underflows to zero", self.tag, text)
            raise InvalidValueFormatError(None, text, self.tag)
        return value

    def format(self, value: Any) -> str:
        return repr(float(value))

    def check(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidValueFormatError(None, value, self.tag)
        try:
            converted = float(value)
        except OverflowError as exc:
            raise InvalidValueFormatError(None, value, self.tag) from exc
        return self._narrowed(converted, value)

    def _narrowed(self, value: float, original: Any) -> float:
        if not self.single:
            return value
        try:
            return struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError as exc:
            raise InvalidValueFormatError(None, original, self.tag) from exc


class StringCodec:
    def __init__(self, tag: str = "string") -> None:
        self.tag = tag

    def parse(self, text: str) -> str:
        _require_str(text, self.tag)
        return text

    def format(self, value: Any) -> str:
        return value

    def check(self, value: Any) -> str:
        if not isinstance(value, str):
            raise InvalidValueFormatError(None, value, self.tag)
        return value


class FlagType(Enum):
    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"

    def __str__(self) -> str:
        return self.value

    @property
    def codec(self) -> ValueCodec:
        return _CODECS[self]

    def parse(self, text: str) -> Any:
        return self.codec.parse(text)

    def format(self, value: Any) -> str:
        return self.codec.format(value)

    def check(self, value: Any) -> Any:
        return self.codec.check(value)


_CODECS: Dict[FlagType, ValueCodec] = {
    FlagType.BOOL: BoolCodec(),
    FlagType.INT32: IntCodec("int32", 32, signed=True),
    FlagType.INT64: IntCodec("int64", 64, signed=True),
    FlagType.UINT32: IntCodec("uint32", 32, signed=False),
    FlagType.UINT64: IntCodec("uint64", 64, signed=False),
    FlagType.FLOAT: FloatCodec("float", single=True),
    FlagType.DOUBLE: FloatCodec("double"),
    FlagType.STRING: StringCodec(),
}
