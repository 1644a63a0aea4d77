from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Union

from cmdflags.exceptions import FlagError, InvalidValueFormatError
from cmdflags.types import FlagType

logger = logging.getLogger("cmdflags.flags")
logger.addHandler(logging.NullHandler())


@dataclass(eq=False)
class FlagDescriptor:
    name: str
    type_tag: Union[FlagType, str]
    help: str
    default_value: Any
    current_value: Any = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name or "=" in self.name:
            raise FlagError(f"Invalid flag name {self.name!r}.")
        if not isinstance(self.type_tag, FlagType):
            try:
                self.type_tag = FlagType(self.type_tag)
            except ValueError as exc:
                raise FlagError(f"Unsupported flag type {self.type_tag!r}.") from exc
        self.default_value = self._checked(self.default_value)
        self.current_value = self.default_value

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "default_value" and "current_value" in self.__dict__:
            raise AttributeError("default_value is immutable after registration.")
        super().__setattr__(name, value)

    @property
    def is_bool(self) -> bool:
        return self.type_tag is FlagType.BOOL

    def set_value(self, value: Any) -> None:
        self.current_value = self._checked(value)
        logger.debug("Set %s=%r", self.name, self.current_value)

    def set_value_as_str(self, text: str) -> None:
        try:
            parsed = self.type_tag.parse(text)
        except InvalidValueFormatError as exc:
            logger.error("Invalid value for flag %r: %r (%s)", self.name, text, self.type_tag)
            raise InvalidValueFormatError(self.name, text, self.type_tag) from exc
        self.current_value = parsed
        logger.debug("Set %s=%r from %r", self.name, parsed, text)

    def reset(self) -> None:
        self.current_value = self.default_value

    def format_value(self, value: Any = None) -> str:
        return self.type_tag.format(self.current_value if value is None else value)

    def _checked(self, value: Any) -> Any:
        try:
            return self.type_tag.check(value)
        except InvalidValueFormatError as exc:
            logger.error("Value %r does not match type %s of flag %r", value, self.type_tag, self.name)
            raise InvalidValueFormatError(self.name, value, self.type_tag) from exc
