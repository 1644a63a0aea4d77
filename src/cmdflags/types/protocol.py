from typing import Any, Protocol

from typing_extensions import runtime_checkable


@runtime_checkable
class ValueCodec(Protocol):
    def parse(self, text: str) -> Any: ...  # raise InvalidValueFormatError on failure

    def format(self, value: Any) -> str: ...

    def check(self, value: Any) -> Any: ...
