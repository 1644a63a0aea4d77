from cmdflags.exceptions import (
    DuplicateFlagNameError,
    FlagError,
    InvalidValueFormatError,
    MissingValueError,
    UnknownFlagError,
)
from cmdflags.types import FlagType


def test_invalid_value_format_error_message_and_attrs():
    err = InvalidValueFormatError("bool_f", "X", FlagType.BOOL)
    assert "Invalid flag: bool_f" in str(err)
    assert "'X'" in str(err)
    assert err.name == "bool_f"
    assert err.value == "X"
    assert err.type_tag is FlagType.BOOL


def test_invalid_value_format_error_without_name():
    err = InvalidValueFormatError(None, "abc", "int32")
    assert str(err) == "Invalid value 'abc' for type int32"


def test_name_carrying_errors():
    assert UnknownFlagError("foo").name == "foo"
    assert "foo" in str(UnknownFlagError("foo"))
    assert MissingValueError("int32_f").name == "int32_f"
    assert "already registered" in str(DuplicateFlagNameError("x"))


def test_custom_exceptions_are_subclasses():
    assert issubclass(DuplicateFlagNameError, FlagError)
    assert issubclass(UnknownFlagError, FlagError)
    assert issubclass(MissingValueError, FlagError)
    assert issubclass(InvalidValueFormatError, FlagError)
