import logging

import pytest

from cmdflags.builtins import VERSION, log_level_for, usage_text, version_text
from cmdflags.flags import FlagRegistry
from cmdflags.types import FlagType


def test_builtins_are_preregistered(registry):
    assert registry.lookup("help").type_tag is FlagType.BOOL
    assert registry.lookup("version").type_tag is FlagType.BOOL
    assert registry.lookup("minloglevel").type_tag is FlagType.INT32
    assert registry.lookup("help").current_value is False


def test_version_text():
    assert version_text() == f"cmdflags {VERSION}"
    assert version_text("spm 0.2") == "spm 0.2"


def test_usage_text_lists_every_flag(registry, test_flags):
    text = usage_text("spm_train", registry, version="spm 0.2")
    lines = text.splitlines()
    assert lines[0] == "spm 0.2"
    assert lines[2] == "Usage: spm_train [options] files"
    for name in registry.names():
        assert any(line.startswith(f"   --{name} (") for line in lines)
    assert "   --help (show help)  type: bool  default: false" in lines
    assert "   --double_f (double_flags)  type: double  default: 40.0" in lines
    assert "   --uint64_f (uint64_flags)  type: uint64  default: 18446744073709551615" in lines


def test_usage_text_uses_defaults_not_current_values(registry, test_flags):
    test_flags.int32_f.set_value(99)
    assert "default: 10" in usage_text("p", registry)


def test_usage_text_empty_registry():
    text = usage_text("p", FlagRegistry(builtins=False))
    assert "Usage: p [options] files" in text
    assert "--" not in text


@pytest.mark.parametrize(
    "severity, level",
    [
        (-1, logging.DEBUG),
        (0, logging.INFO),
        (1, logging.WARNING),
        (2, logging.ERROR),
        (3, logging.CRITICAL),
        (7, logging.CRITICAL),
    ],
)
def test_log_level_for(severity, level):
    assert log_level_for(severity) == level
