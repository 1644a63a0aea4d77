# python
import logging
from types import SimpleNamespace

import pytest

from cmdflags import REGISTRY
from cmdflags.flags import FlagRegistry, define_flag


@pytest.fixture
def registry():
    reg = FlagRegistry()
    yield reg
    reg.reset_all()


@pytest.fixture
def test_flags(registry):
    return SimpleNamespace(
        int32_f=define_flag("int32_f", "int32", 10, "int32_flags", registry=registry),
        bool_f=define_flag("bool_f", "bool", False, "bool_flags", registry=registry),
        int64_f=define_flag(
            "int64_f", "int64", 9223372036854775807, "int64_flags", registry=registry
        ),
        uint64_f=define_flag(
            "uint64_f", "uint64", 18446744073709551615, "uint64_flags", registry=registry
        ),
        double_f=define_flag("double_f", "double", 40.0, "double_flags", registry=registry),
        string_f=define_flag("string_f", "string", "str", "string_flags", registry=registry),
    )


@pytest.fixture(autouse=True)
def reset_default_registry():
    yield
    REGISTRY.reset_all()


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)
