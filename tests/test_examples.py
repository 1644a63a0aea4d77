import importlib.util
from pathlib import Path

import pytest

from cmdflags.flags import FlagRegistry

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def load_example(monkeypatch):
    """Import an example program against a fresh process registry."""

    def _load(name):
        reg = FlagRegistry()
        for target in ("cmdflags.flags.REGISTRY", "cmdflags.cleanup.REGISTRY", "cmdflags.app.REGISTRY"):
            monkeypatch.setattr(target, reg)
        spec = importlib.util.spec_from_file_location(name, EXAMPLES / f"{name}.py")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module, reg

    return _load


def test_normalize_main_uses_positional_inputs(load_example, capsys):
    module, reg = load_example("normalize_main")
    rc = module.main(["spm_normalize", "--normalization_rule_name", "nfkc", "a.txt", "b.txt"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "'normalization_rule_name': 'nfkc'" in out
    assert "['a.txt', 'b.txt']" in out
    # cleanup reset the flags on the way out
    assert reg.lookup("normalization_rule_name").current_value == ""


def test_normalize_main_requires_a_rule_source(load_example):
    module, _ = load_example("normalize_main")
    assert module.main(["spm_normalize"]) == 1


def test_train_main_collects_trainer_spec(load_example, capsys):
    module, reg = load_example("train_main")
    rc = module.main(
        [
            "spm_train",
            "--input=a.txt,b.txt",
            "--model_prefix",
            "m",
            "--vocab_size=1000",
            "--byte_fallback",
            "--differential_privacy_noise_level=0.5",
        ]
    )
    assert rc == 0
    out = capsys.readouterr().out
    assert "input: ['a.txt', 'b.txt']" in out
    assert "vocab_size: 1000" in out
    assert "byte_fallback: True" in out
    assert "differential_privacy_noise_level: 0.5" in out
    assert "random_seed" not in out
    assert reg.lookup("vocab_size").current_value == 8000


def test_train_main_help_exits_zero(load_example, capsys):
    module, _ = load_example("train_main")
    with pytest.raises(SystemExit) as exc:
        module.main(["spm_train", "--help"])
    assert exc.value.code == 0
    assert "--vocab_size (vocabulary size)  type: int32  default: 8000" in capsys.readouterr().out
