"""Pytest coverage for runtime configuration and debug logging."""

import logging

import pytest

from monkey.config import Config
from monkey.environment import Environment
from monkey.evaluator import evaluate

from builders import program, infix


@pytest.mark.parametrize("raw, level", [
    (None, "none"),
    ("debug", "debug"),
    ("ERROR", "error"),
    ("1", "debug"),
    ("nonsense", "none"),
])
def test_level_from_environment(monkeypatch, raw, level):
    if raw is None:
        monkeypatch.delenv("MONKEY_DEBUG", raising=False)
    else:
        monkeypatch.setenv("MONKEY_DEBUG", raw)
    assert Config().debug_level == level


def test_should_log_thresholds():
    cfg = Config("error")
    assert cfg.should_log("error")
    assert not cfg.should_log("debug")
    cfg.enable_debug()
    assert cfg.should_log("debug")
    cfg.disable_debug()
    assert not cfg.should_log("error")


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        Config("verbose")


def test_debug_mode_emits_evaluator_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="monkey.evaluator"):
        evaluate(program(infix(1, "+", 2)), Environment(), debug_mode=True)
    assert any("eval_program" in record.getMessage() for record in caplog.records)


def test_quiet_by_default(caplog):
    with caplog.at_level(logging.DEBUG, logger="monkey.evaluator"):
        evaluate(program(infix(1, "+", 2)), Environment())
    assert not caplog.records
