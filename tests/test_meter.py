import pytest

from passmeter.evaluator import evaluate, STRONG, WEAK, MEDIUM
from passmeter.meter import StrengthMeter, bar_width, level_color
from passmeter.policy import Policy


def test_callback_runs_on_mount_and_every_change():
    calls = []
    meter = StrengthMeter(on_change=calls.append)
    assert len(calls) == 1
    assert calls[0].level == WEAK and calls[0].score == 0

    meter.set_password("abc")
    meter.set_password("Abc123")
    meter.set_password("Test123!")
    assert [r.level for r in calls] == [WEAK, WEAK, MEDIUM, STRONG]
    assert meter.result == calls[-1]
    assert meter.password == "Test123!"


def test_clear_resets_to_zero():
    calls = []
    meter = StrengthMeter(on_change=calls.append, password="Test123!")
    assert calls[0].level == STRONG
    meter.clear()
    assert calls[-1].score == 0
    assert meter.result.level == WEAK


def test_meter_uses_policy():
    calls = []
    StrengthMeter(Policy(require_uppercase=False), on_change=calls.append, password="lowercase123!")
    assert calls[0].criteria["uppercase"] is True


def test_no_callback_is_fine():
    meter = StrengthMeter()
    assert meter.set_password("Test123!") == evaluate("Test123!")


def test_callback_errors_propagate():
    def boom(result):
        if result.score:
            raise RuntimeError("render failed")

    meter = StrengthMeter(on_change=boom)
    with pytest.raises(RuntimeError):
        meter.set_password("Test123!")
    # result is stored before the callback runs
    assert meter.result.score == 7


def test_bar_width():
    assert bar_width(evaluate("")) == "0%"
    assert bar_width(evaluate("Test123!")) == "100%"
    assert bar_width(evaluate("Abc123!@#")) == "85.71%"


def test_level_color():
    assert level_color(WEAK) == "#e74c3c"
    assert level_color(MEDIUM) == "#f39c12"
    assert level_color(STRONG) == "#2ecc71"
    assert level_color("Unknown") == "#aaa"
