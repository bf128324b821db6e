"""
Tests for src/utils/stopwatch.py

A fake nanosecond timer drives the stopwatch so elapsed values are exact.
"""

import time
from datetime import timedelta

import pytest

from src.utils.stopwatch import StopWatch


class FakeTimer:
    """Manually advanced nanosecond timer."""

    def __init__(self, start_ns: int = 1_000_000):
        self.now_ns = start_ns

    def advance_ms(self, ms: int) -> None:
        self.now_ns += ms * 1_000_000

    def __call__(self) -> int:
        return self.now_ns


@pytest.fixture
def timer():
    return FakeTimer()


def test_new_stopwatch_is_stopped_at_zero(timer):
    sw = StopWatch(timer=timer)
    assert not sw.is_running
    assert sw.elapsed_nanos() == 0
    assert sw.elapsed() == timedelta(0)


def test_start_new_is_running(timer):
    sw = StopWatch.start_new(timer=timer)
    assert sw.is_running
    timer.advance_ms(5)
    assert sw.elapsed_millis() == 5


def test_stop_freezes_elapsed(timer):
    sw = StopWatch.start_new(timer=timer)
    timer.advance_ms(100)
    sw.stop()
    timer.advance_ms(500)
    assert not sw.is_running
    assert sw.elapsed_millis() == 100
    assert sw.elapsed_micros() == 100_000
    assert sw.elapsed_nanos() == 100_000_000
    assert sw.elapsed_seconds() == pytest.approx(0.1)
    assert sw.elapsed() == timedelta(milliseconds=100)


def test_start_and_stop_are_idempotent(timer):
    sw = StopWatch(timer=timer)
    sw.stop()
    assert sw.elapsed_nanos() == 0

    sw.start()
    timer.advance_ms(10)
    sw.start()  # must not restart the current run
    timer.advance_ms(10)
    sw.stop()
    sw.stop()
    assert sw.elapsed_millis() == 20


def test_elapsed_accumulates_across_runs(timer):
    sw = StopWatch(timer=timer)
    sw.start()
    timer.advance_ms(30)
    sw.stop()
    timer.advance_ms(1000)
    sw.start()
    timer.advance_ms(20)
    sw.stop()
    assert sw.elapsed_millis() == 50


def test_reset_and_restart(timer):
    sw = StopWatch.start_new(timer=timer)
    timer.advance_ms(40)
    sw.reset()
    assert not sw.is_running
    assert sw.elapsed_nanos() == 0

    sw.start()
    timer.advance_ms(40)
    sw.restart()
    assert sw.is_running
    timer.advance_ms(15)
    assert sw.elapsed_millis() == 15


def test_context_manager(timer):
    with StopWatch(timer=timer) as sw:
        assert sw.is_running
        timer.advance_ms(12)
    assert not sw.is_running
    assert sw.elapsed_millis() == 12


def test_str_renders_seconds_and_millis(timer):
    sw = StopWatch.start_new(timer=timer)
    timer.advance_ms(1234)
    sw.stop()
    assert str(sw) == "1.234s"
    assert "is_running=False" in repr(sw)


def test_default_timer_measures_real_time():
    sw = StopWatch.start_new()
    time.sleep(0.01)
    sw.stop()
    assert sw.elapsed_millis() >= 10
