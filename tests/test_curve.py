from __future__ import annotations

import pytest

from bullseye.core.common import Mode
from bullseye.core.curve import DifficultyCurve, difficulty01, resolve_curve, resolve_curves


def test_difficulty_extremes_match_easy_and_hard_tuples() -> None:
    assert resolve_curve(Mode.TIMED, 1) == DifficultyCurve(2000, 550, 3.0)
    assert resolve_curve(Mode.TIMED, 10) == DifficultyCurve(1200, 350, 7.5)
    assert resolve_curve(Mode.TRACKING, 1) == DifficultyCurve(2600, 900, 2.0)
    assert resolve_curve(Mode.TRACKING, 10) == DifficultyCurve(2000, 650, 3.6)


def test_midpoint_rounds_delays_but_not_ramp() -> None:
    curve = resolve_curve(Mode.TIMED, 5)
    assert curve.start_delay_ms == 1644
    assert curve.min_delay_ms == 461
    assert curve.ramp_per_sec == pytest.approx(5.0)


@pytest.mark.parametrize("difficulty", range(1, 11))
def test_delay_is_non_increasing_and_floored(difficulty: int) -> None:
    for curve in resolve_curves(difficulty).values():
        assert curve.min_delay_ms <= curve.start_delay_ms
        prev = curve.delay_ms(0.0)
        assert prev == curve.start_delay_ms
        for step in range(1, 2000):
            delay = curve.delay_ms(step * 0.5)
            assert delay <= prev
            assert delay >= curve.min_delay_ms
            prev = delay
        assert curve.delay_ms(10_000.0) == curve.min_delay_ms


@pytest.mark.parametrize("difficulty", range(1, 11))
def test_tracking_is_slower_than_timed(difficulty: int) -> None:
    curves = resolve_curves(difficulty)
    timed, tracking = curves[Mode.TIMED], curves[Mode.TRACKING]
    assert tracking.start_delay_ms > timed.start_delay_ms
    assert tracking.min_delay_ms > timed.min_delay_ms
    assert tracking.ramp_per_sec < timed.ramp_per_sec


def test_out_of_range_difficulty_is_clamped() -> None:
    assert difficulty01(0) == 0.0
    assert difficulty01(42) == 1.0
    assert resolve_curve(Mode.TIMED, -3) == resolve_curve(Mode.TIMED, 1)
    assert resolve_curve(Mode.TIMED, 15) == resolve_curve(Mode.TIMED, 10)


def test_negative_elapsed_time_uses_start_delay() -> None:
    curve = resolve_curve(Mode.TIMED, 1)
    assert curve.delay_ms(-5.0) == 2000

