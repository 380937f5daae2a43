from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from bullseye.const import (
    DIFFICULTY_MAX,
    DIFFICULTY_MIN,
    TIMED_CURVE_EASY,
    TIMED_CURVE_HARD,
    TRACKING_CURVE_EASY,
    TRACKING_CURVE_HARD,
)
from bullseye.core.common import Mode, clamp, lerp


_CURVES: Dict[Mode, Tuple[Tuple[float, float, float], Tuple[float, float, float]]] = {
    Mode.TIMED: (TIMED_CURVE_EASY, TIMED_CURVE_HARD),
    Mode.TRACKING: (TRACKING_CURVE_EASY, TRACKING_CURVE_HARD),
}


@dataclass(frozen=True)
class DifficultyCurve:
    start_delay_ms: int
    min_delay_ms: int
    ramp_per_sec: float

    def delay_ms(self, elapsed_sec: float) -> float:
        """Spawn delay after `elapsed_sec` of run time, never below the floor."""
        delay = self.start_delay_ms - max(0.0, elapsed_sec) * self.ramp_per_sec
        return clamp(delay, self.min_delay_ms, self.start_delay_ms)


def difficulty01(difficulty: int) -> float:
    # slider 1..10 -> t 0..1
    t = (difficulty - DIFFICULTY_MIN) / float(DIFFICULTY_MAX - DIFFICULTY_MIN)
    return clamp(t, 0.0, 1.0)


def resolve_curve(mode: Mode, difficulty: int) -> DifficultyCurve:
    easy, hard = _CURVES[mode]
    t = difficulty01(difficulty)
    return DifficultyCurve(
        start_delay_ms=int(round(lerp(easy[0], hard[0], t))),
        min_delay_ms=int(round(lerp(easy[1], hard[1], t))),
        ramp_per_sec=lerp(easy[2], hard[2], t),
    )


def resolve_curves(difficulty: int) -> Dict[Mode, DifficultyCurve]:
    return {mode: resolve_curve(mode, difficulty) for mode in Mode}
