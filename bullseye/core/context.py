from __future__ import annotations
from dataclasses import dataclass, field

from bullseye.const import GAME_MS
from bullseye.core.common import Arena, RunSettings
from bullseye.core.curve import DifficultyCurve
from bullseye.core.stats import RunStats
from bullseye.core.targets import TargetPool


@dataclass
class RunContext:
    """Everything one run mutates; owned by the RunController."""
    settings: RunSettings
    curve: DifficultyCurve
    arena: Arena
    pool: TargetPool
    stats: RunStats = field(default_factory=RunStats)
    started_at_ms: float = 0.0
    last_tick_ms: float = 0.0
    running: bool = False

    def elapsed_ms(self, now_ms: float) -> float:
        return max(0.0, now_ms - self.started_at_ms)

    def elapsed_sec(self, now_ms: float) -> float:
        return self.elapsed_ms(now_ms) / 1000.0

    def remaining_ms(self, now_ms: float) -> float:
        return max(0.0, GAME_MS - self.elapsed_ms(now_ms))
