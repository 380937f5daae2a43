from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

import numpy as np

from bullseye.const import GAME_MS
from bullseye.core import update
from bullseye.core.common import Arena, Mode, Outcome, RunSettings, RunState
from bullseye.core.context import RunContext
from bullseye.core.curve import resolve_curves
from bullseye.core.hits import HitResult, resolve_hit, resolve_press
from bullseye.core.ledger import ScoreLedger
from bullseye.core.scheduler import SpawnScheduler
from bullseye.core.stats import RunStats, ScoreRecord
from bullseye.core.targets import TargetPool, TrackingTarget

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetView:
    id: int
    mode: Mode
    x: float
    y: float
    size: float
    shielded: bool = False
    weak: bool = False


@dataclass(frozen=True)
class FrameSnapshot:
    elapsed_ms: float
    remaining_ms: float
    stats: RunStats
    targets: Tuple[TargetView, ...]


@dataclass(frozen=True)
class RunResult:
    outcome: Outcome
    mode: Mode
    record: ScoreRecord
    stats: RunStats
    new_best: bool = False


class PresentationSink(Protocol):
    def on_frame(self, snapshot: FrameSnapshot) -> None:
        ...

    def on_run_end(self, result: RunResult) -> None:
        ...


class RunController:
    """
    Idle -> Running -> Idle.

    All timing comes in as millisecond timestamps from the caller, which is
    expected to call `tick()` once per frame and to deliver presses after the
    frame's tick.
    """

    def __init__(
        self,
        arena: Arena,
        ledger: ScoreLedger,
        sink: Optional[PresentationSink] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.arena = arena
        self.ledger = ledger
        self.sink = sink
        self.pool = TargetPool(rng)
        self.ctx: Optional[RunContext] = None
        self.scheduler: Optional[SpawnScheduler] = None
        self.last_result: Optional[RunResult] = None

    @property
    def state(self) -> RunState:
        if self.ctx is not None and self.ctx.running:
            return RunState.RUNNING
        return RunState.IDLE

    @property
    def running(self) -> bool:
        return self.state is RunState.RUNNING

    # ------------- transitions -------------
    def start(self, settings: RunSettings, now_ms: float) -> None:
        if self.running:
            log.debug("start() ignored, a run is already active")
            return

        curves = resolve_curves(settings.difficulty)
        self.pool.clear()
        ctx = RunContext(
            settings=settings,
            curve=curves[settings.mode],
            arena=self.arena,
            pool=self.pool,
            stats=RunStats(),
            started_at_ms=now_ms,
            last_tick_ms=now_ms,
            running=True,
        )
        self.ctx = ctx
        self.scheduler = SpawnScheduler(ctx)
        self.scheduler.start(now_ms)
        log.info("Run started: mode=%s difficulty=%d shields=%s",
                 settings.mode.value, settings.difficulty, settings.shields)

    def restart(self, settings: RunSettings, now_ms: float) -> None:
        if self.running:
            self.end(Outcome.ABORTED, now_ms)
        self.start(settings, now_ms)

    def abort(self, now_ms: float) -> Optional[RunResult]:
        return self.end(Outcome.ABORTED, now_ms)

    def end(self, outcome: Outcome, now_ms: float) -> Optional[RunResult]:
        ctx = self.ctx
        if ctx is None or not ctx.running:
            return None

        # stop timers before any side effect of the end
        ctx.running = False
        if self.scheduler is not None:
            self.scheduler.cancel()

        self.pool.clear()

        record = ScoreRecord.from_stats(ctx.stats)
        new_best = False
        if outcome is Outcome.FINISHED:
            new_best = self.ledger.submit(ctx.settings.mode, record)

        result = RunResult(
            outcome=outcome,
            mode=ctx.settings.mode,
            record=record,
            stats=ctx.stats.copy(),
            new_best=new_best,
        )
        self.last_result = result
        log.info("Run ended: %s after %.1fs, %d pts, accuracy %.3f",
                 outcome.value, ctx.elapsed_sec(now_ms), record.points, record.accuracy)

        if self.sink is not None:
            self.sink.on_run_end(result)
        return result

    # ------------- per frame -------------
    def tick(self, now_ms: float) -> None:
        ctx = self.ctx
        if ctx is None or not ctx.running:
            return

        if ctx.elapsed_ms(now_ms) >= GAME_MS:
            self.end(Outcome.FINISHED, now_ms)
            return

        dt_sec = max(0.0, now_ms - ctx.last_tick_ms) / 1000.0
        ctx.last_tick_ms = now_ms

        outcome = self.scheduler.poll(now_ms)
        if outcome is None:
            outcome = update.step(ctx, now_ms, dt_sec)
        if outcome is not None:
            self.end(outcome, now_ms)
            return

        if self.sink is not None:
            self.sink.on_frame(self.snapshot(now_ms))

    # ------------- input -------------
    def press(self, x: float, y: float) -> Optional[HitResult]:
        """A press anywhere in the arena (arena coordinates)."""
        if not self.running:
            return None
        return resolve_press(self.ctx, x, y)

    def press_target(self, target_id: int, x: float, y: float) -> Optional[HitResult]:
        if not self.running:
            return None
        return resolve_hit(self.ctx, target_id, x, y)

    # ------------- views -------------
    @property
    def stats(self) -> RunStats:
        if self.ctx is None:
            return RunStats()
        return self.ctx.stats

    def snapshot(self, now_ms: float) -> FrameSnapshot:
        ctx = self.ctx
        views = []
        for t in self.pool.targets():
            if isinstance(t, TrackingTarget):
                views.append(TargetView(t.id, t.mode, t.x, t.y, t.size, t.shielded, t.weak))
            else:
                views.append(TargetView(t.id, t.mode, t.x, t.y, t.size))

        if ctx is None:
            return FrameSnapshot(0.0, 0.0, RunStats(), tuple(views))
        return FrameSnapshot(
            elapsed_ms=ctx.elapsed_ms(now_ms),
            remaining_ms=ctx.remaining_ms(now_ms),
            stats=ctx.stats.copy(),
            targets=tuple(views),
        )
