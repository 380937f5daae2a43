from __future__ import annotations
from typing import Optional

from bullseye.const import TRACKING_OVERWHELM_LIMIT
from bullseye.core.common import Mode, Outcome
from bullseye.core.context import RunContext
from bullseye.core.targets import Target


class SpawnScheduler:
    """
    Self re-arming spawn timer driven by frame timestamps.

    Every firing samples the elapsed run time again, so the delay keeps shrinking
    along the difficulty curve for the whole run. `cancel()` disarms it at once;
    nothing fires after that until `start()` is called again.
    """

    def __init__(self, ctx: RunContext):
        self.ctx = ctx
        self.next_spawn_ms: Optional[float] = None

    @property
    def armed(self) -> bool:
        return self.next_spawn_ms is not None

    def start(self, now_ms: float) -> None:
        self._schedule(now_ms)

    def cancel(self) -> None:
        self.next_spawn_ms = None

    def _schedule(self, now_ms: float) -> None:
        if not self.ctx.running:
            return
        delay = self.ctx.curve.delay_ms(self.ctx.elapsed_sec(now_ms))
        self.next_spawn_ms = now_ms + delay

    def _spawn(self, now_ms: float) -> Target:
        ctx = self.ctx
        if ctx.settings.mode is Mode.TIMED:
            return ctx.pool.create_timed(ctx.arena, now_ms)
        return ctx.pool.create_tracking(ctx.arena, ctx.settings.shields)

    def poll(self, now_ms: float) -> Optional[Outcome]:
        """Spawn if the deadline has passed. Returns OVERWHELMED when the spawn ends the run."""
        if self.next_spawn_ms is None or now_ms < self.next_spawn_ms:
            return None

        self.next_spawn_ms = None
        if not self.ctx.running:
            return None

        self._spawn(now_ms)

        # Overwhelm rule for tracking
        if self.ctx.settings.mode is Mode.TRACKING and len(self.ctx.pool) > TRACKING_OVERWHELM_LIMIT:
            return Outcome.OVERWHELMED

        self._schedule(now_ms)
        return None
