from __future__ import annotations
from typing import Optional

from bullseye.const import EXPIRED_LIMIT
from bullseye.core.common import Mode, Outcome
from bullseye.core.context import RunContext
from bullseye.core.targets import TimedTarget, TrackingTarget


def update_timed(ctx: RunContext, now_ms: float) -> Optional[Outcome]:
    for t in ctx.pool.targets():
        if not isinstance(t, TimedTarget):
            continue
        t.shrink_to(now_ms)

        if now_ms >= t.expires_at_ms:
            ctx.pool.remove(t.id)
            ctx.stats.expired_misses += 1
            if ctx.stats.expired_misses >= EXPIRED_LIMIT:
                return Outcome.OVERWHELMED
    return None


def update_tracking(ctx: RunContext, dt_sec: float) -> None:
    w, h = ctx.arena.width, ctx.arena.height
    for t in ctx.pool.targets():
        if not isinstance(t, TrackingTarget):
            continue
        t.x += t.vx * dt_sec
        t.y += t.vy * dt_sec

        # Bounce off walls, padded by the radius. Axes are independent.
        r = t.radius
        if t.x < r:
            t.x = r
            t.vx = -t.vx
        elif t.x > w - r:
            t.x = w - r
            t.vx = -t.vx

        if t.y < r:
            t.y = r
            t.vy = -t.vy
        elif t.y > h - r:
            t.y = h - r
            t.vy = -t.vy


def step(ctx: RunContext, now_ms: float, dt_sec: float) -> Optional[Outcome]:
    """Advance every live target by one tick; returns an outcome if the run must end."""
    if ctx.settings.mode is Mode.TIMED:
        return update_timed(ctx, now_ms)
    update_tracking(ctx, max(0.0, dt_sec))
    return None
