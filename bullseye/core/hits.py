from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bullseye.const import CENTER_POINTS, CENTER_RADIUS_RATIO, OUTER_POINTS, SHIELD_POINTS
from bullseye.core.context import RunContext
from bullseye.core.targets import Target, TimedTarget, TrackingTarget


class HitZone(Enum):
    CENTER = "center"
    OUTER = "outer"


@dataclass(frozen=True)
class HitResult:
    target_id: int
    zone: HitZone
    points: int
    shield: bool = False           # absorbed by a shield
    destroyed: bool = False


def classify(target: Target, x: float, y: float) -> HitZone:
    dist = math.hypot(x - target.x, y - target.y)
    if dist <= target.radius * CENTER_RADIUS_RATIO:
        return HitZone.CENTER
    return HitZone.OUTER


def _hit_timed(ctx: RunContext, t: TimedTarget, zone: HitZone) -> HitResult:
    stats = ctx.stats
    if zone is HitZone.CENTER:
        stats.hits_center += 1
        gained = CENTER_POINTS
    else:
        stats.hits_outer += 1
        gained = OUTER_POINTS
    stats.points += gained

    # a single press always destroys a timed target
    ctx.pool.remove(t.id)
    return HitResult(t.id, zone, gained, destroyed=True)


def _hit_tracking(ctx: RunContext, t: TrackingTarget, zone: HitZone) -> HitResult:
    stats = ctx.stats
    if t.shield_hp > 0:
        # shield absorbs: any zone is worth the same and the target keeps its HP
        stats.hits_shield += 1
        stats.points += SHIELD_POINTS
        t.shield_hp -= 1
        return HitResult(t.id, zone, SHIELD_POINTS, shield=True)

    # no shield: points = damage
    damage = CENTER_POINTS if zone is HitZone.CENTER else OUTER_POINTS
    if zone is HitZone.CENTER:
        stats.hits_center += 1
    else:
        stats.hits_outer += 1
    stats.points += damage
    t.hit_points -= damage

    destroyed = t.hit_points <= 0
    if destroyed:
        ctx.pool.remove(t.id)
    return HitResult(t.id, zone, damage, destroyed=destroyed)


def resolve_hit(ctx: RunContext, target_id: int, x: float, y: float) -> Optional[HitResult]:
    """
    Resolve a press on a specific target.

    A target that is no longer in the pool (expired or destroyed earlier in the
    same frame) is ignored: nothing is counted, not even a miss.
    """
    t = ctx.pool.get(target_id)
    if t is None:
        return None

    zone = classify(t, x, y)
    if isinstance(t, TimedTarget):
        return _hit_timed(ctx, t, zone)
    return _hit_tracking(ctx, t, zone)


def register_miss(ctx: RunContext) -> None:
    ctx.stats.click_misses += 1


def resolve_press(ctx: RunContext, x: float, y: float) -> Optional[HitResult]:
    """Resolve a press anywhere in the arena: topmost target under it, or a miss."""
    t = ctx.pool.topmost_at(x, y)
    if t is None:
        register_miss(ctx)
        return None
    return resolve_hit(ctx, t.id, x, y)
