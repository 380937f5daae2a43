from __future__ import annotations
import math
from dataclasses import dataclass
from typing import ClassVar, Dict, Iterator, List, Optional, Tuple, Union

import numpy as np

from bullseye.const import (
    SPAWN_PADDING,
    TARGET_LIFETIME_MS,
    TIMED_SIZE_FLOOR,
    TIMED_SIZE_MAX,
    TIMED_SIZE_MIN,
    TRACKING_SHIELD_HP,
    TRACKING_SIZE_MAX,
    TRACKING_SIZE_MIN,
    TRACKING_SPEED_MAX,
    TRACKING_SPEED_MIN,
    TRACKING_TARGET_HP,
)
from bullseye.core.common import Arena, Mode, clamp


@dataclass
class TimedTarget:
    id: int
    x: float
    y: float
    size: float                    # current outer diameter (px)
    born_at_ms: float
    expires_at_ms: float
    start_size: float

    mode: ClassVar[Mode] = Mode.TIMED

    @property
    def radius(self) -> float:
        return self.size / 2.0

    def shrink_to(self, now_ms: float) -> None:
        age = now_ms - self.born_at_ms
        progress = clamp(age / TARGET_LIFETIME_MS, 0.0, 1.0)
        self.size = self.start_size + (TIMED_SIZE_FLOOR - self.start_size) * progress


@dataclass
class TrackingTarget:
    id: int
    x: float
    y: float
    size: float
    vx: float                      # px/sec
    vy: float
    hit_points: int = TRACKING_TARGET_HP
    shield_hp: int = 0

    mode: ClassVar[Mode] = Mode.TRACKING

    @property
    def radius(self) -> float:
        return self.size / 2.0

    @property
    def shielded(self) -> bool:
        return self.shield_hp > 0

    @property
    def weak(self) -> bool:
        # one more hit breaks the current health layer
        if self.shield_hp > 0:
            return self.shield_hp == 1
        return self.hit_points == 1


Target = Union[TimedTarget, TrackingTarget]


class TargetPool:
    """
    Owns every live target of a run, keyed by id in creation order.

    Ids come from a counter that is never reset, so a press that still refers to
    a target from an earlier run (or one that was already removed) can never
    address a different target.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self._targets: Dict[int, Target] = {}
        self._next_id = 1

    # ------------- helpers -------------
    def _take_id(self) -> int:
        target_id = self._next_id
        self._next_id += 1
        return target_id

    def _randint(self, lo: int, hi: int) -> int:
        # inclusive on both ends; collapses to `lo` when the arena is too small
        if hi <= lo:
            return lo
        return int(self.rng.integers(lo, hi, endpoint=True))

    def _random_position(self, arena: Arena, size: float) -> Tuple[int, int]:
        pad = size / 2.0 + SPAWN_PADDING
        x = self._randint(math.floor(pad), math.floor(arena.width - pad))
        y = self._randint(math.floor(pad), math.floor(arena.height - pad))
        return x, y

    # ------------- creation -------------
    def create_timed(self, arena: Arena, now_ms: float) -> TimedTarget:
        start_size = self._randint(TIMED_SIZE_MIN, TIMED_SIZE_MAX)
        x, y = self._random_position(arena, start_size)
        target = TimedTarget(
            id=self._take_id(),
            x=x,
            y=y,
            size=start_size,
            born_at_ms=now_ms,
            expires_at_ms=now_ms + TARGET_LIFETIME_MS,
            start_size=start_size,
        )
        self._targets[target.id] = target
        return target

    def create_tracking(self, arena: Arena, shields: bool) -> TrackingTarget:
        size = self._randint(TRACKING_SIZE_MIN, TRACKING_SIZE_MAX)
        x, y = self._random_position(arena, size)

        speed = self._randint(TRACKING_SPEED_MIN, TRACKING_SPEED_MAX)
        angle = float(self.rng.random()) * math.pi * 2
        target = TrackingTarget(
            id=self._take_id(),
            x=x,
            y=y,
            size=size,
            vx=math.cos(angle) * speed,
            vy=math.sin(angle) * speed,
            hit_points=TRACKING_TARGET_HP,
            shield_hp=TRACKING_SHIELD_HP if shields else 0,
        )
        self._targets[target.id] = target
        return target

    # ------------- removal / access -------------
    def remove(self, target_id: int) -> bool:
        return self._targets.pop(target_id, None) is not None

    def clear(self) -> None:
        self._targets.clear()

    def get(self, target_id: int) -> Optional[Target]:
        return self._targets.get(target_id)

    def targets(self) -> List[Target]:
        """Snapshot list, safe to iterate while removing."""
        return list(self._targets.values())

    def topmost_at(self, x: float, y: float) -> Optional[Target]:
        # newest targets are drawn last, so they are on top
        for target in reversed(self.targets()):
            if math.hypot(x - target.x, y - target.y) <= target.radius:
                return target
        return None

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[Target]:
        return iter(self.targets())

    def __contains__(self, target_id: object) -> bool:
        return target_id in self._targets
