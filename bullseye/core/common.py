from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from bullseye.const import DIFFICULTY_MAX, DIFFICULTY_MIN


class Mode(Enum):
    TIMED = "timed"
    TRACKING = "tracking"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Outcome(Enum):
    FINISHED = "finished"
    OVERWHELMED = "overwhelmed"
    ABORTED = "aborted"


class RunState(Enum):
    IDLE = 1
    RUNNING = 2


def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@dataclass(frozen=True)
class Arena:
    width: float
    height: float


@dataclass(frozen=True)
class RunSettings:
    """Snapshot of the player's choices, taken once when a run starts."""
    mode: Mode = Mode.TIMED
    shields: bool = False
    difficulty: int = DIFFICULTY_MIN

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]] = None) -> "RunSettings":
        """
        Build settings from loosely typed options (manifest / CLI), e.g.

            {"mode": "tracking", "shields": True, "difficulty": 7}

        Unknown modes fall back to timed and difficulty is clamped into range,
        so the result is always valid to start a run with.
        """
        options = options or {}
        raw_mode = options.get("mode", Mode.TIMED)
        if isinstance(raw_mode, Mode):
            mode = raw_mode
        else:
            try:
                mode = Mode(str(raw_mode).lower())
            except ValueError:
                mode = Mode.TIMED

        try:
            difficulty = int(options.get("difficulty", DIFFICULTY_MIN))
        except (TypeError, ValueError):
            difficulty = DIFFICULTY_MIN
        difficulty = int(clamp(difficulty, DIFFICULTY_MIN, DIFFICULTY_MAX))

        return cls(mode=mode, shields=bool(options.get("shields", False)), difficulty=difficulty)
