from __future__ import annotations
import math
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class RunStats:
    points: int = 0
    hits_outer: int = 0
    hits_center: int = 0
    hits_shield: int = 0           # shield hits count as hits for accuracy
    click_misses: int = 0
    expired_misses: int = 0

    @property
    def hits_total(self) -> int:
        return self.hits_outer + self.hits_center + self.hits_shield

    @property
    def accuracy(self) -> float:
        attempts = self.hits_total + self.click_misses
        if attempts == 0:
            return 0.0
        return self.hits_total / attempts

    def copy(self) -> "RunStats":
        return RunStats(**asdict(self))


@dataclass(frozen=True)
class ScoreRecord:
    points: int
    accuracy: float
    hits_center: int
    timestamp: str

    @classmethod
    def from_stats(cls, stats: RunStats, when: Optional[datetime] = None) -> "ScoreRecord":
        when = when or datetime.now()
        return cls(
            points=stats.points,
            accuracy=stats.accuracy,
            hits_center=stats.hits_center,
            timestamp=when.isoformat(timespec="seconds"),
        )

    def beats(self, current: Optional["ScoreRecord"]) -> bool:
        """Points, then accuracy, then center hits. Ties keep the current best."""
        if current is None:
            return True
        if self.points != current.points:
            return self.points > current.points
        if self.accuracy != current.accuracy:
            return self.accuracy > current.accuracy
        return self.hits_center > current.hits_center

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Optional["ScoreRecord"]:
        """Parse stored data; anything non-finite, negative or out of range is None."""
        if not isinstance(data, dict):
            return None
        try:
            raw_points = float(data["points"])
            raw_center = float(data["hits_center"])
            accuracy = float(data["accuracy"])
            timestamp = str(data.get("timestamp", ""))
        except (KeyError, TypeError, ValueError, OverflowError):
            return None

        if not all(math.isfinite(v) for v in (raw_points, raw_center, accuracy)):
            return None
        if raw_points < 0 or raw_center < 0 or not 0.0 <= accuracy <= 1.0:
            return None
        if raw_points != int(raw_points) or raw_center != int(raw_center):
            return None
        return cls(points=int(raw_points), accuracy=accuracy,
                   hits_center=int(raw_center), timestamp=timestamp)
