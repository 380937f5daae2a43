from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Press:
    x: float
    y: float
    button: str = "left"


@dataclass
class FrameData:
    timestamp_ms: float
    # pointer presses since the previous frame, in logical (unmirrored) screen coords
    presses: List[Press] = field(default_factory=list)
