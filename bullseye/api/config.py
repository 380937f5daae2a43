from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    mirror: bool = False
    seed: Optional[int] = None
    state_dir: Optional[Path] = None
    # launcher overrides merged over the manifest's "options"
    options: Dict[str, Any] = field(default_factory=dict)
