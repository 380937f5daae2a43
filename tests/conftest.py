from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np
import pytest

from bullseye.core.common import Arena, Mode, RunSettings
from bullseye.core.context import RunContext
from bullseye.core.curve import resolve_curve
from bullseye.core.run import FrameSnapshot, RunResult
from bullseye.core.stats import ScoreRecord
from bullseye.core.targets import TargetPool


class MemoryStore:
    def __init__(self, records: Optional[Dict[str, ScoreRecord]] = None, fail_writes: bool = False) -> None:
        self.records: Dict[str, ScoreRecord] = dict(records or {})
        self.fail_writes = fail_writes
        self.puts: List[tuple] = []

    def get(self, key: str) -> Optional[ScoreRecord]:
        return self.records.get(key)

    def put(self, key: str, record: ScoreRecord) -> bool:
        self.puts.append((key, record))
        if self.fail_writes:
            return False
        self.records[key] = record
        return True


class RecordingSink:
    def __init__(self) -> None:
        self.frames: List[FrameSnapshot] = []
        self.results: List[RunResult] = []

    def on_frame(self, snapshot: FrameSnapshot) -> None:
        self.frames.append(snapshot)

    def on_run_end(self, result: RunResult) -> None:
        self.results.append(result)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_ctx():
    def _make(mode: Mode = Mode.TIMED, shields: bool = False, difficulty: int = 1,
              arena: Arena = Arena(800, 600), seed: int = 7) -> RunContext:
        return RunContext(
            settings=RunSettings(mode=mode, shields=shields, difficulty=difficulty),
            curve=resolve_curve(mode, difficulty),
            arena=arena,
            pool=TargetPool(np.random.default_rng(seed)),
            running=True,
        )
    return _make
