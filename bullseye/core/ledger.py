from __future__ import annotations
import logging
from typing import Dict, Optional, Protocol

from bullseye.const import STORE_KEY_TIMED, STORE_KEY_TRACKING
from bullseye.core.common import Mode
from bullseye.core.stats import ScoreRecord

log = logging.getLogger(__name__)

MODE_KEYS: Dict[Mode, str] = {
    Mode.TIMED: STORE_KEY_TIMED,
    Mode.TRACKING: STORE_KEY_TRACKING,
}


class BestScoreStore(Protocol):
    def get(self, key: str) -> Optional[ScoreRecord]:
        """Stored record, or None when there is none or it cannot be read."""
        ...

    def put(self, key: str, record: ScoreRecord) -> bool:
        """Best effort write; False on failure."""
        ...


class ScoreLedger:
    def __init__(self, store: BestScoreStore):
        self.store = store

    def best(self, mode: Mode) -> Optional[ScoreRecord]:
        return self.store.get(MODE_KEYS[mode])

    def submit(self, mode: Mode, record: ScoreRecord) -> bool:
        """Persist `record` if it strictly beats the stored best. Returns True if it did."""
        current = self.best(mode)
        if not record.beats(current):
            return False

        if not self.store.put(MODE_KEYS[mode], record):
            log.warning("New %s best (%d pts) could not be saved", mode.value, record.points)
        else:
            log.info("New %s best: %d pts, %.1f%% accuracy, %d center hits",
                     mode.value, record.points, record.accuracy * 100, record.hits_center)
        return True
