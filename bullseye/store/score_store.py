from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Optional

from bullseye.core.stats import ScoreRecord

log = logging.getLogger(__name__)

STATE_DIR_ENV = "BULLSEYE_STATE_DIR"


def default_state_dir() -> Path:
    env = os.environ.get(STATE_DIR_ENV)
    if env:
        return Path(env)
    return Path.home() / ".bullseye"


class JsonScoreStore:
    """
    One JSON file per key under <state dir>/scores.

    Reads of missing, unreadable or corrupt files return None; failed writes
    return False. Neither raises, a broken store never stops a run.
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root if root is not None else default_state_dir()) / "scores"

    def _path_for(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get(self, key: str) -> Optional[ScoreRecord]:
        path = self._path_for(key)
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return None
        except (OSError, ValueError, RecursionError) as exc:
            log.warning("Ignoring unreadable score file %s: %s", path, exc)
            return None

        record = ScoreRecord.from_dict(data)
        if record is None:
            log.warning("Ignoring malformed score file %s", path)
        return record

    def put(self, key: str, record: ScoreRecord) -> bool:
        path = self._path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".json.tmp")
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump(record.to_dict(), fh, indent=2)
            tmp.replace(path)
        except OSError as exc:
            log.warning("Could not write score file %s: %s", path, exc)
            return False
        return True
