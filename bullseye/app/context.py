from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Tuple
from bullseye.api.config import EngineConfig
from bullseye.core.ledger import BestScoreStore


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    store: BestScoreStore
    screen_size: Tuple[int, int]
