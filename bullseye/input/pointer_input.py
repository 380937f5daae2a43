from __future__ import annotations
import pygame
from typing import List, Tuple

from bullseye.api.config import EngineConfig
from bullseye.api.frame_data import Press

_BTN_NAME = {1: "left", 2: "middle", 3: "right"}


class PointerInput:
    """
    Collects pointer presses between frames:
    - Only the press itself counts (MOUSEBUTTONDOWN); holding or dragging does nothing.
    - Presses are reported in logical coords, so --mirror stays transparent to games.
    - Buttons not listed in `buttons` are ignored.
    """

    def __init__(self, cfg: EngineConfig, buttons: Tuple[str, ...] = ("left",)):
        self.mirror = cfg.mirror
        self.buttons = set(buttons)
        self._pending: List[Press] = []

    def _to_logical(self, x: int, y: int, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            btn_name = _BTN_NAME.get(event.button)
            if btn_name in self.buttons:
                lx, ly = self._to_logical(*event.pos, w, h)
                self._pending.append(Press(lx, ly, btn_name))

        # presses that straddle a focus loss are dropped
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._pending.clear()

    def drain(self) -> List[Press]:
        """Return this frame's presses in arrival order and forget them."""
        out, self._pending = self._pending, []
        return out
