from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from bullseye.app.context import Context

from .frame_data import FrameData


class Game:
    """
    Base interface games implement. The engine loop calls, once per frame:
    on_event() for every pygame event, then on_update(), then on_draw().
    Setting `quit_requested` ends the loop after the current frame.
    """

    quit_requested: bool = False

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Called once after the game module loads."""
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Optional: keyboard and window events. Pointer presses arrive in on_update."""
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """Called every frame; dt_ms is milliseconds elapsed, frame carries this frame's presses."""
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        """Draw your game to the provided surface."""
        ...

    def on_unload(self) -> None:
        """Optional: cleanup when the game exits."""
        ...
