from __future__ import annotations
from datetime import datetime
from typing import Dict, List, Optional

import numpy as np
import pygame

from bullseye.api import Game, FrameData
from bullseye.const import (
    DIFFICULTY_MAX,
    DIFFICULTY_MIN,
    EXPIRED_LIMIT,
    GAME_MS,
    TRACKING_OVERWHELM_LIMIT,
)
from bullseye.core import (
    Arena,
    FrameSnapshot,
    Mode,
    Outcome,
    RunController,
    RunResult,
    RunSettings,
    ScoreLedger,
    ScoreRecord,
)
from bullseye.core.curve import DifficultyCurve, resolve_curves
from bullseye.render.shapes import draw_bullseye, draw_text, draw_text_centered


# UX
HUD_HEIGHT = 96                    # default, manifest option hud_height overrides
ARENA_MARGIN = 16
HUD_COLOR = (230, 230, 230)
HUD_DIM = (160, 160, 160)
ARENA_BORDER = (70, 75, 85)
OVERLAY_BG = (20, 22, 28)
OVERLAY_BORDER = (200, 200, 200)
GAME_OVER_COLOR = (255, 110, 90)
BEST_COLOR = (255, 220, 90)

RULES = {
    Mode.TIMED: [
        "Targets shrink and expire after 3 seconds.",
        f"If {EXPIRED_LIMIT} targets expire, it's game over (no score saved).",
        "Scoring: Outer = 1, Center = 2.",
    ],
    Mode.TRACKING: [
        "Targets move and have HP.",
        "Points = damage.",
        "Optional shields: shield hits are always 1 point.",
        f"Lose if more than {TRACKING_OVERWHELM_LIMIT} targets are on screen.",
    ],
}


def format_percent(p: float) -> str:
    return f"{p * 100:.1f}%"


def format_date(iso: str) -> str:
    try:
        return datetime.fromisoformat(iso).strftime("%b %d")
    except ValueError:
        return ""


def format_record(record: Optional[ScoreRecord]) -> str:
    if record is None:
        return "-"
    return (f"{record.points} pts | {format_percent(record.accuracy)} | "
            f"C:{record.hits_center} | {format_date(record.timestamp)}")


def describe_curve(curve: DifficultyCurve) -> str:
    return (f"start {curve.start_delay_ms}ms | min {curve.min_delay_ms}ms | "
            f"ramp {curve.ramp_per_sec:.1f}ms/s")


class Bullseye(Game):
    def on_load(self, ctx, manifest):
        self.ctx = ctx
        self.manifest = manifest

        options = dict(manifest.get("options", {}))
        options.update(ctx.cfg.options)
        self.settings = RunSettings.from_options(options)

        w, h = ctx.screen_size
        hud_h = int(options.get("hud_height", HUD_HEIGHT))
        self.arena_rect = pygame.Rect(ARENA_MARGIN, hud_h, w - 2 * ARENA_MARGIN, h - hud_h - ARENA_MARGIN)

        self.ledger = ScoreLedger(ctx.store)
        self.controller = RunController(
            Arena(self.arena_rect.width, self.arena_rect.height),
            self.ledger,
            sink=self,
            rng=np.random.default_rng(ctx.cfg.seed),
        )
        self.snapshot: Optional[FrameSnapshot] = None
        self.result: Optional[RunResult] = None
        self.best: Dict[Mode, Optional[ScoreRecord]] = {}
        self._refresh_best()

    # ------------- helpers -------------
    def _refresh_best(self):
        self.best = {mode: self.ledger.best(mode) for mode in Mode}

    def _set_settings(self, **changes):
        opts = {"mode": self.settings.mode, "shields": self.settings.shields,
                "difficulty": self.settings.difficulty}
        opts.update(changes)
        self.settings = RunSettings.from_options(opts)

    def _start(self, restart: bool = False):
        now = pygame.time.get_ticks()
        self.result = None
        self.snapshot = None
        if restart:
            self.controller.restart(self.settings, now)
        else:
            self.controller.start(self.settings, now)

    # ------------- presentation sink -------------
    def on_frame(self, snapshot: FrameSnapshot) -> None:
        self.snapshot = snapshot

    def on_run_end(self, result: RunResult) -> None:
        self.result = result
        self.snapshot = None
        if result.new_best:
            self._refresh_best()

    # ------------- loop hooks -------------
    def on_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_ESCAPE:
            self.quit_requested = True
        elif event.key == pygame.K_r:
            self._start(restart=True)
        elif self.controller.running:
            return

        # settings only change between runs
        elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
            self._start()
        elif event.key in (pygame.K_1, pygame.K_t):
            self._set_settings(mode=Mode.TIMED)
        elif event.key in (pygame.K_2, pygame.K_k):
            self._set_settings(mode=Mode.TRACKING)
        elif event.key == pygame.K_s:
            self._set_settings(shields=not self.settings.shields)
        elif event.key in (pygame.K_UP, pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self._set_settings(difficulty=min(DIFFICULTY_MAX, self.settings.difficulty + 1))
        elif event.key in (pygame.K_DOWN, pygame.K_MINUS, pygame.K_KP_MINUS):
            self._set_settings(difficulty=max(DIFFICULTY_MIN, self.settings.difficulty - 1))

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        now = frame.timestamp_ms

        # tick first: a target that expires this frame can no longer be hit
        self.controller.tick(now)

        if not self.controller.running or not frame.presses:
            return
        for p in frame.presses:
            if not self.arena_rect.collidepoint(p.x, p.y):
                continue
            self.controller.press(p.x - self.arena_rect.x, p.y - self.arena_rect.y)
        if self.controller.running:
            self.snapshot = self.controller.snapshot(now)

    def on_draw(self, surface: pygame.Surface) -> None:
        self._draw_hud(surface)
        pygame.draw.rect(surface, ARENA_BORDER, self.arena_rect, width=1)

        if self.controller.running and self.snapshot is not None:
            ox, oy = self.arena_rect.topleft
            for t in self.snapshot.targets:
                draw_bullseye(surface, (ox + t.x, oy + t.y), t.size, t.shielded, t.weak)
            return

        if not self.controller.running:
            self._draw_overlay(surface)

    # ------------- drawing -------------
    def _draw_hud(self, surface: pygame.Surface) -> None:
        snap = self.snapshot
        stats = snap.stats if snap is not None else (self.result.stats if self.result else None)
        remaining = snap.remaining_ms if snap is not None else (0 if self.result else GAME_MS)
        mode = self.controller.ctx.settings.mode if self.controller.running else self.settings.mode

        line1 = f"{mode.label} | Time {max(0.0, remaining / 1000):.1f}s"
        line2 = ""
        if stats is not None:
            line1 += f" | Points {stats.points} | Accuracy {format_percent(stats.accuracy)}"
            if mode is Mode.TIMED:
                line1 += f" | Expired {stats.expired_misses}/{EXPIRED_LIMIT}"
            line2 = (f"Outer {stats.hits_outer}   Center {stats.hits_center}   "
                     f"Shield {stats.hits_shield}   Misses {stats.click_misses}")
        draw_text(surface, line1, (24, 18), HUD_COLOR, size=28)
        if line2:
            draw_text(surface, line2, (24, 48), HUD_DIM, size=22)

        x = self.ctx.screen_size[0] - 420
        draw_text(surface, f"Best Timed: {format_record(self.best.get(Mode.TIMED))}", (x, 18), BEST_COLOR, size=20)
        draw_text(surface, f"Best Tracking: {format_record(self.best.get(Mode.TRACKING))}", (x, 40), BEST_COLOR, size=20)

    def _overlay_lines(self) -> List[str]:
        result = self.result
        if result is None:
            return RULES[self.settings.mode]

        if result.outcome is Outcome.FINISHED:
            lines = [
                f"Points: {result.record.points}",
                f"Accuracy: {format_percent(result.record.accuracy)}",
                f"Center hits: {result.record.hits_center}",
            ]
            if result.mode is Mode.TRACKING:
                lines.append(f"Shield hits: {result.stats.hits_shield}")
            else:
                lines.append(f"Expired targets: {result.stats.expired_misses}")
            lines.append("New high score!" if result.new_best else "Score saved only if it beat your high score.")
            return lines

        if result.outcome is Outcome.OVERWHELMED:
            if result.mode is Mode.TIMED:
                reason = f"You let {EXPIRED_LIMIT} targets expire."
            else:
                reason = f"You exceeded {TRACKING_OVERWHELM_LIMIT} targets on screen."
            return [reason, "Scores are not recorded unless you finish all 60 seconds."]

        return ["Run ended early."]

    def _overlay_title(self) -> str:
        result = self.result
        if result is None:
            return f"Bullseye - {self.settings.mode.label} Mode"
        label = result.mode.label
        if result.outcome is Outcome.FINISHED:
            return f"{label} - Time!"
        if result.outcome is Outcome.OVERWHELMED:
            return f"{label} - GAME OVER"
        return f"{label} - Run Ended"

    def _draw_overlay(self, surface: pygame.Surface) -> None:
        lines = self._overlay_lines()
        card = pygame.Rect(0, 0, 640, 190 + 30 * len(lines))
        card.center = self.arena_rect.center
        pygame.draw.rect(surface, OVERLAY_BG, card)
        pygame.draw.rect(surface, OVERLAY_BORDER, card, width=2)

        cx = card.centerx
        y = card.top + 36
        over = self.result is not None and self.result.outcome is Outcome.OVERWHELMED
        draw_text_centered(surface, self._overlay_title(), (cx, y),
                           GAME_OVER_COLOR if over else HUD_COLOR, size=44)
        y += 48
        for line in lines:
            draw_text_centered(surface, line, (cx, y), HUD_COLOR, size=26)
            y += 30

        s = self.settings
        shields = "on" if s.shields else "off"
        curve = resolve_curves(s.difficulty)[s.mode]
        y += 12
        draw_text_centered(surface, f"[1/2] {s.mode.label}   [S] Shields {shields}   "
                                    f"[Up/Down] Difficulty {s.difficulty}", (cx, y), HUD_DIM, size=22)
        y += 24
        draw_text_centered(surface, describe_curve(curve), (cx, y), HUD_DIM, size=20)
        y += 32
        draw_text_centered(surface, "Press Space to play, R to restart, Esc to quit", (cx, y), HUD_COLOR, size=24)

    def on_unload(self) -> None:
        if self.controller.running:
            self.controller.abort(pygame.time.get_ticks())


def get_game():
    return Bullseye()
