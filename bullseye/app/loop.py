from __future__ import annotations
import logging
import pygame

from bullseye.api.config import EngineConfig
from bullseye.api.frame_data import FrameData
from bullseye.app.context import Context
from bullseye.app.loader import game_root_for, load_game_manifest, load_game_module
from bullseye.input.pointer_input import PointerInput
from bullseye.store.score_store import JsonScoreStore

log = logging.getLogger(__name__)


def run_game(game_id: str, cfg: EngineConfig):
    # load game first so a broken game folder fails before a window opens
    game_root = game_root_for(game_id)
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("title", game_id))
    screen = pygame.display.set_mode(cfg.screen_size)
    clock = pygame.time.Clock()

    input_layer = PointerInput(cfg)
    store = JsonScoreStore(cfg.state_dir)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not cfg.mirror else pygame.Surface(
        cfg.screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        store=store,
        screen_size=cfg.screen_size,
    )

    game.on_load(ctx, manifest)
    log.info("Loaded game %s from %s", game_id, game_root)

    running = True
    try:
        while running:
            dt = clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    continue
                input_layer.handle_pygame_event(event, cfg.screen_size)
                game.on_event(event)

            frame_data = FrameData(timestamp_ms=pygame.time.get_ticks(),
                                   presses=input_layer.drain())

            # ---- draw to render_surface ----
            render_surface.fill((12, 14, 18))
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)
            pygame.draw.rect(render_surface, (220, 220, 220),
                             (8, 8, cfg.screen_size[0] - 16, cfg.screen_size[1] - 16), 1)

            # ---- present to window ----
            if cfg.mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

            if game.quit_requested:
                running = False

    finally:
        game.on_unload()
        pygame.quit()
