import pygame
from typing import Tuple

from bullseye.const import CENTER_RADIUS_RATIO

BULLSEYE_OUTER = (235, 235, 235)
BULLSEYE_RING = (220, 60, 60)
BULLSEYE_CENTER = (220, 60, 60)
SHIELD_COLOR = (90, 170, 255)
WEAK_COLOR = (255, 200, 0)


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    img = font.render(text, True, color)
    surface.blit(img, img.get_rect(center=center))


def draw_bullseye(surface: pygame.Surface, center: Tuple[float, float], size: float,
                  shielded: bool = False, weak: bool = False):
    """Concentric target; the inner disc is exactly the center-hit zone."""
    cx, cy = int(center[0]), int(center[1])
    r = max(1, int(size / 2))
    pygame.draw.circle(surface, BULLSEYE_OUTER, (cx, cy), r)
    pygame.draw.circle(surface, BULLSEYE_RING, (cx, cy), max(1, int(r * 0.75)), width=max(1, r // 8))
    pygame.draw.circle(surface, BULLSEYE_CENTER, (cx, cy), max(1, int(r * CENTER_RADIUS_RATIO)))

    if shielded:
        pygame.draw.circle(surface, SHIELD_COLOR, (cx, cy), r + 5, width=3)
    if weak:
        pygame.draw.circle(surface, WEAK_COLOR, (cx, cy), r + 1, width=2)
