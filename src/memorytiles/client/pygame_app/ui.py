from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame  # type: ignore[import-not-found]


Color = tuple[int, int, int]

PANEL = (23, 26, 54)
BORDER = (42, 46, 99)
TEXT = (245, 246, 255)
MUTED = (184, 186, 240)
ACCENT = (124, 137, 255)


def draw_text(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: tuple[int, int],
    color: Color = TEXT,
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def draw_panel(screen: pygame.Surface, rect: pygame.Rect, radius: int = 14) -> None:
    pygame.draw.rect(screen, PANEL, rect, border_radius=radius)
    pygame.draw.rect(screen, BORDER, rect, width=1, border_radius=radius)


@dataclass
class Button:
    rect: pygame.Rect
    text: str
    on_click: Callable[[], None]
    enabled: bool = True
    selected: bool = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.enabled:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.on_click()
                return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        if not self.enabled:
            bg: Color = (28, 30, 60)
        elif self.selected:
            bg = (66, 80, 255)
        else:
            bg = (34, 38, 86)
        pygame.draw.rect(screen, bg, self.rect, border_radius=10)
        pygame.draw.rect(screen, (54, 60, 122), self.rect, width=1, border_radius=10)
        img = font.render(self.text, True, TEXT)
        r = img.get_rect(center=self.rect.center)
        screen.blit(img, r.topleft)
