from __future__ import annotations

from dataclasses import dataclass

import pygame  # type: ignore[import-not-found]


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font


class AssetManager:
    """Fonts plus a cache of rendered card labels."""

    def __init__(self) -> None:
        self._cache: dict[tuple[str, int, tuple[int, int, int]], pygame.Surface] = {}

        pygame.font.init()
        self.fonts = Fonts(
            ui=pygame.font.SysFont(None, 24),
            small=pygame.font.SysFont(None, 18),
            big=pygame.font.SysFont(None, 34),
        )
        self._label_fonts: dict[int, pygame.font.Font] = {}

    def _label_font(self, size: int) -> pygame.font.Font:
        font = self._label_fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(None, size)
            self._label_fonts[size] = font
        return font

    def get_label(self, text: str, size: int, color: tuple[int, int, int] = (245, 246, 255)) -> pygame.Surface:
        key = (text, size, color)
        if key in self._cache:
            return self._cache[key]
        img = self._label_font(size).render(text, True, color)
        self._cache[key] = img
        return img
