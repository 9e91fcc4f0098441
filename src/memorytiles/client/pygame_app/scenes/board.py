from __future__ import annotations

from typing import Mapping, Sequence

import pygame  # type: ignore[import-not-found]

from memorytiles.controller import GameController, RoundWon
from memorytiles.engine.layout import format_elapsed

from ..app import GameContext, SceneTransition
from ..ui import ACCENT, MUTED, Button, draw_panel, draw_text

HEADER_H = 76
MARGIN = 16
GAP = 12
CARD_ASPECT = 4 / 3  # height / width


def card_rects(area: pygame.Rect, count: int, columns: int, gap: int = GAP) -> list[pygame.Rect]:
    """Lay `count` cards out row-major in `area`, `columns` per row, centred."""
    if count <= 0 or columns <= 0:
        return []
    rows = -(-count // columns)
    w_by_width = (area.width - gap * (columns - 1)) / columns
    w_by_height = ((area.height - gap * (rows - 1)) / rows) / CARD_ASPECT
    w = max(1, int(min(w_by_width, w_by_height)))
    h = int(w * CARD_ASPECT)
    grid_w = w * columns + gap * (columns - 1)
    grid_h = h * rows + gap * (rows - 1)
    x0 = area.x + (area.width - grid_w) // 2
    y0 = area.y + (area.height - grid_h) // 2
    return [
        pygame.Rect(x0 + (i % columns) * (w + gap), y0 + (i // columns) * (h + gap), w, h)
        for i in range(count)
    ]


def hit_test(rects: Sequence[pygame.Rect], pos: tuple[int, int]) -> int | None:
    for i, r in enumerate(rects):
        if r.collidepoint(pos):
            return i
    return None


class BoardScene:
    def __init__(self, ctx: GameContext) -> None:
        assert ctx.controller is not None and ctx.rules is not None
        self.ctx = ctx
        self.controller: GameController = ctx.controller
        self._won: RoundWon | None = None
        self._next: SceneTransition | None = None
        self._unsubscribe = self.controller.on_round_won(self._on_round_won)

        self.btn_new = Button(rect=pygame.Rect(0, 0, 120, 40), text="New game", on_click=self._on_new_game)
        self.btn_again = Button(rect=pygame.Rect(0, 0, 200, 48), text="Play again", on_click=self._on_new_game)
        self.count_buttons: list[tuple[int, Button]] = []
        for count in ctx.rules.allowed_counts:
            btn = Button(
                rect=pygame.Rect(0, 0, 48, 40),
                text=str(count),
                on_click=lambda c=count: self._on_set_count(c),
            )
            self.count_buttons.append((count, btn))
        self._layout_header()

    def _layout_header(self) -> None:
        x = MARGIN + 250
        y = MARGIN + 8
        for _, btn in self.count_buttons:
            btn.rect.topleft = (x, y)
            x += btn.rect.width + 6
        self.btn_new.rect.topleft = (x + 8, y)
        w, h = self.ctx.screen.get_size()
        self.btn_again.rect.center = (w // 2, h // 2 + 50)

    def _board_area(self) -> pygame.Rect:
        w, h = self.ctx.screen.get_size()
        return pygame.Rect(MARGIN, HEADER_H + MARGIN, w - 2 * MARGIN, h - HEADER_H - 2 * MARGIN)

    def _on_round_won(self, won: RoundWon) -> None:
        self._won = won

    def on_exit(self) -> None:
        self._unsubscribe()

    def _on_new_game(self) -> None:
        self._won = None
        self.controller.new_game()

    def _on_set_count(self, count: int) -> None:
        self._won = None
        self.controller.set_card_count(count)

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._won is not None:
            self.btn_again.handle_event(event)
            return

        self.btn_new.handle_event(event)
        for _, btn in self.count_buttons:
            btn.handle_event(event)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            columns = self.controller.columns
            rects = card_rects(self._board_area(), self.controller.card_count, columns)
            idx = hit_test(rects, event.pos)
            if idx is not None:
                self.controller.reveal_card(idx)

    def update(self, dt: float) -> SceneTransition | None:
        return self._next

    def _render_header(self, screen: pygame.Surface, snap: Mapping[str, object]) -> None:
        fonts = self.ctx.assets.fonts
        stats = snap["stats"]
        assert isinstance(stats, dict)
        draw_text(screen, fonts.big, "Memory Tiles", (MARGIN, MARGIN + 12))
        for count, btn in self.count_buttons:
            btn.selected = count == snap["card_count"]
            btn.draw(screen, fonts.ui)
        self.btn_new.draw(screen, fonts.ui)

        w = screen.get_width()
        hud = pygame.Rect(w - MARGIN - 330, MARGIN + 4, 330, 48)
        draw_panel(screen, hud)
        line = f"Time {stats['clock']}   Moves {stats['moves']}   Pairs {stats['matched_pairs']}/{stats['total_pairs']}"
        draw_text(screen, fonts.ui, line, (hud.x + 14, hud.y + 15), color=MUTED)

    def _render_cards(self, screen: pygame.Surface, snap: Mapping[str, object]) -> None:
        cards = snap["cards"]
        columns = snap["columns"]
        assert isinstance(cards, list) and isinstance(columns, int)
        symbols = self.ctx.symbols
        rects = card_rects(self._board_area(), len(cards), columns)
        for rect, card in zip(rects, cards):
            if card["matched"]:
                pygame.draw.rect(screen, (80, 98, 255), rect, border_radius=14)
                pygame.draw.rect(screen, ACCENT, rect, width=3, border_radius=14)
            elif card["face_up"]:
                pygame.draw.rect(screen, (66, 80, 255), rect, border_radius=14)
            else:
                pygame.draw.rect(screen, (42, 47, 108), rect, border_radius=14)
                pygame.draw.rect(screen, (58, 65, 141), rect, width=1, border_radius=14)
                img = self.ctx.assets.get_label("?", max(18, rect.width // 2), color=MUTED)
                screen.blit(img, img.get_rect(center=rect.center).topleft)
                continue
            glyph = str(card["symbol"])
            label = symbols.name_for(glyph) if symbols is not None else glyph
            img = self.ctx.assets.get_label(label, max(14, rect.width // 4))
            screen.blit(img, img.get_rect(center=rect.center).topleft)

    def _render_win(self, screen: pygame.Surface, won: RoundWon) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 115))
        screen.blit(overlay, (0, 0))
        w, h = screen.get_size()
        box = pygame.Rect(0, 0, 460, 200)
        box.center = (w // 2, h // 2)
        draw_panel(screen, box)
        fonts = self.ctx.assets.fonts
        draw_text(screen, fonts.big, "Well done!", (box.x + 24, box.y + 20))
        msg = f"All {won.card_count // 2} pairs in {format_elapsed(won.elapsed)} and {won.moves} moves."
        draw_text(screen, fonts.ui, msg, (box.x + 24, box.y + 70))
        self.btn_again.draw(screen, fonts.ui)

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((14, 16, 36))
        snap = self.controller.snapshot()
        self._render_header(screen, snap)
        self._render_cards(screen, snap)
        if self._won is not None:
            self._render_win(screen, self._won)
