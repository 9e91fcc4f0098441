from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class InvalidConfiguration(ValueError):
    pass


class IndexOutOfRange(IndexError):
    pass


@dataclass
class Card:
    id: int
    pair_id: int
    symbol: str
    matched: bool = False


@dataclass(frozen=True)
class Symbol:
    glyph: str
    name: str


@dataclass(frozen=True)
class SymbolPool:
    """Immutable pool of display tokens a deck is drawn from."""

    symbols: tuple[Symbol, ...]

    def glyphs(self) -> Sequence[str]:
        return [s.glyph for s in self.symbols]

    def name_for(self, glyph: str) -> str:
        for s in self.symbols:
            if s.glyph == glyph:
                return s.name
        return glyph

    @property
    def max_cards(self) -> int:
        return 2 * len(self.symbols)
