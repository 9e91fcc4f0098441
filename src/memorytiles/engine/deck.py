from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from .types import Card, InvalidConfiguration

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of `items`; the input is left as is."""
    out = list(items)
    (rng or random.Random()).shuffle(out)
    return out


def build_deck(total_count: int, symbols: Sequence[str], rng: random.Random | None = None) -> list[Card]:
    """Pick total_count/2 symbols and deal two cards for each, shuffled.

    The result depends only on `rng`: every pair_id in [0, total_count/2)
    appears exactly twice and card ids are 0..total_count-1.
    """
    if isinstance(total_count, bool) or not isinstance(total_count, int):
        raise InvalidConfiguration(f"Card count must be an int, got {total_count!r}.")
    if total_count <= 0 or total_count % 2:
        raise InvalidConfiguration(f"Card count must be a positive even number, got {total_count}.")
    if len(set(symbols)) != len(symbols):
        raise InvalidConfiguration("Symbols must be distinct.")
    if total_count > 2 * len(symbols):
        raise InvalidConfiguration(
            f"{total_count} cards need {total_count // 2} symbols, only {len(symbols)} available."
        )

    rng = rng or random.Random()
    chosen = shuffle(symbols, rng)[: total_count // 2]

    deck: list[Card] = []
    next_id = 0
    for pair_id, symbol in enumerate(chosen):
        for _ in range(2):
            deck.append(Card(id=next_id, pair_id=pair_id, symbol=symbol))
            next_id += 1
    return shuffle(deck, rng)
