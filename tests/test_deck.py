from __future__ import annotations

import random
from collections import Counter

import pytest

from memorytiles.engine.deck import build_deck, shuffle
from memorytiles.engine.types import InvalidConfiguration

GLYPHS = [chr(ord("A") + i) for i in range(20)]


@pytest.mark.parametrize("count", [2, 16, 20, 24, 28, 32, 40])
def test_every_pair_appears_exactly_twice(count: int) -> None:
    deck = build_deck(count, GLYPHS, random.Random(count))
    assert len(deck) == count
    assert Counter(c.pair_id for c in deck) == {p: 2 for p in range(count // 2)}
    assert sorted(c.id for c in deck) == list(range(count))
    assert not any(c.matched for c in deck)

    by_pair: dict[int, set[str]] = {}
    for c in deck:
        by_pair.setdefault(c.pair_id, set()).add(c.symbol)
    # one symbol per pair, no symbol shared between pairs
    assert all(len(s) == 1 for s in by_pair.values())
    assert len({next(iter(s)) for s in by_pair.values()}) == count // 2


@pytest.mark.parametrize("count", [0, -2, 3, 17, 42])
def test_bad_counts(count: int) -> None:
    with pytest.raises(InvalidConfiguration):
        build_deck(count, GLYPHS, random.Random(1))


def test_duplicate_symbols_rejected() -> None:
    with pytest.raises(InvalidConfiguration):
        build_deck(4, ["x", "x", "y"], random.Random(1))


def test_deck_is_pure_function_of_rng() -> None:
    a = build_deck(16, GLYPHS, random.Random(5))
    b = build_deck(16, GLYPHS, random.Random(5))
    assert a == b


def test_shuffle_returns_new_permutation() -> None:
    items = list(range(30))
    out = shuffle(items, random.Random(2))
    assert items == list(range(30))
    assert out is not items
    assert sorted(out) == items


def test_shuffle_is_roughly_uniform() -> None:
    rng = random.Random(0)
    counts = Counter(tuple(shuffle("abc", rng)) for _ in range(6000))
    assert len(counts) == 6
    assert all(800 < n < 1200 for n in counts.values())
