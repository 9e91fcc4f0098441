from __future__ import annotations

import json

from memorytiles.engine.actions import ClearSelectionAction, RevealAction, TickAction
from memorytiles.engine.round import new_round, replay, step
from memorytiles.engine.serialize import snapshot
from memorytiles.paths import get_paths
from memorytiles.services.content import ContentService


def _load_glyphs():
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    return content.load_symbols().glyphs()


def test_same_seed_same_deck() -> None:
    glyphs = _load_glyphs()
    a = new_round(24, glyphs, seed=99)
    b = new_round(24, glyphs, seed=99)
    assert [(c.id, c.pair_id, c.symbol) for c in a.deck] == [(c.id, c.pair_id, c.symbol) for c in b.deck]


def test_engine_determinism_replay() -> None:
    glyphs = _load_glyphs()
    seed = 424242
    state1 = new_round(20, glyphs, seed=seed)

    # A scripted but messy session: walk the board left to right, clearing
    # each mismatch and ticking the clock between moves.
    gen = state1.generation
    for i in range(state1.card_count):
        step(state1, RevealAction(i))
        step(state1, TickAction(generation=gen))
        if state1.selection.locked:
            step(state1, ClearSelectionAction(generation=gen))

    snap1 = snapshot(state1)

    state2 = replay(20, glyphs, seed=seed, actions=list(state1.action_log))
    snap2 = snapshot(state2)

    assert snap1 == snap2
    # snapshots are plain JSON
    assert json.loads(json.dumps(snap1, ensure_ascii=False)) == snap1
