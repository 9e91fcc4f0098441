from __future__ import annotations


from .actions import Action, ClearSelectionAction, RevealAction, TickAction
from .layout import columns_for, format_elapsed, rows_for
from .round import RoundState, is_face_up
from .types import Card


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, RevealAction):
        return {"type": "reveal", "index": a.index}
    if isinstance(a, TickAction):
        return {"type": "tick", "generation": a.generation}
    if isinstance(a, ClearSelectionAction):
        return {"type": "clear_selection", "generation": a.generation}
    # should be unreachable
    return {"type": "unknown"}


def _card_to_dict(state: RoundState, index: int, c: Card) -> dict[str, object]:
    return {
        "id": c.id,
        "pair_id": c.pair_id,
        "symbol": c.symbol,
        "matched": c.matched,
        "face_up": is_face_up(state, index),
    }


def snapshot(state: RoundState) -> dict[str, object]:
    """Return a JSON-serializable copy of the round for renderers and tests."""
    count = state.card_count
    sel = state.selection
    stats = state.stats
    return {
        "generation": state.generation,
        "seed": state.seed,
        "card_count": count,
        "columns": columns_for(count),
        "rows": rows_for(count),
        "cards": [_card_to_dict(state, i, c) for i, c in enumerate(state.deck)],
        "selection": {"first": sel.first, "second": sel.second, "locked": sel.locked},
        "stats": {
            "moves": stats.moves,
            "matched_pairs": stats.matched_pairs,
            "total_pairs": state.total_pairs,
            "elapsed": stats.elapsed,
            "clock": format_elapsed(stats.elapsed),
            "running": stats.running,
            "won": stats.won,
        },
        "action_log": [action_to_dict(a) for a in state.action_log],
    }
