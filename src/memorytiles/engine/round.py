from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Iterable

from .actions import Action, ClearSelectionAction, RevealAction, TickAction
from .deck import build_deck
from .types import Card, IndexOutOfRange, InvalidConfiguration

Event = dict[str, object]


@dataclass(frozen=True)
class RoundConfig:
    allowed_counts: tuple[int, ...] = (16, 20, 24, 28, 32)
    default_count: int = 16
    mismatch_delay: float = 0.7  # seconds both mismatched cards stay visible
    tick_interval: float = 1.0


@dataclass
class Selection:
    first: int | None = None
    second: int | None = None
    locked: bool = False

    def clear(self) -> None:
        self.first = None
        self.second = None
        self.locked = False


@dataclass
class RoundStats:
    moves: int = 0
    matched_pairs: int = 0
    elapsed: int = 0
    running: bool = False
    won: bool = False


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass
class RoundState:
    config: RoundConfig
    seed: int
    generation: int
    deck: list[Card]
    selection: Selection = field(default_factory=Selection)
    stats: RoundStats = field(default_factory=RoundStats)
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    @property
    def card_count(self) -> int:
        return len(self.deck)

    @property
    def total_pairs(self) -> int:
        return len(self.deck) // 2


def _ignored(reason: str) -> StepResult:
    return StepResult(ok=False, events=[], error=reason)


def _emit(state: RoundState, events: list[Event], event: Event) -> None:
    state.event_log.append(event)
    events.append(event)


def _check_won(state: RoundState, events: list[Event]) -> None:
    if state.stats.won:
        return
    if state.card_count > 0 and state.stats.matched_pairs == state.total_pairs:
        state.stats.won = True
        state.stats.running = False
        _emit(
            state,
            events,
            {
                "type": "ROUND_WON",
                "generation": state.generation,
                "moves": state.stats.moves,
                "elapsed": state.stats.elapsed,
            },
        )


def _reveal(state: RoundState, action: RevealAction) -> StepResult:
    index = action.index
    sel = state.selection
    stats = state.stats

    if sel.locked:
        return _ignored("Selection locked.")
    if state.deck[index].matched:
        return _ignored("Card already matched.")

    events: list[Event] = []
    # The clock starts on the very first reveal of a round.
    if not stats.running and stats.moves == 0 and sel.first is None and stats.elapsed == 0:
        stats.running = True
        _emit(state, events, {"type": "TIMER_STARTED", "generation": state.generation})

    if sel.first == index:
        return _ignored("Card already revealed.")

    if sel.first is None:
        sel.first = index
        _emit(state, events, {"type": "CARD_REVEALED", "index": index})
        return StepResult(ok=True, events=events)

    sel.second = index
    stats.moves += 1
    _emit(state, events, {"type": "CARD_REVEALED", "index": index})

    a = state.deck[sel.first]
    b = state.deck[index]
    if a.pair_id == b.pair_id:
        a.matched = True
        b.matched = True
        _emit(
            state,
            events,
            {"type": "PAIR_MATCHED", "first": sel.first, "second": index, "pair_id": a.pair_id},
        )
        sel.clear()
        stats.matched_pairs += 1
    else:
        sel.locked = True
        _emit(
            state,
            events,
            {
                "type": "PAIR_MISMATCHED",
                "first": sel.first,
                "second": index,
                "generation": state.generation,
                "delay": state.config.mismatch_delay,
            },
        )

    _check_won(state, events)
    return StepResult(ok=True, events=events)


def _clear_selection(state: RoundState, action: ClearSelectionAction) -> StepResult:
    if action.generation != state.generation:
        return _ignored("Stale round.")
    if not state.selection.locked:
        return _ignored("Nothing to clear.")
    state.selection.clear()
    events: list[Event] = []
    _emit(state, events, {"type": "SELECTION_CLEARED"})
    return StepResult(ok=True, events=events)


def _tick(state: RoundState, action: TickAction) -> StepResult:
    if action.generation != state.generation:
        return _ignored("Stale round.")
    if not state.stats.running:
        return _ignored("Timer not running.")
    state.stats.elapsed += 1
    events: list[Event] = []
    _emit(state, events, {"type": "TICK", "elapsed": state.stats.elapsed})
    return StepResult(ok=True, events=events)


def step(state: RoundState, action: Action) -> StepResult:
    """Apply a single action to the round state.

    Mutates `state` in place. Disallowed reveals (locked, matched, the card
    already held as `first`) and stale deferred actions come back as
    `ok=False` results and leave the selection and stats untouched; only an
    out-of-range reveal raises.
    """
    if isinstance(action, RevealAction):
        if isinstance(action.index, bool) or not isinstance(action.index, int):
            raise IndexOutOfRange(f"Card index must be an int, got {action.index!r}.")
        if not 0 <= action.index < state.card_count:
            raise IndexOutOfRange(f"Card index {action.index} outside 0..{state.card_count - 1}.")
        state.action_log.append(action)
        return _reveal(state, action)

    state.action_log.append(action)
    if isinstance(action, ClearSelectionAction):
        return _clear_selection(state, action)
    if isinstance(action, TickAction):
        return _tick(state, action)
    return _ignored("Unknown action.")


def is_face_up(state: RoundState, index: int) -> bool:
    sel = state.selection
    return state.deck[index].matched or index == sel.first or index == sel.second


def new_round(
    total_count: int,
    symbols: Sequence[str],
    *,
    seed: int,
    generation: int = 1,
    config: RoundConfig | None = None,
) -> RoundState:
    cfg = config or RoundConfig()
    if total_count not in cfg.allowed_counts:
        allowed = ", ".join(str(c) for c in cfg.allowed_counts)
        raise InvalidConfiguration(f"Unsupported card count {total_count!r}; choose one of {allowed}.")

    rng = random.Random(seed)
    deck = build_deck(total_count, symbols, rng)
    return RoundState(config=cfg, seed=seed, generation=generation, deck=deck)


def replay(
    total_count: int,
    symbols: Sequence[str],
    seed: int,
    actions: Iterable[Action],
    config: RoundConfig | None = None,
    generation: int = 1,
) -> RoundState:
    state = new_round(total_count, symbols, seed=seed, generation=generation, config=config)
    for a in actions:
        step(state, a)
    return state
