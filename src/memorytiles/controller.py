from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable

from memorytiles.engine.actions import Action, ClearSelectionAction, RevealAction, TickAction
from memorytiles.engine.layout import columns_for
from memorytiles.engine.round import Event, RoundConfig, RoundState, StepResult, new_round, step
from memorytiles.engine.serialize import snapshot
from memorytiles.engine.types import InvalidConfiguration, SymbolPool
from memorytiles.services.scheduler import FrameScheduler, Handle, Scheduler
from memorytiles.services.telemetry import TelemetryService
from memorytiles.timer import SessionTimer


@dataclass(frozen=True)
class RoundWon:
    generation: int
    card_count: int
    moves: int
    elapsed: int


class GameController:
    """The one object a presentation layer talks to.

    Owns the current round plus its two deferred resources: the session
    timer and the pending mismatch clear. Both are cancelled whenever the
    round is replaced, and every deferred action carries the generation of
    the round that scheduled it.
    """

    def __init__(
        self,
        symbols: SymbolPool,
        *,
        config: RoundConfig | None = None,
        scheduler: Scheduler | None = None,
        seed: int | None = None,
        telemetry: TelemetryService | None = None,
    ) -> None:
        self.symbols = symbols
        self.config = config or RoundConfig()
        self.scheduler: Scheduler = scheduler if scheduler is not None else FrameScheduler()
        self.telemetry = telemetry

        self._rng = random.Random(seed)
        self._timer = SessionTimer(self.scheduler, interval=self.config.tick_interval)
        self._pending_clear: Handle | None = None
        self._listeners: list[Callable[[RoundWon], None]] = []
        self._generation = 0
        self._state: RoundState = self._build_round(self.config.default_count)

    # -- round lifecycle -------------------------------------------------

    def _build_round(self, total_count: int) -> RoundState:
        rng_state = self._rng.getstate()
        seed = self._rng.randrange(2**32)
        try:
            state = new_round(
                total_count,
                self.symbols.glyphs(),
                seed=seed,
                generation=self._generation + 1,
                config=self.config,
            )
        except InvalidConfiguration as e:
            # a rejected count must not shift the seeds of later rounds
            self._rng.setstate(rng_state)
            self._log("config_rejected", {"card_count": total_count, "reason": str(e)})
            raise
        self._generation = state.generation
        self._log(
            "round_started",
            {"generation": state.generation, "card_count": state.card_count, "seed": seed},
        )
        return state

    def new_game(self, total_count: int | None = None) -> dict[str, object]:
        count = self._state.card_count if total_count is None else total_count
        # Build first: a rejected count must leave the current round running.
        state = self._build_round(count)
        self._cancel_deferred()
        self._state = state
        return self.snapshot()

    def set_card_count(self, total_count: int) -> dict[str, object]:
        return self.new_game(total_count)

    def close(self) -> None:
        self._cancel_deferred()

    def _cancel_deferred(self) -> None:
        self._timer.stop()
        if self._pending_clear is not None:
            self._pending_clear.cancel()
            self._pending_clear = None

    # -- player input ----------------------------------------------------

    def reveal_card(self, index: int) -> StepResult:
        return self._dispatch(RevealAction(index=index))

    def on_round_won(self, listener: Callable[[RoundWon], None]) -> Callable[[], None]:
        """Register `listener`; the returned callable unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- engine plumbing -------------------------------------------------

    def _dispatch(self, action: Action) -> StepResult:
        result = step(self._state, action)
        for ev in result.events:
            self._react(ev)
        return result

    def _react(self, ev: Event) -> None:
        kind = ev.get("type")
        gen = self._state.generation
        if kind == "TIMER_STARTED":
            self._timer.start(lambda: self._dispatch(TickAction(generation=gen)))
        elif kind == "PAIR_MISMATCHED":
            self._pending_clear = self.scheduler.call_later(
                self.config.mismatch_delay,
                lambda: self._dispatch(ClearSelectionAction(generation=gen)),
            )
        elif kind == "SELECTION_CLEARED":
            self._pending_clear = None
        elif kind == "ROUND_WON":
            self._timer.stop()
            won = RoundWon(
                generation=gen,
                card_count=self._state.card_count,
                moves=self._state.stats.moves,
                elapsed=self._state.stats.elapsed,
            )
            self._log(
                "round_won",
                {
                    "generation": won.generation,
                    "card_count": won.card_count,
                    "moves": won.moves,
                    "elapsed": won.elapsed,
                },
            )
            for listener in list(self._listeners):
                listener(won)

    def _log(self, event_type: str, payload: dict[str, object]) -> None:
        if self.telemetry is not None:
            self.telemetry.log(event_type, payload)

    # -- read side -------------------------------------------------------

    def snapshot(self) -> dict[str, object]:
        return snapshot(self._state)

    @property
    def card_count(self) -> int:
        return self._state.card_count

    @property
    def columns(self) -> int:
        return columns_for(self._state.card_count)

    @property
    def generation(self) -> int:
        return self._generation
