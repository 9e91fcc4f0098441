"""Deterministic, headless rules engine for memorytiles.

IMPORTANT: This package must never import pygame or schedule anything;
deferred work arrives as TickAction / ClearSelectionAction.
"""

from .actions import ClearSelectionAction, RevealAction, TickAction
from .deck import build_deck, shuffle
from .layout import columns_for, format_elapsed, rows_for
from .round import RoundConfig, RoundState, StepResult, new_round, replay, step
from .types import Card, IndexOutOfRange, InvalidConfiguration, Symbol, SymbolPool

__all__ = [
    "Card",
    "ClearSelectionAction",
    "IndexOutOfRange",
    "InvalidConfiguration",
    "RevealAction",
    "RoundConfig",
    "RoundState",
    "StepResult",
    "Symbol",
    "SymbolPool",
    "TickAction",
    "build_deck",
    "columns_for",
    "format_elapsed",
    "new_round",
    "replay",
    "rows_for",
    "shuffle",
    "step",
]
