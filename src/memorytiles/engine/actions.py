from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RevealAction:
    index: int


@dataclass(frozen=True)
class TickAction:
    generation: int


@dataclass(frozen=True)
class ClearSelectionAction:
    """Deferred end of the mismatch display window."""

    generation: int


Action = RevealAction | TickAction | ClearSelectionAction
