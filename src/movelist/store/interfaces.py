"""Abstract interface for the move history store.

The presentation layer depends on this ABC, never on the concrete
``MoveListStore``, so widgets can be driven by stubs in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

ChangeCallback = Callable[[], None]


# ── Value types ──────────────────────────────────────────────────────────────


@dataclass
class MovePair:
    """One logical move: a source click and, once entered, a destination click.

    An empty ``second_cell`` marks the pair as pending.
    """

    first_cell: str
    second_cell: str = ""

    @property
    def is_pending(self) -> bool:
        return not self.second_cell


@dataclass(frozen=True)
class FormattedMove:
    """Read-only display row for a move pair (also used for undo/redo records)."""

    move_number: str  # "1.", "2.", ...
    first_cell: str
    second_cell: str = ""


# ── Events ───────────────────────────────────────────────────────────────────


@dataclass
class MoveListEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_changed: list[ChangeCallback] = field(default_factory=list)


# ── Abstract interface ───────────────────────────────────────────────────────


class IMoveListStore(ABC):
    """Read and write surface of the move history engine."""

    @property
    @abstractmethod
    def events(self) -> MoveListEvents:
        """Change notifications; handlers run after every mutation."""

    # Read surface

    @property
    @abstractmethod
    def is_move_list_empty(self) -> bool: ...

    @property
    @abstractmethod
    def moves(self) -> list[FormattedMove]: ...

    @property
    @abstractmethod
    def highlighted_squares(self) -> list[str]: ...

    @property
    @abstractmethod
    def undo_stack(self) -> list[FormattedMove]: ...

    @property
    @abstractmethod
    def redo_stack(self) -> list[FormattedMove]: ...

    @property
    @abstractmethod
    def can_undo(self) -> bool: ...

    @property
    @abstractmethod
    def can_redo(self) -> bool: ...

    # Write surface

    @abstractmethod
    def add_square(self, cell: str) -> None:
        """Record a click on *cell*, completing or starting a move pair."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Walk back one click. Returns True if the history changed."""

    @abstractmethod
    def redo_move(self) -> bool:
        """Replay the most recently undone click. Returns True on success."""

    @abstractmethod
    def reset_move_list(self) -> None:
        """Drop the whole history, both stacks and all highlights."""

    @abstractmethod
    def update_highlighted_squares(self) -> None:
        """Re-derive the highlighted squares from the last move pair."""
