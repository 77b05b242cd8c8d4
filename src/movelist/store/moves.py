"""MoveListStore — move history with paired undo/redo stacks.

Each board click lands in the history through ``add_square``: the first
click of a move opens a pending pair, the second completes it.  Undo walks
back a single click, redo replays it.  The formatted move list and the
highlighted squares are derived from the history, never stored twice.
"""

from __future__ import annotations

import logging

from movelist.store.interfaces import (
    FormattedMove,
    IMoveListStore,
    MoveListEvents,
    MovePair,
)

_LOGGER = logging.getLogger(__name__)


class MoveListStore(IMoveListStore):
    """Owns the move history, the undo/redo stacks and the highlight set.

    Thread-safety: every method must be called from the thread that owns
    the UI; each call runs to completion before subscribers are notified.
    """

    __slots__ = (
        "_move_history",
        "_undo_stack",
        "_redo_stack",
        "_highlighted_squares",
        "_version",
        "_moves_cache",
        "_events",
    )

    def __init__(self) -> None:
        self._move_history: list[MovePair] = []
        self._undo_stack: list[FormattedMove] = []
        self._redo_stack: list[FormattedMove] = []
        self._highlighted_squares: list[str] = []
        self._version = 0
        self._moves_cache: tuple[int, tuple[FormattedMove, ...]] | None = None
        self._events = MoveListEvents()

    @property
    def events(self) -> MoveListEvents:
        return self._events

    # ── Derived views ────────────────────────────────────────────────────

    @property
    def is_move_list_empty(self) -> bool:
        return len(self._move_history) == 0

    @property
    def moves(self) -> list[FormattedMove]:
        cache = self._moves_cache
        if cache is None or cache[0] != self._version:
            formatted = tuple(
                FormattedMove(
                    move_number=f"{index + 1}.",
                    first_cell=pair.first_cell,
                    second_cell=pair.second_cell or "",
                )
                for index, pair in enumerate(self._move_history)
            )
            cache = (self._version, formatted)
            self._moves_cache = cache
        return list(cache[1])

    @property
    def highlighted_squares(self) -> list[str]:
        return list(self._highlighted_squares)

    @property
    def undo_stack(self) -> list[FormattedMove]:
        return list(self._undo_stack)

    @property
    def redo_stack(self) -> list[FormattedMove]:
        return list(self._redo_stack)

    @property
    def can_undo(self) -> bool:
        return bool(self._move_history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    # ── Mutations ────────────────────────────────────────────────────────

    def add_square(self, cell: str) -> None:
        # A new forward click discards the redo timeline.
        if self._redo_stack:
            self._redo_stack = []

        last = self._last_pair()
        if last is not None and last.is_pending:
            last.second_cell = cell
        else:
            self._move_history.append(MovePair(first_cell=cell))
        self._touch()
        _LOGGER.debug(
            "add_square(%r): %d pair(s) in history", cell, len(self._move_history)
        )

        self.update_highlighted_squares()

    def undo_move(self) -> bool:
        last = self._last_pair()
        if last is None:
            return False

        if not last.is_pending:
            self._redo_stack.append(
                FormattedMove(
                    move_number=f"{len(self._move_history)}.",
                    first_cell=last.first_cell,
                    second_cell=last.second_cell,
                )
            )
            last.second_cell = ""
        else:
            removed = self._move_history.pop()
            record = FormattedMove(
                move_number=f"{len(self._move_history) + 1}.",
                first_cell=removed.first_cell,
            )
            self._undo_stack.append(record)
            self._redo_stack.append(record)

        # Highlights are left as they were; only live clicks re-derive them.
        self._touch()
        _LOGGER.debug(
            "undo_move: %d pair(s), %d redo record(s)",
            len(self._move_history),
            len(self._redo_stack),
        )
        self._emit_changed()
        return True

    def redo_move(self) -> bool:
        if not self._redo_stack:
            return False

        record = self._redo_stack.pop()
        last = self._last_pair()
        if last is not None and last.is_pending:
            last.second_cell = record.second_cell
        else:
            self._move_history.append(
                MovePair(first_cell=record.first_cell, second_cell=record.second_cell)
            )

        self._undo_stack.append(
            FormattedMove(
                move_number=f"{len(self._move_history)}.",
                first_cell=record.first_cell,
                second_cell=record.second_cell,
            )
        )
        self._touch()
        _LOGGER.debug(
            "redo_move: %d pair(s), %d redo record(s) left",
            len(self._move_history),
            len(self._redo_stack),
        )
        self._emit_changed()
        return True

    def reset_move_list(self) -> None:
        self._move_history = []
        self._undo_stack = []
        self._redo_stack = []
        self._highlighted_squares = []
        self._touch()
        _LOGGER.debug("reset_move_list")
        self._emit_changed()

    def update_highlighted_squares(self) -> None:
        self._highlighted_squares = []
        moves = self.moves
        if moves:
            last = moves[-1]
            if last.first_cell and not last.second_cell:
                self._highlighted_squares.append(last.first_cell)
            elif last.first_cell and last.second_cell:
                self._highlighted_squares.append(last.first_cell)
                self._highlighted_squares.append(last.second_cell)
        self._emit_changed()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _last_pair(self) -> MovePair | None:
        if not self._move_history:
            return None
        return self._move_history[-1]

    def _touch(self) -> None:
        """Invalidate the memoized ``moves`` view."""
        self._version += 1

    def _emit_changed(self) -> None:
        for cb in self._events.on_changed:
            cb()
