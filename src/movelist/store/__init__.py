"""Move history layer — click pairs, undo/redo stacks, highlight derivation.

Quick start::

    from movelist.store import MoveListStore

    store = MoveListStore()
    store.add_square("e2")
    store.add_square("e4")
    store.moves               # [FormattedMove(move_number="1.", ...)]
    store.highlighted_squares  # ["e2", "e4"]
"""

from movelist.store.interfaces import (
    FormattedMove,
    IMoveListStore,
    MoveListEvents,
    MovePair,
)
from movelist.store.moves import MoveListStore

__all__ = [
    # Interfaces
    "IMoveListStore",
    # Value types
    "FormattedMove",
    "MovePair",
    # Concrete
    "MoveListEvents",
    "MoveListStore",
]
