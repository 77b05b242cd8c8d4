"""BoardWidget — 8x8 grid of clickable squares with move highlights."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from movelist.ui.styles.theme import BoardTheme

FILES = "abcdefgh"
RANKS = "12345678"


def cell_name(file: int, rank: int) -> str:
    """0-based file/rank → cell identifier, e.g. (0, 0) → ``"a1"``."""
    return f"{FILES[file]}{RANKS[rank]}"


class SquareButton(QPushButton):
    """A single board square. Knows its cell identifier and colour."""

    def __init__(self, cell: str, is_light: bool, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.cell = cell
        self.is_light = is_light
        self.setObjectName(f"square-{cell}")
        self.setProperty("highlighted", False)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(48, 48)

    @property
    def is_highlighted(self) -> bool:
        return bool(self.property("highlighted"))


class BoardWidget(QWidget):
    """Renders the board and reports square clicks.

    The widget holds no move state of its own: the owner feeds it the
    highlighted cells after every history change.

    Signals:
        square_clicked(str): Cell identifier of the clicked square.
    """

    square_clicked = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._flipped = False
        self._show_coordinates = True
        self._show_highlights = True
        self._highlighted: list[str] = []
        self._squares: dict[str, SquareButton] = {}

        self._grid = QGridLayout(self)
        self._grid.setContentsMargins(0, 0, 0, 0)
        self._grid.setSpacing(0)
        self.setMinimumSize(384, 384)

        self._build_squares()
        self._place_squares()

    # ── Public API ───────────────────────────────────────────────────────

    def square(self, cell: str) -> SquareButton:
        return self._squares[cell]

    def cells(self) -> list[str]:
        return list(self._squares)

    def highlighted_cells(self) -> list[str]:
        """Cells currently drawn as highlighted."""
        return [cell for cell, btn in self._squares.items() if btn.is_highlighted]

    def set_highlighted(self, cells: Iterable[str]) -> None:
        """Highlight exactly *cells*. Unknown identifiers are ignored."""
        self._highlighted = [cell for cell in cells if cell in self._squares]
        self._apply_highlights()

    def set_show_highlights(self, visible: bool) -> None:
        """Show or hide move highlights without forgetting them."""
        self._show_highlights = visible
        self._apply_highlights()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        for btn in self._squares.values():
            self._restyle(btn)

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        if self._flipped == flipped:
            return
        self._flipped = flipped
        self._place_squares()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide the cell name printed on each square."""
        self._show_coordinates = visible
        for btn in self._squares.values():
            btn.setText(btn.cell if visible else "")

    # ── Board construction ───────────────────────────────────────────────

    def _build_squares(self) -> None:
        for rank in range(8):
            for file in range(8):
                cell = cell_name(file, rank)
                is_light = (file + rank) % 2 == 1
                btn = SquareButton(cell, is_light, self)
                btn.setText(cell if self._show_coordinates else "")
                btn.clicked.connect(
                    lambda _checked=False, c=cell: self.square_clicked.emit(c)
                )
                self._restyle(btn)
                self._squares[cell] = btn

    def _place_squares(self) -> None:
        for btn in self._squares.values():
            self._grid.removeWidget(btn)
        for btn in self._squares.values():
            file = FILES.index(btn.cell[0])
            rank = RANKS.index(btn.cell[1])
            row, col = self._visual_coords(file, rank)
            self._grid.addWidget(btn, row, col)

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Board file/rank → grid row/column."""
        if self._flipped:
            return rank, 7 - file
        return 7 - rank, file

    # ── Highlights ───────────────────────────────────────────────────────

    def _apply_highlights(self) -> None:
        marked = set(self._highlighted) if self._show_highlights else set()
        for cell, btn in self._squares.items():
            on = cell in marked
            if btn.is_highlighted != on:
                btn.setProperty("highlighted", on)
                self._restyle(btn)

    def _restyle(self, btn: SquareButton) -> None:
        theme = self._theme
        if btn.is_highlighted:
            bg = theme.highlight
        else:
            bg = theme.light_square if btn.is_light else theme.dark_square
        fg = theme.coord_dark if btn.is_light else theme.coord_light
        btn.setStyleSheet(
            f"""
            QPushButton {{
                background: {bg.name()};
                color: {fg.name()};
                border: none;
                border-radius: 0px;
                padding: 2px 4px;
                text-align: left;
                font-size: 10px;
            }}
            """
        )
