"""SideBar — numbered move list with a placeholder and a reset button."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from movelist.store.interfaces import FormattedMove
from movelist.ui.i18n import t
from movelist.ui.styles.theme import ROW_EVEN_BG, ROW_ODD_BG


def row_parity(index: int) -> str:
    """0-based row index → ``"even"`` / ``"odd"``."""
    return "even" if index % 2 == 0 else "odd"


class SideBar(QWidget):
    """Displays the formatted move list; rows alternate background by parity.

    Signals:
        reset_clicked(): The reset button was pressed.
    """

    reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._moves: list[FormattedMove] = []
        self._rows: list[QWidget] = []
        self._setup_ui()
        self.retranslate_ui()
        self._rebuild_list()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._header = QLabel()
        self._header.setFont(QFont("Helvetica Neue", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._placeholder = QLabel()
        self._placeholder.setObjectName("sidebar-text")
        self._placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._placeholder.setWordWrap(True)
        self._placeholder.setStyleSheet("color: #9f9f9f; font-size: 14px;")
        layout.addWidget(self._placeholder, 1)

        self._list = QListWidget()
        self._list.setObjectName("moves-container")
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFont(QFont("Consolas", 12))
        layout.addWidget(self._list, 1)

        self._btn_reset = QPushButton()
        self._btn_reset.setObjectName("reset-button")
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)

    def retranslate_ui(self) -> None:
        s = t()
        self._header.setText(s.moves_header)
        self._placeholder.setText(s.sidebar_empty)
        self._btn_reset.setText(s.btn_reset)

    # ── Public API ───────────────────────────────────────────────────────

    def set_moves(self, moves: list[FormattedMove]) -> None:
        """Rebuild the list from the store's formatted moves."""
        self._moves = list(moves)
        self._rebuild_list()

    def clear(self) -> None:
        self.set_moves([])

    # ── Internal ─────────────────────────────────────────────────────────

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._rows = []

        empty = not self._moves
        self._placeholder.setVisible(empty)
        self._list.setVisible(not empty)

        for index, move in enumerate(self._moves):
            row = self._create_row(move, row_parity(index))
            item = QListWidgetItem()
            item.setSizeHint(row.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row)
            self._rows.append(row)

        if self._moves:
            self._list.scrollToBottom()

    def _create_row(self, move: FormattedMove, parity: str) -> QWidget:
        row = QWidget()
        row.setObjectName("move-row")
        row.setProperty("rowParity", parity)
        row.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        bg = ROW_EVEN_BG if parity == "even" else ROW_ODD_BG
        row.setStyleSheet(f"QWidget#move-row {{ background: {bg}; }}")

        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(6, 2, 6, 2)
        row_layout.setSpacing(8)

        num_label = QLabel(move.move_number)
        num_label.setFixedWidth(32)
        num_label.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        row_layout.addWidget(num_label)

        first_label = QLabel(move.first_cell)
        row_layout.addWidget(first_label, 1)

        second_label = QLabel(move.second_cell)
        row_layout.addWidget(second_label, 1)
        return row
