"""ControlPanel — move history action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from movelist.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for history actions: undo, redo, flip."""

    undo_clicked = pyqtSignal()
    redo_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()
        self.set_history_state(can_undo=False, can_redo=False)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Helvetica Neue", 10)

        row1 = QHBoxLayout()
        self._btn_undo = QPushButton()
        self._btn_undo.setFont(btn_font)
        self._btn_undo.setMinimumHeight(36)
        self._btn_undo.clicked.connect(self.undo_clicked)
        row1.addWidget(self._btn_undo)

        self._btn_redo = QPushButton()
        self._btn_redo.setFont(btn_font)
        self._btn_redo.setMinimumHeight(36)
        self._btn_redo.clicked.connect(self.redo_clicked)
        row1.addWidget(self._btn_redo)
        layout.addLayout(row1)

        self._btn_flip = QPushButton()
        self._btn_flip.setFont(btn_font)
        self._btn_flip.setMinimumHeight(36)
        self._btn_flip.clicked.connect(self.flip_clicked)
        layout.addWidget(self._btn_flip)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_undo.setText(s.btn_undo)
        self._btn_redo.setText(s.btn_redo)
        self._btn_flip.setText(s.btn_flip)

    def set_history_state(self, *, can_undo: bool, can_redo: bool) -> None:
        """Enable/disable undo and redo based on the store."""
        self._btn_undo.setEnabled(can_undo)
        self._btn_redo.setEnabled(can_redo)
