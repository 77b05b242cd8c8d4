"""SettingsDialog — one form for the language and board display options."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QPaintEvent
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from movelist.ui.i18n import LANGUAGES, t
from movelist.ui.styles.theme import BOARD_THEMES, board_theme


@dataclass
class AppSettings:
    """Options the user can change at runtime. Held in memory only."""

    language: str = "English"
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_highlights: bool = True


class _BoardThemePreviewWidget(QWidget):
    """Light, dark and highlighted square side by side."""

    def __init__(self, theme_name: str) -> None:
        super().__init__()
        self._theme_name = theme_name
        self.setFixedSize(100, 36)

    def set_theme_name(self, theme_name: str) -> None:
        if self._theme_name == theme_name:
            return
        self._theme_name = theme_name
        self.update()

    def paintEvent(self, event: QPaintEvent | None) -> None:
        del event
        square = 32
        theme = board_theme(self._theme_name)
        painter = QPainter(self)
        painter.fillRect(0, 0, square * 3 + 4, square + 4, Qt.GlobalColor.black)
        for i, color in enumerate(
            (theme.light_square, theme.dark_square, theme.highlight)
        ):
            painter.fillRect(2 + square * i, 2, square, square, color)
        painter.end()


class SettingsDialog(QDialog):
    """Modal form editing an ``AppSettings`` in place on OK."""

    def __init__(
        self,
        settings: AppSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(420)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self._settings = settings

        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        top = QFormLayout()
        self._lang_label = QLabel()
        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        self._lang_combo.setCurrentIndex(
            max(0, self._lang_combo.findText(settings.language))
        )
        top.addRow(self._lang_label, self._lang_combo)
        layout.addLayout(top)

        self._board_group = QGroupBox()
        board_form = QFormLayout(self._board_group)

        self._theme_label = QLabel()
        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(BOARD_THEMES))
        self._theme_combo.setCurrentText(settings.board_theme)
        self._preview = _BoardThemePreviewWidget(self._theme_combo.currentText())
        self._theme_combo.currentTextChanged.connect(self._preview.set_theme_name)
        theme_row = QHBoxLayout()
        theme_row.addWidget(self._theme_combo, stretch=1)
        theme_row.addWidget(self._preview)
        board_form.addRow(self._theme_label, theme_row)

        self._coords_check = QCheckBox()
        self._coords_check.setChecked(settings.show_coordinates)
        self._coords_label = QLabel()
        board_form.addRow(self._coords_label, self._coords_check)

        self._highlights_check = QCheckBox()
        self._highlights_check.setChecked(settings.show_highlights)
        self._highlights_label = QLabel()
        board_form.addRow(self._highlights_label, self._highlights_check)

        layout.addWidget(self._board_group)

        self._btn_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._btn_box.accepted.connect(self._on_accept)
        self._btn_box.rejected.connect(self.reject)
        layout.addWidget(self._btn_box)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.settings_title)
        self._lang_label.setText(s.settings_language)
        self._board_group.setTitle(s.settings_board)
        self._theme_label.setText(s.settings_board_theme)
        self._coords_label.setText(s.settings_show_coords)
        self._highlights_label.setText(s.settings_show_highlights)

    def _on_accept(self) -> None:
        self._settings.language = self._lang_combo.currentText()
        self._settings.board_theme = self._theme_combo.currentText()
        self._settings.show_coordinates = self._coords_check.isChecked()
        self._settings.show_highlights = self._highlights_check.isChecked()
        self.accept()
