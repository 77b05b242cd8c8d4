"""MainWindow settings dialog and application helpers."""

from __future__ import annotations

import logging
from typing import Any

from movelist.ui.i18n import set_language
from movelist.ui.styles.theme import board_theme

_LOGGER = logging.getLogger(__name__)


def on_settings(host: Any, *, settings_dialog_cls: type[Any]) -> None:
    dlg = settings_dialog_cls(host._settings, host)
    if dlg.exec():
        host._apply_settings()


def apply_settings(host: Any) -> None:
    s = host._settings
    _LOGGER.debug("Applying settings: %s", s)

    # Language must come first so all retranslate calls use the new locale
    set_language(s.language)
    host.retranslate_ui()

    # Board
    board = host._board
    board.set_theme(board_theme(s.board_theme))
    board.set_show_coordinates(s.show_coordinates)
    board.set_show_highlights(s.show_highlights)
