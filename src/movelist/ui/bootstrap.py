"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
LOG_LEVEL_ENV = "MOVELIST_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = logging.WARNING


def _lookup_level(value: str | None) -> int | None:
    name = (value or "").strip().upper()
    if not name:
        return None
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def resolve_log_level(value: str | None) -> int:
    """Map a level name such as ``"debug"`` to a logging level.

    Unknown, blank or missing names fall back to WARNING.
    """
    level = _lookup_level(value)
    return _DEFAULT_LOG_LEVEL if level is None else level


def configure_logging() -> None:
    """Set up root logging from the environment."""
    raw = os.environ.get(LOG_LEVEL_ENV, "")
    level = _lookup_level(raw)
    logging.basicConfig(
        level=_DEFAULT_LOG_LEVEL if level is None else level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    if level is None and raw.strip():
        _LOGGER.warning("Unknown %s value %r, using WARNING", LOG_LEVEL_ENV, raw)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from movelist.ui.styles.theme import APP_STYLE

    app.setApplicationName("Movelist")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from movelist.ui.main_window import MainWindow

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.info("Main window shown")

    return app.exec()
