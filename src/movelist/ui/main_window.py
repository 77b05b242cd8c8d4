"""MainWindow — top-level window assembling the board and move list."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from movelist.store.interfaces import IMoveListStore
from movelist.store.moves import MoveListStore
from movelist.ui.board.board_widget import BoardWidget
from movelist.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from movelist.ui.i18n import t
from movelist.ui.main_window_parts import settings as settings_part
from movelist.ui.panels.control_panel import ControlPanel
from movelist.ui.panels.sidebar import SideBar

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window for Movelist.

    One window owns one ``MoveListStore`` for the lifetime of the board
    session. Widgets never touch the store; the window forwards clicks and
    commands to it and re-renders from its derived views.
    """

    def __init__(self, store: IMoveListStore | None = None) -> None:
        super().__init__()
        self.setWindowTitle(t().window_title)
        self.setMinimumSize(760, 520)
        self.resize(960, 640)

        self._store: IMoveListStore = store if store is not None else MoveListStore()
        self._settings = AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_store_events()

        self._sync_from_store()

    @property
    def store(self) -> IMoveListStore:
        return self._store

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board = BoardWidget()
        root.addWidget(self._board, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._sidebar = SideBar()
        right.addWidget(self._sidebar, stretch=1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        # Game menu
        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_reset = QAction(s.menu_reset, self)
        self._act_reset.setShortcut("Ctrl+R")
        self._act_reset.triggered.connect(self._on_reset)
        self._menu_game.addAction(self._act_reset)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # Edit menu
        self._menu_edit = menu_bar.addMenu(s.menu_edit)
        assert self._menu_edit is not None

        self._act_undo = QAction(s.menu_undo, self)
        self._act_undo.setShortcut(QKeySequence.StandardKey.Undo)
        self._act_undo.triggered.connect(self._on_undo)
        self._menu_edit.addAction(self._act_undo)

        self._act_redo = QAction(s.menu_redo, self)
        self._act_redo.setShortcut(QKeySequence.StandardKey.Redo)
        self._act_redo.triggered.connect(self._on_redo)
        self._menu_edit.addAction(self._act_redo)

        # Board menu
        self._menu_board = menu_bar.addMenu(s.menu_board)
        assert self._menu_board is not None

        self._act_flip = QAction(s.menu_flip_board, self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_board.addAction(self._act_flip)

        # Settings menu
        self._menu_settings = menu_bar.addMenu(s.menu_settings)
        assert self._menu_settings is not None

        self._act_settings = QAction(s.menu_settings_action, self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board.square_clicked.connect(self._on_square_clicked)
        self._sidebar.reset_clicked.connect(self._on_reset)
        self._control_panel.undo_clicked.connect(self._on_undo)
        self._control_panel.redo_clicked.connect(self._on_redo)
        self._control_panel.flip_clicked.connect(self._on_flip)

    def _connect_store_events(self) -> None:
        """Subscribe to store change notifications (idempotent)."""
        events = self._store.events
        self._replace_callback(events.on_changed, self._sync_from_store)

    def _disconnect_store_events(self) -> None:
        events = self._store.events
        self._remove_callback(events.on_changed, self._sync_from_store)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_store_events()
        super().closeEvent(event)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_square_clicked(self, cell: str) -> None:
        self._store.add_square(cell)

    def _on_undo(self) -> None:
        if not self._store.undo_move():
            _LOGGER.debug("Nothing to undo")

    def _on_redo(self) -> None:
        if not self._store.redo_move():
            _LOGGER.debug("Nothing to redo")

    def _on_reset(self) -> None:
        self._store.reset_move_list()

    def _on_flip(self) -> None:
        self._board.set_flipped(not self._board.is_flipped())

    def _on_settings(self) -> None:
        settings_part.on_settings(self, settings_dialog_cls=SettingsDialog)

    def _apply_settings(self) -> None:
        settings_part.apply_settings(self)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(s.window_title)
        # Menu bar
        self._menu_game.setTitle(s.menu_game)
        self._act_reset.setText(s.menu_reset)
        self._act_quit.setText(s.menu_quit)
        self._menu_edit.setTitle(s.menu_edit)
        self._act_undo.setText(s.menu_undo)
        self._act_redo.setText(s.menu_redo)
        self._menu_board.setTitle(s.menu_board)
        self._act_flip.setText(s.menu_flip_board)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_settings.setText(s.menu_settings_action)
        # Child widgets
        self._sidebar.retranslate_ui()
        self._control_panel.retranslate_ui()
        self._update_status()

    # ── Store sync ───────────────────────────────────────────────────────

    def _sync_from_store(self) -> None:
        """Re-render every view from the store's derived state."""
        store = self._store
        self._sidebar.set_moves(store.moves)
        self._board.set_highlighted(store.highlighted_squares)
        self._control_panel.set_history_state(
            can_undo=store.can_undo, can_redo=store.can_redo
        )
        self._act_undo.setEnabled(store.can_undo)
        self._act_redo.setEnabled(store.can_redo)
        self._update_status()

    def _update_status(self) -> None:
        store = self._store
        s = t()
        if store.is_move_list_empty:
            self._status_label.setText(s.status_ready)
            return
        last = store.moves[-1]
        if not last.second_cell:
            self._status_label.setText(s.status_pending.format(cell=last.first_cell))
        else:
            self._status_label.setText(s.status_moves.format(count=len(store.moves)))
