"""Internationalisation strings for the Movelist UI.

Usage::

    from movelist.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_reset)          # "Сбросить"
    print(t().status_moves.format(count=3))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_reset: str
    menu_quit: str
    menu_edit: str
    menu_undo: str
    menu_redo: str
    menu_board: str
    menu_flip_board: str
    menu_settings: str
    menu_settings_action: str

    status_ready: str
    status_moves: str  # e.g. "{count} move(s) recorded"
    status_pending: str  # e.g. "Selected {cell}"

    # ── SideBar ──────────────────────────────────────────────────────────
    moves_header: str
    sidebar_empty: str
    btn_reset: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_undo: str
    btn_redo: str
    btn_flip: str

    # ── SettingsDialog ───────────────────────────────────────────────────
    settings_title: str
    settings_board: str
    settings_language: str
    settings_board_theme: str
    settings_show_coords: str
    settings_show_highlights: str


_EN = Strings(
    window_title="Movelist",
    menu_game="&Game",
    menu_reset="&Reset Move List",
    menu_quit="&Quit",
    menu_edit="&Edit",
    menu_undo="&Undo",
    menu_redo="&Redo",
    menu_board="&Board",
    menu_flip_board="&Flip Board",
    menu_settings="&Settings",
    menu_settings_action="&Preferences…",
    status_ready="Ready",
    status_moves="{count} move(s) recorded",
    status_pending="Selected {cell}",
    moves_header="Moves",
    sidebar_empty="Ready to play?",
    btn_reset="Reset",
    btn_undo="⟲ Undo",
    btn_redo="⟳ Redo",
    btn_flip="⇅ Flip",
    settings_title="Settings",
    settings_board="Board",
    settings_language="Language",
    settings_board_theme="Board theme:",
    settings_show_coords="Show coordinates:",
    settings_show_highlights="Highlight last move:",
)

_RU = Strings(
    window_title="Movelist",
    menu_game="&Игра",
    menu_reset="&Сбросить список ходов",
    menu_quit="&Выход",
    menu_edit="&Правка",
    menu_undo="&Отменить",
    menu_redo="&Повторить",
    menu_board="&Доска",
    menu_flip_board="&Перевернуть доску",
    menu_settings="&Настройки",
    menu_settings_action="&Параметры…",
    status_ready="Готово",
    status_moves="Записано ходов: {count}",
    status_pending="Выбрано поле {cell}",
    moves_header="Ходы",
    sidebar_empty="Готовы играть?",
    btn_reset="Сбросить",
    btn_undo="⟲ Отменить",
    btn_redo="⟳ Повторить",
    btn_flip="⇅ Перевернуть",
    settings_title="Настройки",
    settings_board="Доска",
    settings_language="Язык",
    settings_board_theme="Тема доски:",
    settings_show_coords="Показывать координаты:",
    settings_show_highlights="Подсвечивать последний ход:",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
