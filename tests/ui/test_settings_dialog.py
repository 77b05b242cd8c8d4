"""Tests for settings dialog widgets and apply pipeline."""

from __future__ import annotations

from types import SimpleNamespace

from movelist.ui.board.board_widget import BoardWidget
from movelist.ui.dialogs.settings_dialog import (
    AppSettings,
    SettingsDialog,
    _BoardThemePreviewWidget,
)
from movelist.ui.i18n import set_language, t
from movelist.ui.main_window_parts.settings import apply_settings, on_settings
from movelist.ui.styles.theme import BoardTheme


def test_dialog_starts_from_current_settings() -> None:
    dialog = SettingsDialog(
        AppSettings(
            language="Russian",
            board_theme="Slate",
            show_coordinates=False,
            show_highlights=True,
        )
    )
    assert dialog._lang_combo.currentText() == "Russian"
    assert dialog._theme_combo.currentText() == "Slate"
    assert dialog._coords_check.isChecked() is False
    assert dialog._highlights_check.isChecked() is True


def test_dialog_accept_applies_changes_to_settings() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)

    dialog._theme_combo.setCurrentText("Blue")
    dialog._coords_check.setChecked(False)
    dialog._highlights_check.setChecked(False)
    dialog._lang_combo.setCurrentText("Russian")

    dialog._on_accept()

    assert settings == AppSettings(
        language="Russian",
        board_theme="Blue",
        show_coordinates=False,
        show_highlights=False,
    )


def test_dialog_cancel_leaves_settings_untouched() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)
    dialog._coords_check.setChecked(False)
    dialog._btn_box.rejected.emit()
    assert settings == AppSettings()


def test_dialog_retranslate_follows_locale() -> None:
    dialog = SettingsDialog(AppSettings())
    assert dialog.windowTitle() == "Settings"
    assert dialog._board_group.title() == "Board"

    set_language("Russian")
    dialog.retranslate_ui()

    assert dialog.windowTitle() == "Настройки"
    assert dialog._board_group.title() == "Доска"
    assert dialog._lang_label.text() == "Язык"


def test_theme_preview_follows_combo() -> None:
    dialog = SettingsDialog(AppSettings(board_theme="Classic"))
    assert isinstance(dialog._preview, _BoardThemePreviewWidget)
    dialog._theme_combo.setCurrentText("Green")
    assert dialog._preview._theme_name == "Green"


def test_apply_settings_updates_board_and_language() -> None:
    calls: list[str] = []
    board = BoardWidget()
    board.set_highlighted(["e4"])
    host = SimpleNamespace(
        _settings=AppSettings(
            language="Russian",
            board_theme="Unknown",
            show_coordinates=False,
            show_highlights=False,
        ),
        _board=board,
        retranslate_ui=lambda: calls.append(t().btn_reset),
    )

    apply_settings(host)

    assert calls == ["Сбросить"]
    assert board._theme == BoardTheme.default()
    assert board.square("e4").text() == ""
    assert board.highlighted_cells() == []


def test_on_settings_only_applies_when_accepted() -> None:
    applied: list[bool] = []
    host = SimpleNamespace(
        _settings=AppSettings(),
        _apply_settings=lambda: applied.append(True),
    )

    class _Rejecting:
        def __init__(self, settings, parent) -> None:
            del settings, parent

        def exec(self) -> int:
            return 0

    class _Accepting(_Rejecting):
        def exec(self) -> int:
            return 1

    on_settings(host, settings_dialog_cls=_Rejecting)
    assert applied == []
    on_settings(host, settings_dialog_cls=_Accepting)
    assert applied == [True]
