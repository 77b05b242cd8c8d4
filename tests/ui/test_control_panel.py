"""Tests for undo/redo/flip buttons."""

from __future__ import annotations

from movelist.ui.panels.control_panel import ControlPanel


def test_buttons_start_disabled_except_flip() -> None:
    panel = ControlPanel()
    assert not panel._btn_undo.isEnabled()
    assert not panel._btn_redo.isEnabled()
    assert panel._btn_flip.isEnabled()


def test_set_history_state_toggles_buttons() -> None:
    panel = ControlPanel()
    panel.set_history_state(can_undo=True, can_redo=False)
    assert panel._btn_undo.isEnabled()
    assert not panel._btn_redo.isEnabled()

    panel.set_history_state(can_undo=False, can_redo=True)
    assert not panel._btn_undo.isEnabled()
    assert panel._btn_redo.isEnabled()


def test_buttons_emit_signals() -> None:
    panel = ControlPanel()
    panel.set_history_state(can_undo=True, can_redo=True)
    fired: list[str] = []
    panel.undo_clicked.connect(lambda: fired.append("undo"))
    panel.redo_clicked.connect(lambda: fired.append("redo"))
    panel.flip_clicked.connect(lambda: fired.append("flip"))

    panel._btn_undo.click()
    panel._btn_redo.click()
    panel._btn_flip.click()

    assert fired == ["undo", "redo", "flip"]
