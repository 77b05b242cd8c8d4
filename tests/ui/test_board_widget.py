"""Tests for the clickable board grid."""

from __future__ import annotations

from movelist.ui.board.board_widget import BoardWidget, cell_name
from movelist.ui.styles.theme import BoardTheme


def test_cell_name_maps_file_and_rank() -> None:
    assert cell_name(0, 0) == "a1"
    assert cell_name(7, 7) == "h8"
    assert cell_name(4, 3) == "e4"


def test_board_has_64_named_squares() -> None:
    board = BoardWidget()
    assert len(board.cells()) == 64
    square = board.square("a1")
    assert square.objectName() == "square-a1"
    assert square.is_light is False
    assert board.square("h1").is_light is True


def test_clicking_square_emits_cell() -> None:
    board = BoardWidget()
    clicked: list[str] = []
    board.square_clicked.connect(clicked.append)

    board.square("e2").click()
    board.square("e4").click()

    assert clicked == ["e2", "e4"]


def test_set_highlighted_marks_exactly_given_cells() -> None:
    board = BoardWidget()
    board.set_highlighted(["a1", "b1"])
    assert board.square("a1").property("highlighted") is True
    assert sorted(board.highlighted_cells()) == ["a1", "b1"]

    board.set_highlighted(["c1"])
    assert board.square("a1").property("highlighted") is False
    assert board.highlighted_cells() == ["c1"]

    board.set_highlighted([])
    assert board.highlighted_cells() == []


def test_set_highlighted_ignores_unknown_cells() -> None:
    board = BoardWidget()
    board.set_highlighted(["z9", "d4"])
    assert board.highlighted_cells() == ["d4"]


def test_hiding_highlights_keeps_them_for_later() -> None:
    board = BoardWidget()
    board.set_highlighted(["e4"])

    board.set_show_highlights(False)
    assert board.highlighted_cells() == []

    board.set_show_highlights(True)
    assert board.highlighted_cells() == ["e4"]


def test_flip_moves_squares_in_grid() -> None:
    board = BoardWidget()
    grid = board._grid

    def at(row: int, col: int) -> str:
        item = grid.itemAtPosition(row, col)
        assert item is not None
        return item.widget().cell

    assert at(0, 0) == "a8"
    assert at(7, 7) == "h1"

    board.set_flipped(True)
    assert board.is_flipped()
    assert at(0, 0) == "h1"
    assert at(7, 7) == "a8"


def test_show_coordinates_toggles_square_text() -> None:
    board = BoardWidget()
    assert board.square("e4").text() == "e4"

    board.set_show_coordinates(False)
    assert all(board.square(c).text() == "" for c in board.cells())

    board.set_show_coordinates(True)
    assert board.square("e4").text() == "e4"


def test_set_theme_restyles_squares() -> None:
    board = BoardWidget()
    theme = BoardTheme.blue()
    board.set_theme(theme)
    assert theme.dark_square.name() in board.square("a1").styleSheet()

    board.set_highlighted(["a1"])
    assert theme.highlight.name() in board.square("a1").styleSheet()
