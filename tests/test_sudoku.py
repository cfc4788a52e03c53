import io

import pytest

from algocollection.sudoku import (
    Board,
    InvalidValueError,
    ReadOnlySquareError,
    SudokuError,
    instructions,
    main,
)

ROWS = [
    "530070000",
    "600195000",
    "098000060",
    "800060003",
    "400803001",
    "700020006",
    "060000280",
    "000419005",
    "000080079",
]
TEXT = "\n".join(" ".join(row) for row in ROWS) + "\n"


@pytest.fixture
def board():
    return Board.parse(TEXT)


def test_parse_reads_in_reading_order(board):
    assert board.get("A", 1) == "5"
    assert board.get("B", 1) == "3"
    assert board.get("a", 2) == "6"
    assert board.get("I", 9) == "9"


def test_zero_becomes_blank(board):
    assert board.get("C", 1) == " "


def test_parse_ignores_whitespace_layout(board):
    assert Board.parse("".join(ROWS)).cells == board.cells


def test_edit_empty_square(board):
    board.edit("c", 1, 4)
    assert board.get("C", 1) == "4"


def test_edit_filled_square_is_read_only(board):
    with pytest.raises(ReadOnlySquareError, match="Square 'A1' is read-only"):
        board.edit("a", 1, 2)


@pytest.mark.parametrize("value", [0, 10, -3])
def test_edit_rejects_out_of_range_value(board, value):
    with pytest.raises(InvalidValueError):
        board.edit("C", 1, value)
    assert board.get("C", 1) == " "


def test_bad_coordinates(board):
    with pytest.raises(SudokuError):
        board.get("J", 1)
    with pytest.raises(SudokuError):
        board.get("A", 10)


def test_short_board_rejected():
    with pytest.raises(SudokuError):
        Board.parse("123")


def test_load_from_file(tmp_path, board):
    path = tmp_path / "board.txt"
    path.write_text(TEXT)
    assert Board.load(path).cells == board.cells


def test_instructions_list_commands():
    text = instructions()
    assert text.startswith("Options:\n")
    assert "   Q  Save and Quit\n" in text


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Input file opening failed." in capsys.readouterr().out


def test_main_reports_read_only(tmp_path, capsys, monkeypatch):
    path = tmp_path / "board.txt"
    path.write_text(TEXT)
    monkeypatch.setattr("sys.stdin", io.StringIO("E\nA1\nX\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "ERROR: Square 'A1' is read-only" in out
    assert "ERROR: Invalid command" in out