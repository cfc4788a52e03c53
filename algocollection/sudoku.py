"""An interactive Sudoku board: load, display and edit squares."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

SIZE = 9
EMPTY = " "
COLUMNS = "ABCDEFGHI"
_SEPARATOR = "   -----+-----+-----"

_INSTRUCTIONS = (
    "Options:\n"
    "   ?  Show these instructions\n"
    "   D  Display the board\n"
    "   E  Edit one square\n"
    "   S  Show the possible values for a square\n"
    "   Q  Save and Quit\n"
    "\n"
)


class SudokuError(ValueError):
    """Base error for invalid boards and moves."""


class ReadOnlySquareError(SudokuError):
    """Raised when editing a square that already holds a value."""


class InvalidValueError(SudokuError):
    """Raised when a value outside 1..9 is placed on the board."""


def instructions() -> str:
    """The list of interactive commands."""
    return _INSTRUCTIONS


class Board:
    """A 9x9 board; ``cells[row][col]`` is one character, blank when empty."""

    def __init__(self, cells: Sequence[Sequence[str]]) -> None:
        if len(cells) != SIZE or any(len(row) != SIZE for row in cells):
            raise SudokuError("a board must have 9 rows of 9 squares")
        self.cells = [list(row) for row in cells]

    @classmethod
    def parse(cls, text: str) -> Board:
        """Read 81 non-blank characters in reading order; ``0`` marks an empty square."""
        chars = [ch for ch in text if not ch.isspace()]
        if len(chars) < SIZE * SIZE:
            raise SudokuError(f"expected 81 squares, found {len(chars)}")
        cells = [
            [EMPTY if ch == "0" else ch for ch in chars[row * SIZE : (row + 1) * SIZE]]
            for row in range(SIZE)
        ]
        return cls(cells)

    @classmethod
    def load(cls, path: str | Path) -> Board:
        """Read a board from the file at ``path``."""
        return cls.parse(Path(path).read_text())

    def _row_line(self, row: int) -> str:
        cells = self.cells[row]
        blocks = (" ".join(cells[start : start + 3]) for start in (0, 3, 6))
        return f"{row + 1}  " + "|".join(blocks)

    def render(self) -> str:
        """The board with column letters, row numbers and block separators."""
        lines = ["   " + " ".join(COLUMNS)]
        for row in range(SIZE):
            if row in (3, 6):
                lines.append(_SEPARATOR)
            lines.append(self._row_line(row))
        return "\n".join(lines) + "\n\n"

    def _position(self, letter: str, number: int) -> tuple[int, int]:
        col = COLUMNS.find(letter.upper()) if len(letter) == 1 else -1
        if col < 0 or not 1 <= number <= SIZE:
            raise SudokuError(f"ERROR: Square '{letter.upper()}{number}' is invalid")
        return number - 1, col

    def get(self, letter: str, number: int) -> str:
        """Contents of the square at column ``letter`` and row ``number``."""
        row, col = self._position(letter, number)
        return self.cells[row][col]

    def edit(self, letter: str, number: int, value: int) -> None:
        """Place ``value`` in an empty square."""
        row, col = self._position(letter, number)
        square = f"{letter.upper()}{number}"
        if self.cells[row][col] != EMPTY:
            raise ReadOnlySquareError(f"ERROR: Square '{square}' is read-only")
        if not 1 <= value <= 9:
            raise InvalidValueError(
                f"ERROR: Value '{value}' in square '{square}' is invalid"
            )
        self.cells[row][col] = str(value)


def _parse_coordinates(text: str) -> tuple[str, int]:
    text = text.strip()
    if len(text) < 2:
        raise SudokuError(f"ERROR: Square '{text}' is invalid")
    try:
        return text[0], int(text[1:])
    except ValueError:
        raise SudokuError(f"ERROR: Square '{text}' is invalid") from None


def _edit_interactively(board: Board) -> None:
    letter, number = _parse_coordinates(
        input("What are the coordinates of the square: ")
    )
    board.get(letter, number)
    square = f"{letter.upper()}{number}"
    if board.get(letter, number) != EMPTY:
        raise ReadOnlySquareError(f"ERROR: Square '{square}' is read-only")
    raw = input(f"What is the value at '{square}': ").strip()
    try:
        value = int(raw)
    except ValueError:
        raise InvalidValueError(
            f"ERROR: Value '{raw}' in square '{square}' is invalid"
        ) from None
    board.edit(letter, number, value)


def main(argv: Sequence[str] | None = None) -> int:
    """Load a board and run the interactive command loop."""
    parser = argparse.ArgumentParser(description="Interactive Sudoku board.")
    parser.add_argument("board", nargs="?", help="file holding the board")
    args = parser.parse_args(argv)

    try:
        path = args.board or input("Where is your board located? ").strip()
        board = Board.load(path)
    except (OSError, EOFError):
        print("Input file opening failed.")
        return 1
    except SudokuError as error:
        print(error)
        return 1

    print(instructions(), end="")
    print(board.render(), end="")
    while True:
        try:
            option = input("> ").strip()[:1].upper()
        except EOFError:
            return 0
        try:
            if option == "E":
                _edit_interactively(board)
                print()
            elif option == "?":
                print(instructions(), end="")
            elif option == "D":
                print(board.render(), end="")
            elif option == "Q":
                return 0
            else:
                print("ERROR: Invalid command")
        except SudokuError as error:
            print(error)
            print()
        except EOFError:
            return 0


if __name__ == "__main__":
    sys.exit(main())