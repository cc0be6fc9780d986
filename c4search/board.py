"""
Connect-4 Board Model

A gravity-constrained grid of configurable size. Row 0 is the bottom row and
tokens stack upwards from it, so the occupied slots of every column always
form a contiguous run starting at row 0.

The board is shared mutable state: the game loop owns it, and the search
engine borrows it for one move at a time, placing and clearing tokens in
place.
"""

from typing import List, Optional, Sequence
from enum import Enum
import numpy as np
from numba import jit

from .errors import IllegalMoveError

CONNECT_LENGTH = 4


class Side(Enum):
    """Contents of a slot, doubling as the identity of a player."""
    EMPTY = 0
    RED = 1
    YELLOW = 2

    @property
    def opponent(self) -> 'Side':
        """The other colour."""
        if self is Side.RED:
            return Side.YELLOW
        if self is Side.YELLOW:
            return Side.RED
        raise ValueError("EMPTY has no opponent")


class GameResult(Enum):
    """Terminal state of a game as seen by the game loop."""
    NONE = "none"
    RED_WINS = "red_wins"
    YELLOW_WINS = "yellow_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameResult.NONE


@jit(nopython=True, cache=True)
def _jit_has_line(grid: np.ndarray, player_value: int, connect_length: int,
                  rows: int, cols: int) -> bool:
    """
    JIT-compiled scan for a completed line of one colour.

    Every occupied slot of the given colour is treated as the start of a line
    running right, up, up-right and down-right.

    Args:
        grid: The board grid, indexed [row, col] with row 0 at the bottom
        player_value: Slot value to look for (1 for red, 2 for yellow)
        connect_length: Number of tokens needed in a line
        rows: Number of rows in the board
        cols: Number of columns in the board

    Returns:
        bool: True if the colour has connect_length tokens in a line
    """
    for r in range(rows):
        for c in range(cols):
            if grid[r, c] != player_value:
                continue
            for k in range(4):
                if k == 0:
                    dr, dc = 0, 1
                elif k == 1:
                    dr, dc = 1, 0
                elif k == 2:
                    dr, dc = 1, 1
                else:
                    dr, dc = -1, 1
                count = 1
                rr, cc = r + dr, c + dc
                while (count < connect_length and 0 <= rr < rows and 0 <= cc < cols
                       and grid[rr, cc] == player_value):
                    count += 1
                    rr, cc = rr + dr, cc + dc
                if count >= connect_length:
                    return True
    return False


class Board:
    """
    Connect-4 board of arbitrary size.

    The grid is a numpy array indexed ``grid[row, col]`` where:
    - 0 represents an empty slot
    - 1 represents a red token
    - 2 represents a yellow token

    Attributes:
        rows (int): Number of rows in the board
        cols (int): Number of columns in the board
        grid (np.ndarray): The slots, row 0 at the bottom
    """

    MAX_ROWS = 32
    MAX_COLS = 32

    def __init__(self, rows: int = 6, cols: int = 7):
        """
        Initialize an empty board.

        Args:
            rows (int): Number of rows in the board (default: 6)
            cols (int): Number of columns in the board (default: 7)

        Raises:
            ValueError: If the dimensions are out of range
        """
        if rows < 1 or cols < 1:
            raise ValueError("Board dimensions must be at least 1x1")
        if rows > self.MAX_ROWS or cols > self.MAX_COLS:
            raise ValueError(f"Board dimensions cannot exceed {self.MAX_ROWS}x{self.MAX_COLS}")

        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)
        # Height of each column, kept in step with the grid by place/clear
        self._heights = [0] * cols

    @classmethod
    def from_moves(cls, moves: Sequence[int], rows: int = 6, cols: int = 7) -> 'Board':
        """
        Build a board by dropping tokens in turn, red first.

        Args:
            moves: Column indices in play order
            rows: Number of rows in the board
            cols: Number of columns in the board

        Returns:
            Board: The resulting position
        """
        board = cls(rows, cols)
        side = Side.RED
        for col in moves:
            board.drop(col, side)
            side = side.opponent
        return board

    @classmethod
    def parse(cls, text: str) -> 'Board':
        """
        Build a board from a picture, top row first.

        ``X`` is red, ``O`` is yellow and ``.`` is empty; spaces are ignored.
        Tokens are placed bottom-up, so a picture with floating tokens raises
        IllegalMoveError.
        """
        lines = [line.replace(" ", "") for line in text.strip().splitlines()]
        lines = [line for line in lines if line]
        if not lines or len({len(line) for line in lines}) != 1:
            raise ValueError("Board picture must be a non-empty rectangle")

        board = cls(len(lines), len(lines[0]))
        symbols = {'X': Side.RED, 'O': Side.YELLOW}
        for row, line in enumerate(reversed(lines)):
            for col, char in enumerate(line):
                if char == '.':
                    continue
                if char not in symbols:
                    raise ValueError(f"Unknown board symbol: {char!r}")
                board.place(col, row, symbols[char])
        return board

    def _check_column(self, col: int) -> None:
        if not 0 <= col < self.cols:
            raise IllegalMoveError(f"Column {col} is outside the board (0-{self.cols - 1})")

    def height(self, col: int) -> int:
        """Number of tokens in a column."""
        self._check_column(col)
        return self._heights[col]

    def is_column_full(self, col: int) -> bool:
        """Check whether the topmost slot of a column is occupied."""
        self._check_column(col)
        return self._heights[col] >= self.rows

    def drop_row(self, col: int) -> int:
        """
        Get the row a token dropped in this column would land in.

        Raises:
            IllegalMoveError: If the column is full or out of range
        """
        if self.is_column_full(col):
            raise IllegalMoveError(f"Column {col} is full")
        return self._heights[col]

    def place(self, col: int, row: int, side: Side) -> None:
        """
        Put a token in an empty slot.

        The slot must be the drop row of its column; anything else would
        leave a floating token or overwrite one.

        Raises:
            IllegalMoveError: If the placement breaks the board contract
        """
        if side is Side.EMPTY:
            raise IllegalMoveError("Cannot place an EMPTY token; use clear()")
        if row != self.drop_row(col):
            raise IllegalMoveError(
                f"Slot ({col}, {row}) is not the drop row of column {col} "
                f"(expected row {self._heights[col]})")
        self.grid[row, col] = side.value
        self._heights[col] += 1

    def clear(self, col: int, row: int) -> None:
        """
        Empty the topmost occupied slot of a column.

        Raises:
            IllegalMoveError: If the slot is not the top token of its column
        """
        self._check_column(col)
        if row != self._heights[col] - 1 or row < 0:
            raise IllegalMoveError(f"Slot ({col}, {row}) is not the top token of column {col}")
        self.grid[row, col] = Side.EMPTY.value
        self._heights[col] -= 1

    def drop(self, col: int, side: Side) -> int:
        """Drop a token into a column and return the row it landed in."""
        row = self.drop_row(col)
        self.place(col, row, side)
        return row

    def get(self, col: int, row: int) -> Side:
        """Get the contents of a slot."""
        self._check_column(col)
        if not 0 <= row < self.rows:
            raise IllegalMoveError(f"Row {row} is outside the board (0-{self.rows - 1})")
        return Side(int(self.grid[row, col]))

    def valid_moves(self) -> List[int]:
        """Get all columns that can still take a token, left to right."""
        return [col for col in range(self.cols) if self._heights[col] < self.rows]

    def is_board_full(self) -> bool:
        """Check whether every column is full."""
        return all(height >= self.rows for height in self._heights)

    def has_line(self, side: Side) -> bool:
        """Check whether a colour has four in a row anywhere on the board."""
        return _jit_has_line(self.grid, side.value, CONNECT_LENGTH, self.rows, self.cols)

    def game_result(self) -> GameResult:
        """
        Get the terminal result of the position.

        Returns:
            GameResult: The winner, DRAW on a full board, NONE otherwise
        """
        if self.has_line(Side.RED):
            return GameResult.RED_WINS
        if self.has_line(Side.YELLOW):
            return GameResult.YELLOW_WINS
        if self.is_board_full():
            return GameResult.DRAW
        return GameResult.NONE

    def winner(self) -> Optional[Side]:
        """Get the winning side, or None if nobody has four in a row."""
        result = self.game_result()
        if result == GameResult.RED_WINS:
            return Side.RED
        if result == GameResult.YELLOW_WINS:
            return Side.YELLOW
        return None

    def reset(self) -> None:
        """Empty the board."""
        self.grid[:, :] = Side.EMPTY.value
        self._heights = [0] * self.cols

    def copy(self) -> 'Board':
        """Get an independent copy of the board."""
        other = type(self)(self.rows, self.cols)
        other.grid = self.grid.copy()
        other._heights = list(self._heights)
        return other

    def get_board(self) -> List[List[int]]:
        """
        Get a copy of the grid as nested lists, top row first.

        Returns:
            List[List[int]]: A copy of the board
        """
        return self.grid[::-1].tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and np.array_equal(self.grid, other.grid)

    def __str__(self) -> str:
        """
        String representation of the board.

        Returns:
            str: Visual representation of the board, top row first
        """
        result = []

        col_numbers = " ".join(str(i % 10) for i in range(self.cols))
        result.append(f" {col_numbers}")
        result.append("+" + "-" * (2 * self.cols - 1) + "+")

        symbols = {0: " ", 1: "X", 2: "O"}
        for row in self.grid[::-1]:
            result.append("|" + "|".join(symbols[int(cell)] for cell in row) + "|")

        result.append("+" + "-" * (2 * self.cols - 1) + "+")
        return "\n".join(result)
