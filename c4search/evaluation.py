"""
Positional evaluation for Connect-4 boards.

Every run of four consecutive slots along a row, a column or either diagonal
is a window. A window holding four tokens of one colour decides the game.
Otherwise a window that holds at least two tokens of a single colour and none
of the other scores that many points for its owner; mixed and sparse windows
score nothing. Horizontal windows are weighted up, which pulls play toward the
centre columns.

Scores are from red's point of view: red maximizes, yellow minimizes.
"""

from dataclasses import dataclass
import numpy as np
from numba import jit

from .board import CONNECT_LENGTH, Board, Side

# A full window is a win, so windows are exactly as long as a winning line
WINDOW_LENGTH = CONNECT_LENGTH
HORIZONTAL_WEIGHT = 3
WIN_SCORE = 1000


@jit(nopython=True, cache=True)
def _jit_scan_windows(grid: np.ndarray, rows: int, cols: int,
                      window_length: int, horizontal_weight: int):
    """
    JIT-compiled scan of every window on the board.

    Windows that would run off the board are skipped. The scan stops at the
    first complete line.

    Args:
        grid: The board grid, indexed [row, col] with row 0 at the bottom
        rows: Number of rows in the board
        cols: Number of columns in the board
        window_length: Number of slots in a window
        horizontal_weight: Multiplier for horizontal windows

    Returns:
        (winner, score): winner is 1 or 2 for a completed line (score is then
        0), or 0 with the summed window score
    """
    score = 0
    for r in range(rows):
        for c in range(cols):
            for k in range(4):
                if k == 0:
                    dr, dc, weight = 0, 1, horizontal_weight
                elif k == 1:
                    dr, dc, weight = 1, 0, 1
                elif k == 2:
                    dr, dc, weight = 1, 1, 1
                else:
                    dr, dc, weight = -1, 1, 1

                end_r = r + dr * (window_length - 1)
                end_c = c + dc * (window_length - 1)
                if end_r < 0 or end_r >= rows or end_c >= cols:
                    continue

                red = 0
                yellow = 0
                for i in range(window_length):
                    value = grid[r + dr * i, c + dc * i]
                    if value == 1:
                        red += 1
                    elif value == 2:
                        yellow += 1

                if red == window_length:
                    return 1, 0
                if yellow == window_length:
                    return 2, 0
                if yellow == 0 and red >= 2:
                    score += red * weight
                elif red == 0 and yellow >= 2:
                    score -= yellow * weight
    return 0, score


@dataclass(frozen=True)
class Evaluation:
    """
    Outcome of evaluating a board.

    Either decisive (``winner`` is RED or YELLOW) or a heuristic ``score``;
    ``score`` is unused for decisive evaluations.
    """
    winner: Side = Side.EMPTY
    score: int = 0

    @classmethod
    def decisive(cls, side: Side) -> 'Evaluation':
        if side is Side.EMPTY:
            raise ValueError("A decisive evaluation needs a winning side")
        return cls(winner=side)

    @classmethod
    def heuristic(cls, score: int) -> 'Evaluation':
        return cls(score=score)

    @property
    def is_decisive(self) -> bool:
        return self.winner is not Side.EMPTY

    def value(self, win_score: int) -> int:
        """Collapse to a single number, using ``+/-win_score`` for decided games."""
        if self.winner is Side.RED:
            return win_score
        if self.winner is Side.YELLOW:
            return -win_score
        return self.score


class WindowEvaluator:
    """Scores boards by counting single-colour windows."""

    def __init__(self, horizontal_weight: int = HORIZONTAL_WEIGHT):
        """
        Initialize the evaluator.

        Args:
            horizontal_weight: Multiplier for horizontal windows (default: 3)

        Raises:
            ValueError: If the weight is below 1
        """
        if horizontal_weight < 1:
            raise ValueError("Horizontal weight must be at least 1")
        self.horizontal_weight = horizontal_weight
        self.window_length = WINDOW_LENGTH

    def evaluate(self, board: Board) -> Evaluation:
        """
        Evaluate a board.

        Args:
            board: Position to score

        Returns:
            Evaluation: Decisive if either side has a full window, else the
            summed window score
        """
        winner, score = _jit_scan_windows(board.grid, board.rows, board.cols,
                                          self.window_length, self.horizontal_weight)
        if winner:
            return Evaluation.decisive(Side(winner))
        return Evaluation.heuristic(int(score))

    def max_heuristic(self, rows: int, cols: int) -> int:
        """Upper bound on the magnitude of any non-decisive score for a board size."""
        span_rows = max(0, rows - self.window_length + 1)
        span_cols = max(0, cols - self.window_length + 1)
        horizontal = rows * span_cols
        vertical = cols * span_rows
        diagonal = 2 * span_rows * span_cols
        per_window = self.window_length - 1
        return per_window * (self.horizontal_weight * horizontal + vertical + diagonal)

    def win_score(self, rows: int, cols: int, depth: int) -> int:
        """
        Numeric value of a won game for a search of the given depth.

        Large enough that a decided game shifted by up to ``depth`` still lies
        beyond any heuristic score shifted by up to ``depth``.
        """
        return max(WIN_SCORE, self.max_heuristic(rows, cols) + 2 * depth + 1)
