"""
Fixed-depth minimax search with alpha-beta pruning.

The engine borrows the caller's board and searches it in place: every
speculative token is cleared again before the call returns, so the board
comes back exactly as it went in. It is not reentrant; one search at a time
per board.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence, Union

import numpy as np

from .board import Board, Side
from .errors import NoLegalMoveError
from .evaluation import WindowEvaluator
from .ordering import center_out_order, first_open_column, mirror_column

logger = logging.getLogger(__name__)

SIMULATION_DEPTH = 10

Score = Union[int, float]


class SearchResult(NamedTuple):
    """Best column (-1 at a leaf) and its minimax score."""
    column: int
    score: Score


@dataclass
class SearchStats:
    """Counters for the last root search."""
    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0
    elapsed: float = 0.0


class MinimaxEngine:
    """
    Minimax search over a Connect-4 board.

    Red is the maximizing side and yellow the minimizing side. Leaves are
    boards at depth zero, full boards and decided games; their value is the
    evaluator's score shifted by the remaining depth toward the side that
    just moved, so quicker wins and slower losses score better.
    """

    def __init__(self,
                 evaluator: Optional[WindowEvaluator] = None,
                 depth: int = SIMULATION_DEPTH,
                 rng: Optional[np.random.Generator] = None,
                 pruning: bool = True):
        """
        Initialize the engine.

        Args:
            evaluator: Board evaluator (default: WindowEvaluator())
            depth: Plies searched by best_move (default: 10)
            rng: Source for the mirrored-column coin flip; None never switches
            pruning: Cut off branches with alpha-beta (default: True)

        Raises:
            ValueError: If depth is negative
        """
        if depth < 0:
            raise ValueError("Search depth cannot be negative")
        self.evaluator = evaluator or WindowEvaluator()
        self.depth = depth
        self.rng = rng
        self.pruning = pruning
        self.stats = SearchStats()

    def best_move(self, board: Board, side: Side) -> int:
        """
        Choose a column for the side to move.

        Args:
            board: Position to search; restored before returning
            side: RED or YELLOW

        Returns:
            int: Column to play

        Raises:
            NoLegalMoveError: If the board is full
        """
        if side is Side.EMPTY:
            raise ValueError("The side to move must be RED or YELLOW")
        if board.is_board_full():
            raise NoLegalMoveError("Cannot choose a move on a full board")

        self.stats = SearchStats()
        start_time = time.time()
        column, score = self.search(board, -math.inf, math.inf, self.depth, side is Side.RED)
        self.stats.elapsed = time.time() - start_time

        if column == -1:
            column = first_open_column(board)
            logger.debug(f"Search found no move for {side.name}, falling back to column {column}")

        logger.debug(f"{side.name} chooses column {column} (score={score}, depth={self.depth}, "
                     f"nodes={self.stats.nodes}, cutoffs={self.stats.cutoffs}, "
                     f"time={self.stats.elapsed:.3f}s)")
        return column

    def search(self, board: Board, alpha: Score, beta: Score, depth: int,
               maximizing: bool) -> SearchResult:
        """
        Search the board to a fixed depth.

        Args:
            board: Position to search; restored before returning
            alpha: Score the maximizer can already guarantee
            beta: Score the minimizer can already guarantee
            depth: Plies left to search
            maximizing: True if red is to move

        Returns:
            SearchResult: Best column (-1 at a leaf) and its score
        """
        if depth < 0:
            raise ValueError("Search depth cannot be negative")
        win_score = self.evaluator.win_score(board.rows, board.cols, max(depth, self.depth))
        order = center_out_order(board.cols)
        return self._search(board, alpha, beta, depth, maximizing, order, win_score)

    def _search(self, board: Board, alpha: Score, beta: Score, depth: int,
                maximizing: bool, order: Sequence[int], win_score: int) -> SearchResult:
        self.stats.nodes += 1

        evaluation = self.evaluator.evaluate(board)
        if depth == 0 or evaluation.is_decisive or board.is_board_full():
            self.stats.leaves += 1
            value = evaluation.value(win_score)
            return SearchResult(-1, value - depth if maximizing else value + depth)

        side = Side.RED if maximizing else Side.YELLOW
        best_play = -1
        best_score = -math.inf if maximizing else math.inf

        for col in order:
            if board.is_column_full(col):
                continue

            row = board.drop_row(col)
            board.place(col, row, side)
            try:
                score = self._search(board, alpha, beta, depth - 1, not maximizing,
                                     order, win_score).score
            finally:
                board.clear(col, row)

            improved = score > best_score if maximizing else score < best_score
            if improved or (score == best_score
                            and col == mirror_column(best_play, board.cols)
                            and self._coin_flip()):
                best_play = col
                best_score = score

            if maximizing:
                alpha = max(alpha, score)
            else:
                beta = min(beta, score)
            if self.pruning and beta <= alpha:
                self.stats.cutoffs += 1
                break

        return SearchResult(best_play, best_score)

    def _coin_flip(self) -> bool:
        # No random source means keep the first best move found
        if self.rng is None:
            return False
        return bool(self.rng.random() < 0.5)
