"""
Players that share a board with the game loop.

An agent is bound to one board and one colour. Each call to ``move()``
commits exactly one token to the real board; the game loop only has to
alternate calls between two agents.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .board import Board, Side
from .engine import MinimaxEngine, SIMULATION_DEPTH
from .errors import NoLegalMoveError
from .evaluation import WindowEvaluator

logger = logging.getLogger(__name__)


class Agent(ABC):
    """Base class for anything that can take a turn."""

    def __init__(self, board: Board, side: Side, label: str):
        """
        Initialize the agent.

        Args:
            board: Board shared with the game loop
            side: Colour this agent plays (RED or YELLOW)
            label: Name shown in reports

        Raises:
            ValueError: If side is EMPTY
        """
        if side is Side.EMPTY:
            raise ValueError("An agent must play RED or YELLOW")
        self.board = board
        self.side = side
        self.label = label

    @property
    def name(self) -> str:
        """Identifying label for reporting."""
        return self.label

    @abstractmethod
    def choose_column(self) -> int:
        """Pick a non-full column without changing the board."""

    def move(self) -> None:
        """
        Play one token on the shared board.

        Raises:
            NoLegalMoveError: If the board is already full; nothing is placed
        """
        if self.board.is_board_full():
            raise NoLegalMoveError(f"{self.name} cannot move on a full board")

        col = self.choose_column()
        row = self.board.drop_row(col)
        self.board.place(col, row, self.side)
        logger.debug(f"{self.name} ({self.side.name}) plays column {col}, row {row}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, side={self.side.name})"


class MinimaxAgent(Agent):
    """Agent that picks its move with a fixed-depth alpha-beta search."""

    def __init__(self,
                 board: Board,
                 side: Side,
                 depth: int = SIMULATION_DEPTH,
                 evaluator: Optional[WindowEvaluator] = None,
                 rng: Optional[np.random.Generator] = None,
                 label: str = "Minimax"):
        """
        Initialize the agent.

        Args:
            board: Board shared with the game loop
            side: Colour this agent plays
            depth: Search depth in plies (default: 10)
            evaluator: Board evaluator (default: WindowEvaluator())
            rng: Tie-break random source; a fresh unseeded generator if None
            label: Name shown in reports
        """
        super().__init__(board, side, label)
        if rng is None:
            rng = np.random.default_rng()
        self.engine = MinimaxEngine(evaluator=evaluator, depth=depth, rng=rng)

    def choose_column(self) -> int:
        return self.engine.best_move(self.board, self.side)


class RandomAgent(Agent):
    """Agent that plays a uniformly random non-full column."""

    def __init__(self,
                 board: Board,
                 side: Side,
                 rng: Optional[np.random.Generator] = None,
                 label: str = "Random"):
        super().__init__(board, side, label)
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose_column(self) -> int:
        valid_moves = self.board.valid_moves()
        if not valid_moves:
            raise NoLegalMoveError(f"{self.name} has no column to choose")
        return int(self.rng.choice(valid_moves))
