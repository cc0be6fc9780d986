"""
Configuration for engine matches.
"""

from typing import Optional

import numpy as np

from .board import Board
from .engine import SIMULATION_DEPTH
from .evaluation import HORIZONTAL_WEIGHT, WindowEvaluator


class EngineConfig:
    """Configuration for the board, the search and self-play matches."""

    def __init__(self):
        # Board size
        self.rows = 6
        self.cols = 7

        # Search parameters
        self.depth = SIMULATION_DEPTH
        self.horizontal_weight = HORIZONTAL_WEIGHT

        # Tie-break randomness; None draws fresh entropy
        self.seed = None

        # Self-play parameters
        self.num_games = 100

    def new_board(self) -> Board:
        return Board(rows=self.rows, cols=self.cols)

    def new_evaluator(self) -> WindowEvaluator:
        return WindowEvaluator(horizontal_weight=self.horizontal_weight)

    def new_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)


def create_engine_config(
    rows: int = 6,
    cols: int = 7,
    depth: int = SIMULATION_DEPTH,
    horizontal_weight: int = HORIZONTAL_WEIGHT,
    seed: Optional[int] = None,
    num_games: int = 100
) -> EngineConfig:
    """Create an engine configuration with custom parameters."""
    if depth < 0:
        raise ValueError("Search depth cannot be negative")
    config = EngineConfig()
    config.rows = rows
    config.cols = cols
    config.depth = depth
    config.horizontal_weight = horizontal_weight
    config.seed = seed
    config.num_games = num_games
    return config
