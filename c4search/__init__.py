"""
Connect-4 Search Package

Fixed-depth minimax with alpha-beta pruning for Connect-4 on boards of
arbitrary size.
"""

from .board import Board, Side, GameResult
from .errors import C4SearchError, IllegalMoveError, NoLegalMoveError
from .evaluation import Evaluation, WindowEvaluator, WIN_SCORE
from .ordering import center_out_order, first_open_column, mirror_column
from .engine import MinimaxEngine, SearchResult, SearchStats, SIMULATION_DEPTH
from .agents import Agent, MinimaxAgent, RandomAgent
from .self_play import MatchStats, play_game, play_match
from .config import EngineConfig, create_engine_config

__all__ = [
    'Board', 'Side', 'GameResult',
    'C4SearchError', 'IllegalMoveError', 'NoLegalMoveError',
    'Evaluation', 'WindowEvaluator', 'WIN_SCORE',
    'center_out_order', 'first_open_column', 'mirror_column',
    'MinimaxEngine', 'SearchResult', 'SearchStats', 'SIMULATION_DEPTH',
    'Agent', 'MinimaxAgent', 'RandomAgent',
    'MatchStats', 'play_game', 'play_match',
    'EngineConfig', 'create_engine_config',
]
__version__ = '1.0.0'
