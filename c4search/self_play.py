"""
Self-play driver for comparing two agents.

Plays complete games on a shared board and tallies the outcomes.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict

from .agents import Agent
from .board import Board, GameResult, Side

logger = logging.getLogger(__name__)


@dataclass
class MatchStats:
    """Running tally of game results."""
    red_wins: int = 0
    yellow_wins: int = 0
    draws: int = 0

    @property
    def total_games(self) -> int:
        return self.red_wins + self.yellow_wins + self.draws

    @property
    def win_rate(self) -> float:
        """Fraction of games won by red."""
        if self.total_games == 0:
            return 0.0
        return self.red_wins / self.total_games

    def record(self, result: GameResult) -> None:
        """Count one finished game."""
        if result == GameResult.RED_WINS:
            self.red_wins += 1
        elif result == GameResult.YELLOW_WINS:
            self.yellow_wins += 1
        elif result == GameResult.DRAW:
            self.draws += 1
        else:
            raise ValueError(f"Cannot record an unfinished game: {result}")

    def as_dict(self) -> Dict[str, Any]:
        return {
            'red_wins': self.red_wins,
            'yellow_wins': self.yellow_wins,
            'draws': self.draws,
            'total_games': self.total_games,
            'win_rate': self.win_rate,
        }


def _check_agents(board: Board, red: Agent, yellow: Agent) -> None:
    if red.side is not Side.RED or yellow.side is not Side.YELLOW:
        raise ValueError("Expected a RED agent and a YELLOW agent")
    if red.board is not board or yellow.board is not board:
        raise ValueError("Both agents must share the board being played on")


def play_game(board: Board, red: Agent, yellow: Agent) -> GameResult:
    """
    Play a single game between two agents.

    Args:
        board: Board both agents are bound to; reset before play
        red: Agent moving first
        yellow: Agent moving second

    Returns:
        GameResult: The final result
    """
    _check_agents(board, red, yellow)
    board.reset()

    agents = (red, yellow)
    num_moves = 0
    result = board.game_result()
    while not result.is_terminal:
        agents[num_moves % 2].move()
        num_moves += 1
        result = board.game_result()

    logger.debug(f"Game finished after {num_moves} moves: {result.value}")
    return result


def play_match(board: Board, red: Agent, yellow: Agent, num_games: int = 100) -> MatchStats:
    """
    Play a series of games and tally the results.

    Args:
        board: Board both agents are bound to
        red: Agent moving first in every game
        yellow: Agent moving second in every game
        num_games: Number of games to play

    Returns:
        MatchStats: Wins, losses and draws from red's point of view
    """
    if num_games < 1:
        raise ValueError("A match needs at least one game")

    logger.info(f"Playing {num_games} games: {red.name} (RED) vs {yellow.name} (YELLOW)")
    stats = MatchStats()
    start_time = time.time()

    for i in range(num_games):
        stats.record(play_game(board, red, yellow))
        if (i + 1) % 10 == 0:
            logger.info(f"Completed {i + 1}/{num_games} games "
                        f"({stats.red_wins} {stats.yellow_wins} {stats.draws})")

    elapsed_time = time.time() - start_time
    logger.info(f"Match complete in {elapsed_time:.2f} seconds: Wins = {stats.red_wins}, "
                f"Losses = {stats.yellow_wins}, Draws = {stats.draws}, "
                f"Outcome = {stats.win_rate * 100:.1f}%")
    return stats
