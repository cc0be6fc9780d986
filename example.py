#!/usr/bin/env python3
"""
Example usage of the Connect-4 search engine.

This script shows the engine picking moves in a few positions and then plays
a match between the search agent and a random agent.
"""

import logging

from c4search import (
    Board, Side, MinimaxAgent, MinimaxEngine, RandomAgent,
    create_engine_config, play_game, play_match,
)


def example_best_moves():
    """Demonstrate move choice in a few positions."""
    print("=== Best Moves ===")

    positions = {
        "Red can win at once": """
            . . . . . . .
            . . . . . . .
            . . . . . . .
            . . . . . . O
            . . . . . . O
            X X X . . . O
        """,
        "Red must block": """
            . . . . . . .
            . . . . . . .
            . . . . . . .
            . . . . . O .
            X . . . . O .
            X . . . . O X
        """,
    }

    engine = MinimaxEngine(depth=6)
    for title, picture in positions.items():
        board = Board.parse(picture)
        print(title)
        print(board)
        column = engine.best_move(board, Side.RED)
        print(f"Red plays column {column} "
              f"({engine.stats.nodes} nodes, {engine.stats.elapsed:.3f}s)")
        print()

    print("=" * 50 + "\n")


def example_single_game():
    """Play one game and show the final board."""
    print("=== Single Game: Minimax vs Random ===")

    config = create_engine_config(depth=6, seed=1)
    board = config.new_board()
    red = MinimaxAgent(board, Side.RED, depth=config.depth,
                       evaluator=config.new_evaluator(), rng=config.new_rng())
    yellow = RandomAgent(board, Side.YELLOW, rng=config.new_rng())

    result = play_game(board, red, yellow)
    print(board)
    print(f"Game result: {result.value}")
    print("\n" + "=" * 50 + "\n")


def example_match():
    """Play a match and report the tally."""
    print("=== Match: Minimax vs Random ===")

    config = create_engine_config(depth=4, num_games=20)
    board = config.new_board()
    red = MinimaxAgent(board, Side.RED, depth=config.depth, rng=config.new_rng())
    yellow = RandomAgent(board, Side.YELLOW, rng=config.new_rng())

    stats = play_match(board, red, yellow, num_games=config.num_games)
    print(f"Wins: {stats.red_wins}")
    print(f"Losses: {stats.yellow_wins}")
    print(f"Draws: {stats.draws}")
    print(f"Outcome: {stats.win_rate * 100:.1f}%")


def main():
    """Run all examples."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    print("Connect-4 Search Examples")
    print("=" * 50)
    print()

    try:
        example_best_moves()
        example_single_game()
        example_match()
    except KeyboardInterrupt:
        print("\nExamples interrupted by user.")


if __name__ == "__main__":
    main()
