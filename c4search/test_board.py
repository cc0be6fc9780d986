"""
Test suite for the board model.

Covers construction, placement and undo under gravity, fullness checks and
the terminal result query.
"""

import pytest
from c4search.board import Board, Side, GameResult
from c4search.errors import IllegalMoveError


def assert_gravity(board: Board) -> None:
    """Occupied slots in every column form a run starting at row 0."""
    for col in range(board.cols):
        column = [board.get(col, row) for row in range(board.rows)]
        height = sum(1 for slot in column if slot is not Side.EMPTY)
        assert all(slot is not Side.EMPTY for slot in column[:height])
        assert all(slot is Side.EMPTY for slot in column[height:])
        assert board.height(col) == height


def draw_board() -> Board:
    """A full 6x7 board with no four in a row."""
    board = Board()
    for row in range(board.rows):
        for col in range(board.cols):
            side = Side.RED if (row // 2 + col) % 2 == 0 else Side.YELLOW
            board.place(col, row, side)
    return board


class TestBoardInitialization:
    """Test Board construction and basic properties."""

    def test_default_initialization(self):
        """Test default board size."""
        board = Board()
        assert board.rows == 6
        assert board.cols == 7
        assert board.valid_moves() == [0, 1, 2, 3, 4, 5, 6]

    def test_custom_initialization(self):
        """Test custom board size initialization."""
        board = Board(rows=8, cols=9)
        assert board.rows == 8
        assert board.cols == 9
        assert board.grid.shape == (8, 9)

    def test_invalid_initialization(self):
        """Test invalid dimensions are rejected."""
        with pytest.raises(ValueError):
            Board(rows=0, cols=7)

        with pytest.raises(ValueError):
            Board(rows=6, cols=0)

        with pytest.raises(ValueError):
            Board(rows=33, cols=7)

    def test_empty_board(self):
        """Test that a new board is empty."""
        board = Board(rows=4, cols=5)
        assert all(cell == 0 for row in board.get_board() for cell in row)
        assert not board.is_board_full()
        assert board.game_result() == GameResult.NONE


class TestPlacement:
    """Test drop_row, place and clear."""

    def test_drop_row_stacks_upwards(self):
        """Test that tokens land on top of each other from row 0."""
        board = Board()
        assert board.drop_row(3) == 0
        board.place(3, 0, Side.RED)
        assert board.drop_row(3) == 1
        board.place(3, 1, Side.YELLOW)
        assert board.get(3, 0) is Side.RED
        assert board.get(3, 1) is Side.YELLOW
        assert board.drop_row(3) == 2

    def test_drop_returns_row(self):
        """Test drop combines drop_row and place."""
        board = Board()
        assert board.drop(2, Side.RED) == 0
        assert board.drop(2, Side.YELLOW) == 1

    def test_full_column(self):
        """Test that a full column is reported and refuses tokens."""
        board = Board(rows=2, cols=3)
        board.drop(0, Side.RED)
        assert not board.is_column_full(0)
        board.drop(0, Side.YELLOW)

        assert board.is_column_full(0)
        assert 0 not in board.valid_moves()
        with pytest.raises(IllegalMoveError):
            board.drop_row(0)
        with pytest.raises(IllegalMoveError):
            board.place(0, 2, Side.RED)

    def test_place_must_respect_gravity(self):
        """Test that floating or overwriting placements are rejected."""
        board = Board()
        with pytest.raises(IllegalMoveError):
            board.place(0, 1, Side.RED)
        board.place(0, 0, Side.RED)
        with pytest.raises(IllegalMoveError):
            board.place(0, 0, Side.YELLOW)
        assert board.get(0, 0) is Side.RED

    def test_place_empty_rejected(self):
        """Test that EMPTY is not a placeable token."""
        board = Board()
        with pytest.raises(IllegalMoveError):
            board.place(0, 0, Side.EMPTY)

    def test_out_of_bounds_column(self):
        """Test columns outside the board."""
        board = Board(rows=3, cols=3)
        with pytest.raises(IllegalMoveError):
            board.is_column_full(-1)
        with pytest.raises(IllegalMoveError):
            board.drop_row(3)

    def test_out_of_bounds_row(self):
        """Test that reads outside the board do not wrap around."""
        board = Board(rows=3, cols=3)
        board.drop(0, Side.RED)
        assert board.get(0, 0) is Side.RED
        assert board.get(0, 2) is Side.EMPTY
        with pytest.raises(IllegalMoveError):
            board.get(0, -1)
        with pytest.raises(IllegalMoveError):
            board.get(0, 3)

    def test_clear_undoes_place(self):
        """Test that clear restores the previous position."""
        board = Board.from_moves([3, 3, 2])
        before = board.copy()
        row = board.drop_row(4)
        board.place(4, row, Side.YELLOW)
        board.clear(4, row)
        assert board == before

    def test_clear_only_top_token(self):
        """Test that clear refuses anything but the top token of a column."""
        board = Board.from_moves([3, 3])
        with pytest.raises(IllegalMoveError):
            board.clear(3, 0)
        with pytest.raises(IllegalMoveError):
            board.clear(2, 0)
        board.clear(3, 1)
        board.clear(3, 0)
        assert board == Board()

    def test_gravity_holds_after_place_and_clear(self):
        """Test the gravity invariant through a sequence of moves and undos."""
        board = Board.from_moves([3, 3, 2, 4, 4, 1, 5, 5, 5])
        assert_gravity(board)
        for col in (5, 4, 3):
            board.clear(col, board.height(col) - 1)
            assert_gravity(board)
        board.drop(6, Side.RED)
        assert_gravity(board)


class TestBoardFull:
    """Test fullness and the draw position."""

    def test_is_board_full(self):
        """Test a board filled without a line."""
        board = draw_board()
        assert board.is_board_full()
        assert board.valid_moves() == []
        assert board.game_result() == GameResult.DRAW
        assert board.winner() is None

    def test_partially_full(self):
        """Test that one open column means the board is not full."""
        board = draw_board()
        board.clear(6, 5)
        assert not board.is_board_full()
        assert board.valid_moves() == [6]


class TestGameResult:
    """Test terminal result detection in all directions."""

    def test_horizontal_win(self):
        board = Board.parse("""
            . . . . . . .
            . . . . . . .
            . . . . . . .
            . . . . . . .
            . O O O . . .
            . X X X X . .
        """)
        assert board.game_result() == GameResult.RED_WINS
        assert board.winner() is Side.RED

    def test_vertical_win(self):
        board = Board.parse("""
            . . . . . . .
            . . . . . . .
            . . . . . O .
            . . . . . O .
            . . . . . O X
            . . . X X O X
        """)
        assert board.game_result() == GameResult.YELLOW_WINS

    def test_rising_diagonal_win(self):
        board = Board.parse("""
            . . . . . . .
            . . . . . . .
            . . . X . . .
            . . X O . . .
            . X O O . . .
            X O O X . . .
        """)
        assert board.game_result() == GameResult.RED_WINS

    def test_falling_diagonal_win(self):
        board = Board.parse("""
            . . . . . . .
            . . . . . . .
            . . . O . . .
            . . . X O . .
            . . . X X O .
            . . . X X X O
        """)
        assert board.game_result() == GameResult.YELLOW_WINS

    def test_three_is_not_a_win(self):
        board = Board.from_moves([0, 6, 1, 6, 2])
        assert board.game_result() == GameResult.NONE

    def test_small_board_never_wins(self):
        """Test a board too narrow and short for any line."""
        board = Board(rows=3, cols=3)
        for col in range(3):
            for _ in range(3):
                board.drop(col, Side.RED)
        assert board.game_result() == GameResult.DRAW


class TestBoardConstruction:
    """Test helpers that build positions."""

    def test_from_moves_alternates(self):
        board = Board.from_moves([3, 3, 4])
        assert board.get(3, 0) is Side.RED
        assert board.get(3, 1) is Side.YELLOW
        assert board.get(4, 0) is Side.RED

    def test_parse_rejects_floating_tokens(self):
        with pytest.raises(IllegalMoveError):
            Board.parse("""
                X .
                . .
            """)

    def test_parse_rejects_ragged_picture(self):
        with pytest.raises(ValueError):
            Board.parse("""
                . . .
                X .
            """)

    def test_parse_matches_from_moves(self):
        board = Board.parse("""
            . . . . . . .
            . . . . . . .
            . . . . . . .
            . . . . . . .
            . . . O . . .
            . . . X X . .
        """)
        assert board == Board.from_moves([3, 3, 4])


class TestBoardRepresentation:
    """Test board representation and copies."""

    def test_get_board_copy(self):
        """Test that get_board returns a copy, top row first."""
        board = Board(rows=2, cols=2)
        board.drop(0, Side.RED)
        rows = board.get_board()
        assert rows == [[0, 0], [1, 0]]

        rows[1][0] = 999
        assert board.get_board()[1][0] == 1

    def test_copy_is_independent(self):
        board = Board.from_moves([3])
        other = board.copy()
        other.drop(3, Side.YELLOW)
        assert board.height(3) == 1
        assert other.height(3) == 2
        assert board != other

    def test_copy_keeps_subclass(self):
        class TaggedBoard(Board):
            pass

        board = TaggedBoard.from_moves([3, 4], rows=4, cols=5)
        other = board.copy()
        assert type(other) is TaggedBoard
        assert other == board

    def test_reset(self):
        board = Board.from_moves([0, 1, 2])
        board.reset()
        assert board == Board()
        assert board.drop_row(0) == 0

    def test_string_representation(self):
        """Test string representation of the board."""
        board = Board(rows=2, cols=3)
        board.drop(0, Side.RED)
        board.drop(0, Side.YELLOW)

        lines = str(board).splitlines()
        assert lines[0] == " 0 1 2"
        assert lines[2] == "|O| | |"
        assert lines[3] == "|X| | |"


class TestSide:
    """Test the Side enumeration."""

    def test_opponent(self):
        assert Side.RED.opponent is Side.YELLOW
        assert Side.YELLOW.opponent is Side.RED
        with pytest.raises(ValueError):
            Side.EMPTY.opponent


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
