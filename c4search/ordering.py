"""
Column visitation order for the search.

Centre columns take part in more lines than edge columns, so visiting them
first makes alpha-beta cut off more of the tree. The order never changes the
value the search finds, only how fast it finds it and which of several
equal-valued moves it meets first.
"""

from functools import lru_cache
from typing import Optional, Sequence, Tuple

from .board import Board
from .errors import NoLegalMoveError


@lru_cache(maxsize=None)
def center_out_order(cols: int) -> Tuple[int, ...]:
    """
    Get the columns ordered from the centre outwards, left before right.

    For 7 columns this is ``(3, 2, 4, 1, 5, 0, 6)``.
    """
    if cols < 1:
        raise ValueError("Board must have at least one column")
    return tuple(sorted(range(cols), key=lambda col: (abs(2 * col - (cols - 1)), col)))


def mirror_column(col: int, cols: int) -> int:
    """Reflect a column across the centre of the board (``~col`` modulo ``cols``)."""
    return cols - 1 - col


def first_open_column(board: Board, order: Optional[Sequence[int]] = None) -> int:
    """
    Get the first non-full column in visitation order.

    Raises:
        NoLegalMoveError: If every column is full
    """
    if order is None:
        order = center_out_order(board.cols)
    for col in order:
        if not board.is_column_full(col):
            return col
    raise NoLegalMoveError("Every column is full")
