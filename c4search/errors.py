"""Exceptions raised by the search engine and board model."""


class C4SearchError(Exception):
    """Base class for all c4search errors."""


class IllegalMoveError(C4SearchError, ValueError):
    """A placement or undo broke the board contract (full column, gravity, wrong slot)."""


class NoLegalMoveError(C4SearchError):
    """A move was requested on a board with no open column."""
