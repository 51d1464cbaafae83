"""Board graph, move validation and reachability search."""

from .state import (
    AdjacencyMatrix,
    BoardError,
    IllegalMoveError,
    Marker,
    Move,
    MoveError,
    Position,
)
from .board import Board
from .search import collect_positions, is_empty, is_reachable

__all__ = [
    "AdjacencyMatrix",
    "Board",
    "BoardError",
    "IllegalMoveError",
    "Marker",
    "Move",
    "MoveError",
    "Position",
    "collect_positions",
    "is_empty",
    "is_reachable",
]
