"""Graph board move validation."""

from . import core
from .core import (
    Board,
    BoardError,
    IllegalMoveError,
    Marker,
    Move,
    MoveError,
    Position,
    collect_positions,
    is_reachable,
)
from .topologies import BoardLayout, available_layouts, diamond, get_layout, ladder

__all__ = [
    "core",
    "Board",
    "BoardError",
    "IllegalMoveError",
    "Marker",
    "Move",
    "MoveError",
    "Position",
    "collect_positions",
    "is_reachable",
    "BoardLayout",
    "available_layouts",
    "diamond",
    "get_layout",
    "ladder",
]
