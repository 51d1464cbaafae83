from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

MarkerArray = NDArray[np.int8]
AdjacencyMatrix = Sequence[Sequence[int]]


class Marker(IntEnum):
    EMPTY = 0
    RED = 1
    BLUE = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Marker.EMPTY: ".", Marker.RED: "R", Marker.BLUE: "B"}


class MoveError(str, Enum):
    """Reasons a move is rejected, listed in the order they are checked."""

    SOURCE_EMPTY = "source field is empty"
    DESTINATION_OCCUPIED = "destination field is not empty"
    UNREACHABLE = "unreachable destination"


class BoardError(ValueError):
    pass


class IllegalMoveError(BoardError):
    def __init__(self, move: "Move", reason: MoveError) -> None:
        super().__init__(f"Illegal move {move.source} -> {move.destination}: {reason.value}")
        self.move = move
        self.reason = reason


@dataclass(frozen=True, order=True)
class Position:
    """Snapshot of a single board position.

    Equality, ordering and hashing look at ``index`` only, so a position can
    be used as a visited-set key no matter which marker it held when it was
    read.
    """

    index: int
    marker: Marker = field(default=Marker.EMPTY, compare=False)

    @property
    def is_empty(self) -> bool:
        return self.marker == Marker.EMPTY


@dataclass(frozen=True)
class Move:
    source: int
    destination: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.source, self.destination)

    def inverse(self) -> "Move":
        return Move(self.destination, self.source)

    def is_inverse(self, other: "Move") -> bool:
        return other == self.inverse()
