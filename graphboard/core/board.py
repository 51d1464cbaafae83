from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from . import search
from .state import (
    AdjacencyMatrix,
    BoardError,
    IllegalMoveError,
    Marker,
    MarkerArray,
    Move,
    MoveError,
    Position,
)

LOG = logging.getLogger(__name__)


class Board:
    """A fixed graph of positions, each empty or holding a red or blue marker.

    The adjacency relation never changes after construction; only
    :meth:`do_move` mutates the markers. Reads are safe from several callers
    as long as nobody is moving at the same time.
    """

    def __init__(
        self,
        adjacency: AdjacencyMatrix,
        positions_red: Iterable[int] = (),
        positions_blue: Iterable[int] = (),
    ) -> None:
        self._adjacency: Tuple[Tuple[int, ...], ...] = tuple(
            tuple(int(neighbor) for neighbor in neighbors) for neighbors in adjacency
        )
        size = len(self._adjacency)
        for index, neighbors in enumerate(self._adjacency):
            for neighbor in neighbors:
                if not 0 <= neighbor < size:
                    raise BoardError(f"Position {index} lists neighbour {neighbor} outside 0..{size - 1}.")

        red = _placement_set(positions_red, size, "red")
        blue = _placement_set(positions_blue, size, "blue")
        overlap = red & blue
        if overlap:
            raise BoardError(f"Positions {sorted(overlap)} are listed for both red and blue.")

        self._markers: MarkerArray = np.full(size, Marker.EMPTY, dtype=np.int8)
        self._markers[sorted(red)] = Marker.RED
        self._markers[sorted(blue)] = Marker.BLUE
        LOG.debug("Built board with %d positions (%d red, %d blue)", size, len(red), len(blue))

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------
    @property
    def adjacency(self) -> Tuple[Tuple[int, ...], ...]:
        return self._adjacency

    def size(self) -> int:
        return len(self._adjacency)

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> Position:
        return Position(index, Marker(int(self._markers[index])))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._adjacency == other._adjacency and bool(np.array_equal(self._markers, other._markers))

    def __repr__(self) -> str:
        markers = "".join(Marker(int(value)).symbol for value in self._markers)
        return f"Board(size={self.size()}, markers={markers!r})"

    def markers(self) -> MarkerArray:
        return self._markers.copy()

    def occupied_positions(self, marker: Marker) -> List[int]:
        return [int(index) for index in np.flatnonzero(self._markers == int(marker))]

    def copy(self) -> "Board":
        clone = Board.__new__(Board)
        clone._adjacency = self._adjacency
        clone._markers = self._markers.copy()
        return clone

    def node_neighbors(self, position: Position) -> List[Position]:
        return [self[index] for index in self._adjacency[position.index]]

    # ------------------------------------------------------------------
    # Search and moves
    # ------------------------------------------------------------------
    def breadth_first_search(self, start_index: int, end_index: int, predicate: search.Predicate) -> bool:
        return search.is_reachable(self, start_index, end_index, predicate)

    def invalid_move(self, move: Move) -> Optional[MoveError]:
        """Return why ``move`` is illegal, or ``None`` when it may be played.

        A legal move starts on a marker, ends on an empty position, and only
        passes through empty positions on the way.
        """

        if self._markers[move.source] == Marker.EMPTY:
            return MoveError.SOURCE_EMPTY
        if self._markers[move.destination] != Marker.EMPTY:
            return MoveError.DESTINATION_OCCUPIED
        if not self.breadth_first_search(move.source, move.destination, search.is_empty):
            return MoveError.UNREACHABLE
        return None

    def do_move(self, move: Move) -> None:
        """Move the marker on ``move.source`` to ``move.destination``.

        Playing an illegal move is a caller bug: :class:`IllegalMoveError` is
        raised and the board is left untouched.
        """

        reason = self.invalid_move(move)
        if reason is not None:
            raise IllegalMoveError(move, reason)
        self._markers[move.destination] = self._markers[move.source]
        self._markers[move.source] = Marker.EMPTY
        LOG.debug("Moved %s from %d to %d", Marker(int(self._markers[move.destination])).name, *move.as_tuple())

    def possible_moves(self) -> List[Move]:
        moves: List[Move] = []
        for source in range(self.size()):
            for destination in range(self.size()):
                if source == destination:
                    continue
                move = Move(source, destination)
                if self.invalid_move(move) is None:
                    moves.append(move)
        return moves

    def encode_move(self, move: Move) -> int:
        size = self.size()
        if not (0 <= move.source < size and 0 <= move.destination < size):
            raise ValueError(f"Move {move.as_tuple()} is outside a board of size {size}.")
        return move.source * size + move.destination

    def decode_move(self, index: int) -> Move:
        size = self.size()
        if not 0 <= index < size * size:
            raise ValueError("Move index out of range.")
        return Move(index // size, index % size)


def _placement_set(indices: Iterable[int], size: int, label: str) -> set:
    placed = {int(index) for index in indices}
    outside = sorted(index for index in placed if not 0 <= index < size)
    if outside:
        raise BoardError(f"Initial {label} positions {outside} are outside 0..{size - 1}.")
    return placed
