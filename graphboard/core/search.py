"""Breadth-first traversal over a :class:`~graphboard.core.board.Board`."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Callable, Deque, List, Sequence, Set

from .state import Position

if TYPE_CHECKING:
    from .board import Board

Predicate = Callable[[Position], bool]
NeighborPredicate = Callable[[Position, Sequence[Position]], bool]


def is_empty(position: Position) -> bool:
    return position.is_empty


def is_reachable(board: "Board", start_index: int, end_index: int, predicate: Predicate) -> bool:
    """Return whether ``end_index`` can be reached from ``start_index``.

    Only neighbours accepted by ``predicate`` are enqueued. The start position
    is never tested, and the target is recognised by index alone when it
    reaches the front of the queue, so ``start_index == end_index`` is always
    reachable. Each index is expanded at most once.
    """

    queue: Deque[Position] = deque([board[start_index]])
    visited: Set[int] = set()

    while queue:
        position = queue[0]
        if position.index == end_index:
            return True
        queue.popleft()
        if position.index in visited:
            continue
        visited.add(position.index)
        for neighbor in board.node_neighbors(position):
            if neighbor.index not in visited and predicate(neighbor):
                queue.append(neighbor)
    return False


def collect_positions(board: "Board", start_index: int, predicate: NeighborPredicate) -> List[Position]:
    """Visit everything reachable from ``start_index`` and keep matching positions.

    ``predicate`` receives each visited position together with its neighbours.
    Results are returned in visiting order; the start position is included
    when it matches.
    """

    queue: Deque[Position] = deque([board[start_index]])
    seen: Set[int] = {start_index}
    found: List[Position] = []

    while queue:
        position = queue.popleft()
        neighbors = board.node_neighbors(position)
        if predicate(position, neighbors):
            found.append(position)
        for neighbor in neighbors:
            if neighbor.index not in seen:
                seen.add(neighbor.index)
                queue.append(neighbor)
    return found
