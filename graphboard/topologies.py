"""Built-in board layouts used by the console and the tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

from graphboard.core import Board


@dataclass(frozen=True)
class BoardLayout:
    name: str
    adjacency: Tuple[Tuple[int, ...], ...]
    positions_red: Tuple[int, ...] = field(default_factory=tuple)
    positions_blue: Tuple[int, ...] = field(default_factory=tuple)
    render_style: str = "list"

    def build(self) -> Board:
        return Board(self.adjacency, self.positions_red, self.positions_blue)


def ladder() -> BoardLayout:
    """Twelve positions: a main row with one spur above 2 and 8 and one below 5.

    Red starts on the left end, blue on the right end.
    """

    # fmt: off
    adjacency = (
        (1,),       (0, 2),
        (1, 3, 4),  (2,),
        (2, 5),     (4, 6, 7),
        (5,),       (5, 8),
        (7, 9, 10), (8,),
        (8, 11),    (10,),
    )
    # fmt: on
    return BoardLayout(
        name="ladder",
        adjacency=adjacency,
        positions_red=(0, 1, 2, 3),
        positions_blue=(8, 9, 10, 11),
        render_style="ladder",
    )


def diamond() -> BoardLayout:
    return BoardLayout(
        name="diamond",
        adjacency=((1, 2, 3), (0, 3), (0, 3), (0, 1, 2)),
    )


_LAYOUTS: Dict[str, Callable[[], BoardLayout]] = {
    "ladder": ladder,
    "diamond": diamond,
}


def available_layouts() -> List[str]:
    return sorted(_LAYOUTS)


def get_layout(name: str) -> BoardLayout:
    try:
        return _LAYOUTS[name]()
    except KeyError as exc:
        raise KeyError(f"Unknown layout {name!r}; choose from {available_layouts()}") from exc
