"""Text rendering built on the board's read API (``size()`` and indexing)."""

from __future__ import annotations

from graphboard.core import Board

LADDER_ROW = (0, 1, 2, 4, 5, 7, 8, 10, 11)


def format_positions(board: Board, per_line: int = 8) -> str:
    cells = [f"{index:2}:{board[index].marker.symbol}" for index in range(board.size())]
    lines = [" ".join(cells[start:start + per_line]) for start in range(0, len(cells), per_line)]
    return "\n".join(lines)


def format_ladder(board: Board) -> str:
    if board.size() != 12:
        raise ValueError(f"The ladder drawing needs 12 positions, got {board.size()}.")

    def sym(index: int) -> str:
        return board[index].marker.symbol

    lines = [
        f"      {sym(3)}           {sym(9)}",
        "      |           |",
        "--".join(sym(index) for index in LADDER_ROW),
        "            |",
        f"            {sym(6)}",
    ]
    return "\n".join(lines)


def render(board: Board, style: str = "list") -> str:
    if style == "ladder":
        return format_ladder(board)
    if style == "list":
        return format_positions(board)
    raise ValueError(f"Unknown render style {style!r}.")
