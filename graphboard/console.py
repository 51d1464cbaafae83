"""Move markers around a graph board from the console, with optional logging & replay."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from graphboard.config import layout_from_config, load_yaml_config
from graphboard.core import Board, Move
from graphboard.render import render
from graphboard.topologies import BoardLayout, available_layouts, get_layout

LOG = logging.getLogger(__name__)


def layout_metadata(layout: BoardLayout) -> Dict:
    return {
        "name": layout.name,
        "adjacency": [list(neighbors) for neighbors in layout.adjacency],
        "positions_red": list(layout.positions_red),
        "positions_blue": list(layout.positions_blue),
        "render_style": layout.render_style,
    }


def prompt_move(moves: List[Move]) -> Optional[Move]:
    print("Legal moves:")
    for idx, move in enumerate(moves):
        print(f"  {idx}: {move.source} -> {move.destination}")
    while True:
        try:
            raw = input("Move number (q to quit): ").strip()
        except EOFError:
            return None
        if raw.lower() in {"q", "quit", "exit"}:
            return None
        try:
            idx = int(raw)
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= idx < len(moves):
            return moves[idx]
        print("No move with that number. Try again.")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Saved log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    layout = layout_from_config(data.get("metadata", {}).get("layout", {"layout": "ladder"}))
    moves = data.get("moves", [])
    board = layout.build()
    if verbose:
        print(f"Replaying {len(moves)} moves on {layout.name}.")
        print(render(board, layout.render_style))
    for entry in moves:
        move = board.decode_move(int(entry["move_code"]))
        board.do_move(move)
        if verbose:
            print(f"Move {entry.get('move_index', '?')}: {move.source} -> {move.destination}")
            print(render(board, layout.render_style))
    summary = {
        "layout": layout.name,
        "moves": len(moves),
        "markers": board.markers().tolist(),
    }
    if verbose:
        print("Replay finished.")
    return summary


def play_interactive(layout: BoardLayout, log_file: Optional[str] = None) -> Board:
    board = layout.build()
    log_records: List[Dict] = []

    while True:
        print("\nCurrent board:")
        print(render(board, layout.render_style))
        moves = board.possible_moves()
        if not moves:
            print("No legal moves left.")
            break
        move = prompt_move(moves)
        if move is None:
            print("Stopping.")
            break
        board.do_move(move)
        log_records.append(
            {
                "move_index": len(log_records),
                "move_code": board.encode_move(move),
                "from": move.source,
                "to": move.destination,
            }
        )

    if log_file:
        log_data = {"metadata": {"layout": layout_metadata(layout)}, "moves": log_records}
        save_log(log_data, Path(log_file))
    return board


def resolve_layout(args: argparse.Namespace) -> BoardLayout:
    if args.config:
        cfg = load_yaml_config(args.config)
        if cfg:
            return layout_from_config(cfg)
        LOG.warning("Config %s is empty or missing; falling back to layout %r", args.config, args.layout)
    return get_layout(args.layout)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Move markers on a graph board in the console.")
    parser.add_argument("--layout", choices=available_layouts(), default="ladder")
    parser.add_argument("--config", type=str, help="YAML file describing the board")
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        if args.replay_log:
            replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        else:
            play_interactive(resolve_layout(args), args.log_file)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
