"""YAML board configuration.

A config either names a built-in layout::

    layout: ladder
    positions_blue: [9, 10, 11]

or spells the graph out::

    name: triangle
    adjacency: [[1, 2], [0, 2], [0, 1]]
    positions_red: [0]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Sequence, Tuple, Union

import yaml

from graphboard.topologies import BoardLayout, get_layout

LOG = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


def load_yaml_config(path_str: Union[str, Path]) -> Dict:
    path = Path(path_str)
    if not path.exists():
        LOG.info("Config %s not found; using defaults", path)
        return {}
    cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level.")
    LOG.debug("Loaded config %s with keys %s", path, sorted(cfg))
    return cfg


def layout_from_config(cfg: Dict[str, Any]) -> BoardLayout:
    if "layout" in cfg:
        try:
            base = get_layout(str(cfg["layout"]))
        except KeyError as exc:
            raise ConfigError(str(exc.args[0])) from exc
        adjacency = base.adjacency
        name = base.name
        render_style = cfg.get("render_style", base.render_style)
        red = _indices(cfg["positions_red"], "positions_red") if "positions_red" in cfg else base.positions_red
        blue = _indices(cfg["positions_blue"], "positions_blue") if "positions_blue" in cfg else base.positions_blue
    elif "adjacency" in cfg:
        adjacency = _adjacency(cfg["adjacency"])
        name = str(cfg.get("name", "custom"))
        render_style = cfg.get("render_style", "list")
        red = _indices(cfg.get("positions_red", []), "positions_red")
        blue = _indices(cfg.get("positions_blue", []), "positions_blue")
    else:
        raise ConfigError("Config needs either 'layout' or 'adjacency'.")

    LOG.info("Using layout %r with %d positions", name, len(adjacency))
    return BoardLayout(
        name=name,
        adjacency=adjacency,
        positions_red=red,
        positions_blue=blue,
        render_style=str(render_style),
    )


def _adjacency(raw: Any) -> Tuple[Tuple[int, ...], ...]:
    if not isinstance(raw, list):
        raise ConfigError("'adjacency' must be a list of neighbour lists.")
    return tuple(_indices(neighbors, f"adjacency[{index}]") for index, neighbors in enumerate(raw))


def _indices(raw: Any, label: str) -> Tuple[int, ...]:
    if not isinstance(raw, Sequence) or isinstance(raw, str):
        raise ConfigError(f"'{label}' must be a list of integers.")
    if not all(isinstance(value, int) and not isinstance(value, bool) for value in raw):
        raise ConfigError(f"'{label}' must only contain integers.")
    return tuple(raw)
