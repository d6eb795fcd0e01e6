"""Implementations of grid console commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from ...config import CONFIG
from ...core.grid_graph import GridError, GridGraph
from ...search.astar import path_cost, search
from ...search.heuristics import HEURISTICS
from ..grid_loader import load_grid
from ..path_follower import PathFollower
from ..terminal_view import render

logger = logging.getLogger(__name__)


HELP_TEXT = """Available commands:
  /new <rows> <cols>            open grid with every weight 1
  /load <file>                  load weights from a .yaml or text file
  /wall <x> <y>                 turn a cell into a wall
  /weight <x> <y> <w>           set the weight of a cell
  /diagonal on|off              toggle diagonal moves
  /closest on|off               toggle closest-cell fallback
  /heuristic <name>             manhattan, diagonal or auto
  /search <sx> <sy> <ex> <ey>   run A* and remember the path
  /follow                       advance one step along the last path
  /show                         print the grid and last path
  /quit                         leave the console"""


def new_state() -> Dict[str, Any]:
    """Return a fresh console state seeded from :data:`CONFIG`."""

    return {
        "running": True,
        "graph": None,
        "diagonal": CONFIG.search.diagonal,
        "closest": CONFIG.search.closest,
        "heuristic": CONFIG.search.heuristic,
        "path": [],
        "start": None,
        "end": None,
        "follower": None,
    }


def _forget_path(state: Dict[str, Any]) -> None:
    state["path"] = []
    state["start"] = None
    state["end"] = None
    state["follower"] = None


def _parse_flag(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("on", "true", "yes", "1"):
        return True
    if lowered in ("off", "false", "no", "0"):
        return False
    raise ValueError(f"expected on/off, got '{value}'")


def _require_graph(state: Dict[str, Any]) -> GridGraph:
    graph = state.get("graph")
    if graph is None:
        raise GridError("No grid loaded. Use /new or /load first.")
    return graph


def new_grid(state: Dict[str, Any], rows: str, cols: str) -> GridGraph:
    weights = [[1] * int(cols) for _ in range(int(rows))]
    graph = GridGraph(weights, diagonal=state["diagonal"])
    state["graph"] = graph
    _forget_path(state)
    logger.info("Created %sx%s grid.", graph.rows, graph.columns)
    return graph


def load(state: Dict[str, Any], path: str) -> GridGraph:
    weights, diagonal = load_grid(Path(path))
    if diagonal is not None:
        state["diagonal"] = diagonal
    graph = GridGraph(weights, diagonal=state["diagonal"])
    state["graph"] = graph
    _forget_path(state)
    logger.info("Loaded %sx%s grid from %s.", graph.rows, graph.columns, path)
    return graph


def set_weight(state: Dict[str, Any], x: str, y: str, weight: str) -> None:
    graph = _require_graph(state)
    graph.set_weight(int(x), int(y), float(weight))
    _forget_path(state)
    logger.info("Cell (%s, %s) weight set to %s.", x, y, weight)


def diagonal(state: Dict[str, Any], value: str) -> None:
    state["diagonal"] = _parse_flag(value)
    graph = state.get("graph")
    if graph is not None:
        graph.diagonal = state["diagonal"]
    logger.info("Diagonal moves %s.", "enabled" if state["diagonal"] else "disabled")


def closest(state: Dict[str, Any], value: str) -> None:
    state["closest"] = _parse_flag(value)
    logger.info("Closest fallback %s.", "enabled" if state["closest"] else "disabled")


def heuristic(state: Dict[str, Any], name: str) -> None:
    key = name.lower()
    if key == "auto":
        state["heuristic"] = None
        logger.info("Heuristic follows the diagonal setting.")
        return
    if key not in HEURISTICS:
        raise ValueError(f"Unknown heuristic '{name}'. Choose from: {', '.join(HEURISTICS)}, auto")
    state["heuristic"] = key
    logger.info("Heuristic set to %s.", key)


def run_search(state: Dict[str, Any], sx: str, sy: str, ex: str, ey: str) -> List[Any]:
    graph = _require_graph(state)
    start = (int(sx), int(sy))
    end = (int(ex), int(ey))
    path = search(
        graph,
        start,
        end,
        heuristic=state["heuristic"],
        closest=state["closest"],
    )
    state["path"] = path
    state["start"] = start
    state["end"] = end
    state["follower"] = PathFollower(path, origin=start)
    if path:
        logger.info(
            "Path of %s steps, cost %.3f, ends at %s.",
            len(path),
            path_cost(path, graph.cell(*start)),
            path[-1].pos,
        )
    else:
        logger.info("No path from %s to %s.", start, end)
    return path


def follow(state: Dict[str, Any]) -> None:
    follower = state.get("follower")
    if follower is None:
        logger.info("Nothing to follow. Use /search first.")
        return
    pos = follower.step()
    if pos is None:
        logger.info("Already at the end of the path (%s).", follower.current)
    else:
        logger.info("Moved to %s, %s steps left.", pos, len(follower.remaining))


def show(state: Dict[str, Any]) -> None:
    graph = _require_graph(state)
    print(render(graph, state["path"], state["start"], state["end"]))


def execute(command: str, args: list[str], state: Dict[str, Any]) -> Any:
    if "running" not in state:
        state.update(new_state())
    cmd_lower = command.lower()

    return_value: Any = None

    try:
        if cmd_lower == "help":
            print(HELP_TEXT)
        elif cmd_lower == "new" and len(args) >= 2:
            return_value = new_grid(state, args[0], args[1])
        elif cmd_lower == "load" and args:
            return_value = load(state, args[0])
        elif cmd_lower == "wall" and len(args) >= 2:
            set_weight(state, args[0], args[1], "0")
        elif cmd_lower == "weight" and len(args) >= 3:
            set_weight(state, args[0], args[1], args[2])
        elif cmd_lower == "diagonal" and args:
            diagonal(state, args[0])
        elif cmd_lower == "closest" and args:
            closest(state, args[0])
        elif cmd_lower == "heuristic" and args:
            heuristic(state, args[0])
        elif cmd_lower == "search" and len(args) >= 4:
            return_value = run_search(state, *args[:4])
        elif cmd_lower == "follow":
            follow(state)
        elif cmd_lower == "show":
            show(state)
        elif cmd_lower == "quit":
            state["running"] = False
            logger.info("Quit command received.")
        else:
            logger.error("Unknown command: /%s. Type /help for available commands.", command)
    except (GridError, ValueError, OSError) as exc:
        logger.error("/%s failed: %s", cmd_lower, exc)

    return return_value


__all__ = ["HELP_TEXT", "execute", "new_state"]
