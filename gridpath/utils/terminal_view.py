"""ASCII rendering of a grid graph and a path across it."""

from __future__ import annotations

from typing import Iterable, Optional

from ..core.grid_graph import Cell, Coord, GridGraph


WALL = "#"
FLOOR = "."
HEAVY = "~"
PATH = "*"
START = "S"
END = "E"


def _weight_glyph(cell: Cell) -> str:
    if cell.is_wall():
        return WALL
    if cell.weight == 1:
        return FLOOR
    if cell.weight == int(cell.weight) and cell.weight < 10:
        return str(int(cell.weight))
    return HEAVY


def render(
    graph: GridGraph,
    path: Iterable[Cell] = (),
    start: Optional[Coord] = None,
    end: Optional[Coord] = None,
) -> str:
    """Return ``graph`` as text, one line per row.

    Path cells are drawn as ``*`` and the optional ``start``/``end``
    coordinates as ``S``/``E``.
    """

    on_path = {cell.pos for cell in path}
    lines: list[str] = []
    for x in range(graph.rows):
        row: list[str] = []
        for y in range(graph.columns):
            pos = (x, y)
            if pos == start:
                row.append(START)
            elif pos == end:
                row.append(END)
            elif pos in on_path:
                row.append(PATH)
            else:
                row.append(_weight_glyph(graph.cell(x, y)))
        lines.append("".join(row))
    return "\n".join(lines)


__all__ = ["render"]
