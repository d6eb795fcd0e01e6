"""A* search over a :class:`~gridpath.core.grid_graph.GridGraph`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..core.binary_heap import BinaryHeap
from ..core.grid_graph import Cell, GridError, GridGraph
from .heuristics import Heuristic, diagonal, manhattan, resolve_heuristic


logger = logging.getLogger(__name__)

CellRef = Union[Cell, Tuple[int, int]]


@dataclass
class SearchStats:
    """Counters describing one search run."""

    expanded: int = 0
    opened: int = 0
    found: bool = False
    closest_used: bool = False


def _resolve_cell(graph: GridGraph, ref: CellRef) -> Cell:
    if isinstance(ref, Cell):
        if not graph.owns(ref):
            raise GridError(f"{ref!r} does not belong to this graph")
        return ref
    x, y = ref
    return graph.cell(x, y)


def path_to(cell: Cell) -> List[Cell]:
    """Walk parent links back from ``cell``; the root cell is excluded."""

    path: List[Cell] = []
    current = cell
    while current.parent is not None:
        path.append(current)
        current = current.parent
    path.reverse()
    return path


def path_cost(path: Sequence[Cell], start: Cell) -> float:
    """Return the summed entry cost of walking ``path`` from ``start``."""

    total = 0.0
    previous = start
    for cell in path:
        total += cell.get_cost(previous)
        previous = cell
    return total


def search(
    graph: GridGraph,
    start: CellRef,
    end: CellRef,
    *,
    heuristic: Union[str, Heuristic, None] = None,
    closest: bool = False,
    stats: Optional[SearchStats] = None,
) -> List[Cell]:
    """Return the cheapest path from ``start`` to ``end``.

    The returned list excludes ``start`` and ends with ``end``. It is empty
    when ``end`` cannot be reached, unless ``closest`` is set, in which case
    the path leads to the reachable cell nearest to ``end`` by heuristic
    (ties go to the cheaper cell).

    ``heuristic`` may be a name from
    :data:`~gridpath.search.heuristics.HEURISTICS` or a callable taking two
    cells. ``None`` picks ``diagonal`` for diagonal graphs and ``manhattan``
    otherwise.

    Cells with equal ``f`` come off the heap in an order that depends on the
    heap layout, so among equally cheap paths the one returned is not fixed.
    """

    if heuristic is None:
        h_fn: Heuristic = diagonal if graph.diagonal else manhattan
    else:
        h_fn = resolve_heuristic(heuristic)
    if stats is None:
        stats = SearchStats()

    start_cell = _resolve_cell(graph, start)
    end_cell = _resolve_cell(graph, end)

    graph.clean_dirty()

    open_heap: BinaryHeap[Cell] = BinaryHeap(lambda cell: cell.f)
    closest_cell = start_cell

    start_cell.h = h_fn(start_cell, end_cell)
    start_cell.f = start_cell.h
    start_cell.visited = True
    graph.mark_dirty(start_cell)
    open_heap.push(start_cell)
    stats.opened += 1

    while open_heap:
        current = open_heap.pop()

        if current is end_cell:
            stats.found = True
            path = path_to(current)
            logger.debug(
                "[Search] %r -> %r: %s steps, %s expanded",
                start_cell, end_cell, len(path), stats.expanded,
            )
            return path

        current.closed = True
        stats.expanded += 1

        for neighbor in graph.neighbors(current):
            if neighbor.closed or neighbor.is_wall():
                continue

            g_score = current.g + neighbor.get_cost(current)
            been_visited = neighbor.visited

            if not been_visited or g_score < neighbor.g:
                neighbor.visited = True
                neighbor.parent = current
                if not been_visited:
                    neighbor.h = h_fn(neighbor, end_cell)
                neighbor.g = g_score
                neighbor.f = neighbor.g + neighbor.h
                graph.mark_dirty(neighbor)

                if closest and (
                    neighbor.h < closest_cell.h
                    or (neighbor.h == closest_cell.h and neighbor.g < closest_cell.g)
                ):
                    closest_cell = neighbor

                if not been_visited:
                    open_heap.push(neighbor)
                    stats.opened += 1
                else:
                    open_heap.rescore(neighbor)

    if closest:
        stats.closest_used = True
        path = path_to(closest_cell)
        logger.info(
            "[Search] %r unreachable from %r, falling back to closest cell %r",
            end_cell, start_cell, closest_cell,
        )
        return path

    logger.info("[Search] No path from %r to %r", start_cell, end_cell)
    return []


__all__ = ["SearchStats", "path_cost", "path_to", "search"]
