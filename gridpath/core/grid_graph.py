"""Weighted grid graph with dirty tracking for repeated searches."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, List, Optional, Sequence, Set, Tuple


logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

SQRT2 = math.sqrt(2)


class GridError(Exception):
    """Base class for grid related failures."""


class MalformedGridError(GridError, ValueError):
    """Raised when a weight matrix cannot be turned into a graph."""


class CellOutOfBoundsError(GridError, IndexError):
    """Raised when coordinates fall outside the grid."""


@dataclass(slots=True, eq=False)
class Cell:
    """One grid position plus the transient state of the current search."""

    x: int
    y: int
    weight: float
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    visited: bool = False
    closed: bool = False
    parent: Optional["Cell"] = None

    @property
    def pos(self) -> Coord:
        return (self.x, self.y)

    def is_wall(self) -> bool:
        return self.weight == 0

    def get_cost(self, from_neighbor: Optional["Cell"] = None) -> float:
        """Return the cost of entering this cell from ``from_neighbor``."""

        if (
            from_neighbor is not None
            and from_neighbor.x != self.x
            and from_neighbor.y != self.y
        ):
            return self.weight * SQRT2
        return self.weight

    def clean(self) -> None:
        """Reset search state to its zeroed defaults."""

        self.g = 0.0
        self.h = 0.0
        self.f = 0.0
        self.visited = False
        self.closed = False
        self.parent = None

    def __repr__(self) -> str:
        return f"Cell[{self.x} {self.y}]"


def _check_weight(weight: object, x: int, y: int) -> float:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise MalformedGridError(
            f"weight at ({x}, {y}) must be a number, got {weight!r}"
        )
    value = float(weight)
    if not math.isfinite(value) or value < 0:
        raise MalformedGridError(
            f"weight at ({x}, {y}) must be a finite non-negative number, got {weight!r}"
        )
    return value


class GridGraph:
    """Own a rectangular matrix of :class:`Cell` objects.

    ``weights[x][y]`` becomes the cell at ``(x, y)``: the first index is
    the row, the second the column. A weight of ``0`` marks a wall.
    """

    def __init__(self, weights: Sequence[Sequence[float]], diagonal: bool = False) -> None:
        self.diagonal = bool(diagonal)
        self._grid: List[List[Cell]] = []
        self._dirty: List[Cell] = []
        self._dirty_set: Set[Cell] = set()
        self._build(weights)
        logger.debug(
            "[Graph] Built %sx%s grid (diagonal=%s)", self.rows, self.columns, self.diagonal
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def _build(self, weights: Sequence[Sequence[float]]) -> None:
        if isinstance(weights, (str, bytes)) or not isinstance(weights, Sequence):
            raise MalformedGridError("weights must be a sequence of rows")
        if len(weights) == 0:
            raise MalformedGridError("weights must contain at least one row")

        width: Optional[int] = None
        for x, row in enumerate(weights):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise MalformedGridError(f"row {x} is not a sequence of weights")
            if width is None:
                width = len(row)
                if width == 0:
                    raise MalformedGridError("rows must contain at least one weight")
            elif len(row) != width:
                raise MalformedGridError(
                    f"row {x} has {len(row)} columns, expected {width}"
                )
            self._grid.append(
                [Cell(x, y, _check_weight(w, x, y)) for y, w in enumerate(row)]
            )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return len(self._grid)

    @property
    def columns(self) -> int:
        return len(self._grid[0])

    @property
    def dirty(self) -> Tuple[Cell, ...]:
        return tuple(self._dirty)

    @property
    def weights(self) -> List[List[float]]:
        return [[cell.weight for cell in row] for row in self._grid]

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""

        for row in self._grid:
            yield from row

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.columns

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)`` or raise :class:`CellOutOfBoundsError`."""

        if not self.in_bounds(x, y):
            raise CellOutOfBoundsError(
                f"({x}, {y}) is outside the {self.rows}x{self.columns} grid"
            )
        return self._grid[x][y]

    def __getitem__(self, pos: Coord) -> Cell:
        x, y = pos
        return self.cell(x, y)

    def owns(self, cell: Cell) -> bool:
        return self.in_bounds(cell.x, cell.y) and self._grid[cell.x][cell.y] is cell

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------
    def neighbors(self, cell: Cell) -> List[Cell]:
        """Return adjacent cells: W, E, S, N then SW, SE, NW, NE if diagonal."""

        x, y = cell.x, cell.y
        offsets = [(-1, 0), (1, 0), (0, -1), (0, 1)]
        if self.diagonal:
            offsets += [(-1, -1), (1, -1), (-1, 1), (1, 1)]

        out: List[Cell] = []
        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                out.append(self._grid[nx][ny])
        return out

    # ------------------------------------------------------------------
    # Search state bookkeeping
    # ------------------------------------------------------------------
    def mark_dirty(self, cell: Cell) -> None:
        """Record that ``cell`` carries search state to reset later."""

        if cell not in self._dirty_set:
            self._dirty_set.add(cell)
            self._dirty.append(cell)

    def clean_dirty(self) -> None:
        """Reset every dirty cell and empty the dirty list."""

        for cell in self._dirty:
            cell.clean()
        self._dirty = []
        self._dirty_set.clear()

    def reset(self) -> None:
        """Reset the search state of every cell, dirty or not."""

        for cell in self.cells():
            cell.clean()
        self._dirty = []
        self._dirty_set.clear()

    def set_weight(self, x: int, y: int, weight: float) -> None:
        """Change the weight of the cell at ``(x, y)`` in place."""

        cell = self.cell(x, y)
        cell.weight = _check_weight(weight, x, y)
        self.mark_dirty(cell)

    def __str__(self) -> str:
        return "\n".join(
            " ".join(f"{cell.weight:g}" for cell in row) for row in self._grid
        )


__all__ = [
    "Cell",
    "CellOutOfBoundsError",
    "Coord",
    "GridError",
    "GridGraph",
    "MalformedGridError",
]
