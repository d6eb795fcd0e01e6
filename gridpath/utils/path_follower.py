"""Step along a search result one cell at a time."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.grid_graph import Cell, Coord


class PathFollower:
    """Hand out the positions of a path in order.

    The caller decides how often to call :meth:`step`; nothing here knows
    about frames or durations.
    """

    def __init__(self, path: Sequence[Cell], origin: Optional[Coord] = None) -> None:
        self._positions: List[Coord] = [cell.pos for cell in path]
        self._index = 0
        self.current: Optional[Coord] = origin

    @property
    def done(self) -> bool:
        return self._index >= len(self._positions)

    @property
    def remaining(self) -> List[Coord]:
        return self._positions[self._index:]

    def step(self) -> Optional[Coord]:
        """Advance one cell and return the new position, ``None`` when finished."""

        if self.done:
            return None
        self.current = self._positions[self._index]
        self._index += 1
        return self.current


__all__ = ["PathFollower"]
