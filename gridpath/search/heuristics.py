"""Distance estimates used to guide the A* search."""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Tuple, Union


Heuristic = Callable[[Any, Any], float]

_DIAGONAL_DISCOUNT = math.sqrt(2) - 2


def _xy(point: Any) -> Tuple[float, float]:
    if isinstance(point, tuple):
        return point[0], point[1]
    return point.x, point.y


def manhattan(a: Any, b: Any) -> float:
    """Return ``|dx| + |dy|``.

    Admissible when only orthogonal moves are allowed.
    """

    ax, ay = _xy(a)
    bx, by = _xy(b)
    return abs(ax - bx) + abs(ay - by)


def diagonal(a: Any, b: Any) -> float:
    """Return the octile distance between ``a`` and ``b``.

    Straight steps cost 1 and diagonal steps cost ``sqrt(2)``, which makes
    this admissible for 8-way movement over unit weights.
    """

    ax, ay = _xy(a)
    bx, by = _xy(b)
    d1 = abs(ax - bx)
    d2 = abs(ay - by)
    return (d1 + d2) + _DIAGONAL_DISCOUNT * min(d1, d2)


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "diagonal": diagonal,
}


def resolve_heuristic(heuristic: Union[str, Heuristic]) -> Heuristic:
    """Return a heuristic callable from a registered name or a callable."""

    if callable(heuristic):
        return heuristic
    try:
        return HEURISTICS[str(heuristic).lower()]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic '{heuristic}'. Choose from: {', '.join(HEURISTICS)}"
        ) from None


__all__ = ["HEURISTICS", "Heuristic", "diagonal", "manhattan", "resolve_heuristic"]
