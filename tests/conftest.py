import heapq
import math

import pytest


def _cheapest_cost(graph, start, end):
    """Exhaustive cheapest cost from ``start`` to ``end`` or ``None``."""

    source = graph.cell(*start)
    target = graph.cell(*end)
    best = {source.pos: 0.0}
    queue = [(0.0, source.pos)]
    while queue:
        cost, pos = heapq.heappop(queue)
        if pos == target.pos:
            return cost
        if cost > best[pos]:
            continue
        cell = graph.cell(*pos)
        for n in graph.neighbors(cell):
            if n.is_wall():
                continue
            alt = cost + n.get_cost(cell)
            if alt < best.get(n.pos, math.inf):
                best[n.pos] = alt
                heapq.heappush(queue, (alt, n.pos))
    return None


@pytest.fixture
def dijkstra_cost():
    return _cheapest_cost
