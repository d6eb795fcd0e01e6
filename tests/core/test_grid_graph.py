import math

import pytest

from gridpath.core.grid_graph import (
    CellOutOfBoundsError,
    GridError,
    GridGraph,
    MalformedGridError,
)


def _positions(cells):
    return [c.pos for c in cells]


def test_build_keeps_row_column_indexing():
    graph = GridGraph([[1, 2, 3], [4, 5, 0]])
    assert (graph.rows, graph.columns) == (2, 3)
    cell = graph.cell(1, 2)
    assert (cell.x, cell.y, cell.weight) == (1, 2, 0)
    assert cell.is_wall()
    assert not graph[0, 0].is_wall()
    assert (cell.g, cell.h, cell.f, cell.visited, cell.closed, cell.parent) == (
        0, 0, 0, False, False, None,
    )


@pytest.mark.parametrize(
    "weights",
    [
        [],
        [[]],
        [[1, 1], [1]],
        [[1, -1]],
        [[1, "a"]],
        [[True, 1]],
        [[float("nan")]],
        "11",
        [5],
    ],
)
def test_malformed_grids_rejected(weights):
    with pytest.raises(MalformedGridError):
        GridGraph(weights)


def test_ragged_error_names_row():
    with pytest.raises(ValueError, match="row 2"):
        GridGraph([[1, 1], [1, 1], [1]])


def test_out_of_bounds_access_fails_fast():
    graph = GridGraph([[1, 1], [1, 1]])
    for pos in [(2, 0), (0, 2), (-1, 0)]:
        with pytest.raises(CellOutOfBoundsError):
            graph.cell(*pos)
    with pytest.raises(IndexError):
        graph[5, 5]
    assert issubclass(CellOutOfBoundsError, GridError)


def test_neighbors_orthogonal_order():
    graph = GridGraph([[1] * 3 for _ in range(3)])
    assert _positions(graph.neighbors(graph.cell(1, 1))) == [
        (0, 1), (2, 1), (1, 0), (1, 2),
    ]
    assert _positions(graph.neighbors(graph.cell(0, 0))) == [(1, 0), (0, 1)]


def test_neighbors_diagonal_order():
    graph = GridGraph([[1] * 3 for _ in range(3)], diagonal=True)
    assert _positions(graph.neighbors(graph.cell(1, 1))) == [
        (0, 1), (2, 1), (1, 0), (1, 2),
        (0, 0), (2, 0), (0, 2), (2, 2),
    ]
    assert len(graph.neighbors(graph.cell(2, 2))) == 3


def test_neighbors_include_walls():
    graph = GridGraph([[1, 0], [1, 1]])
    assert (0, 1) in _positions(graph.neighbors(graph.cell(0, 0)))


def test_get_cost_orthogonal_and_diagonal():
    graph = GridGraph([[1, 1], [1, 3]], diagonal=True)
    target = graph.cell(1, 1)
    assert target.get_cost(graph.cell(0, 1)) == 3
    assert target.get_cost(graph.cell(0, 0)) == pytest.approx(3 * math.sqrt(2))
    assert target.get_cost() == 3


def test_mark_dirty_is_unique_and_clean_resets():
    graph = GridGraph([[1, 1], [1, 1]])
    cell = graph.cell(0, 1)
    cell.g, cell.h, cell.f = 2.0, 3.0, 5.0
    cell.visited = cell.closed = True
    cell.parent = graph.cell(0, 0)
    graph.mark_dirty(cell)
    graph.mark_dirty(cell)
    assert graph.dirty == (cell,)

    graph.clean_dirty()
    assert graph.dirty == ()
    assert (cell.g, cell.h, cell.f, cell.visited, cell.closed, cell.parent) == (
        0, 0, 0, False, False, None,
    )


def test_reset_cleans_untracked_cells():
    graph = GridGraph([[1, 1]])
    graph.cell(0, 0).visited = True
    graph.reset()
    assert not graph.cell(0, 0).visited


def test_set_weight_validates_and_marks_dirty():
    graph = GridGraph([[1, 1]])
    graph.set_weight(0, 1, 0)
    assert graph.cell(0, 1).is_wall()
    assert graph.cell(0, 1) in graph.dirty
    with pytest.raises(MalformedGridError):
        graph.set_weight(0, 0, -2)
    with pytest.raises(CellOutOfBoundsError):
        graph.set_weight(3, 3, 1)


def test_owns_and_str():
    graph = GridGraph([[1, 0], [2.5, 1]])
    other = GridGraph([[1, 0], [2.5, 1]])
    assert graph.owns(graph.cell(1, 0))
    assert not graph.owns(other.cell(1, 0))
    assert str(graph) == "1 0\n2.5 1"
    assert repr(graph.cell(1, 0)) == "Cell[1 0]"
    assert graph.weights == [[1, 0], [2.5, 1]]
    assert len(list(graph.cells())) == 4
