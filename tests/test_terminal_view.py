from gridpath.core.grid_graph import GridGraph
from gridpath.search.astar import search
from gridpath.utils.terminal_view import render


def test_render_weights():
    graph = GridGraph([[1, 0, 3], [12, 1.5, 1]])
    assert render(graph) == ".#3\n~~."


def test_render_path_with_endpoints():
    graph = GridGraph([[1, 1, 1], [0, 0, 1], [1, 1, 1]])
    path = search(graph, (0, 0), (2, 0))
    assert render(graph, path, (0, 0), (2, 0)) == "S**\n##*\nE**"
