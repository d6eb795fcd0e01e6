from gridpath.core.grid_graph import GridGraph
from gridpath.search.astar import search
from gridpath.utils.path_follower import PathFollower


def test_follower_steps_one_cell_at_a_time():
    graph = GridGraph([[1, 1, 1, 1]])
    follower = PathFollower(search(graph, (0, 0), (0, 3)), origin=(0, 0))
    assert follower.current == (0, 0)
    assert follower.remaining == [(0, 1), (0, 2), (0, 3)]
    assert follower.step() == (0, 1)
    assert follower.step() == (0, 2)
    assert not follower.done
    assert follower.step() == (0, 3)
    assert follower.done
    assert follower.step() is None
    assert follower.current == (0, 3)


def test_follower_on_empty_path():
    follower = PathFollower([])
    assert follower.done
    assert follower.step() is None
    assert follower.current is None
