from mazedash.grid import Grid, MazeInvariantError
from mazedash.mapgen.carve import carve_dfs
from mazedash.mapgen.repair import (
    carve_corridor, closest_visited, connect_to_exit, has_path_to_exit, manhattan
)
from mazedash.rng import PMRandom

def test_noop_when_exit_visited():
    g = Grid(6)
    carve_dfs(g, (3, 0), PMRandom(3))
    before = g.wall_bitmap()
    assert has_path_to_exit(g, (3, 5))
    assert connect_to_exit(g, (3, 5)) == []
    assert g.wall_bitmap() == before

def test_closest_visited_first_in_scan_order_on_ties():
    g = Grid(5)
    # both at distance 2 from (2,4), same row: lower x is scanned first
    g.cell(3, 3).visited = True
    g.cell(1, 3).visited = True
    assert closest_visited(g, (2, 4)) == (1, 3)
    g.cell(2, 2).visited = True  # also distance 2, earlier row
    assert closest_visited(g, (2, 4)) == (2, 2)

def test_closest_visited_none():
    assert closest_visited(Grid(3), (1, 2)) is None

def test_corridor_vertical_first():
    g = Grid(5)
    g.cell(0, 0).visited = True
    path = carve_corridor(g, (0, 0), (3, 4))
    assert path == [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4), (1, 4), (2, 4), (3, 4)]
    for x, y in path:
        assert g.cell(x, y).visited
    assert not g.cell(0, 0).south and not g.cell(0, 4).north
    assert not g.cell(2, 4).east and not g.cell(3, 4).west
    assert g.walls_consistent()

def test_corridor_upward_and_left():
    g = Grid(4)
    path = carve_corridor(g, (3, 3), (0, 0))
    assert path[:4] == [(3, 3), (3, 2), (3, 1), (3, 0)]
    assert path[-1] == (0, 0)
    assert len(path) == manhattan((3, 3), (0, 0)) + 1

def test_connect_repairs_unreached_exit():
    g = Grid(5)
    # Pretend only the top row was reached
    for x in range(5):
        g.cell(x, 0).visited = True
    path = connect_to_exit(g, (2, 4))
    assert path[0] == (2, 0) and path[-1] == (2, 4)
    assert has_path_to_exit(g, (2, 4))

def test_connect_without_any_visited_is_defect():
    try:
        connect_to_exit(Grid(3), (1, 2))
    except MazeInvariantError:
        pass
    else:
        raise AssertionError("repair invented a start cell")
