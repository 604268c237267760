import math
from mazedash.config import MazeConfig
from mazedash.grid import Grid
from mazedash.mapgen.generator import generate_maze
from mazedash.mapgen.loops import LoopReport
from mazedash.mapgen.repair import manhattan
from mazedash.maze import Maze
from mazedash.query import MazeQuery
from mazedash.rng import PMRandom

def query(size=10, seed=5, **kw):
    return MazeQuery(generate_maze(MazeConfig(size=size, seed=seed, **kw)))

def hand_maze(size, visited, **kw):
    """A Maze whose visited flags are set by hand (for partial-coverage cases)."""
    cfg = MazeConfig(size=size, **kw)
    g = Grid(size)
    for xy in visited:
        g.cell(*xy).visited = True
    return Maze(config=cfg, grid=g, entrance=(size // 2, 0), exit=(size // 2, size - 1),
                seed=cfg.seed, loops=LoopReport(0, 0, 0), stream_state=1)

def test_walkable_matches_visited_at_centres():
    m = hand_maze(6, [(0, 0), (3, 0), (3, 1), (5, 5)])
    q = MazeQuery(m)
    for c in m.grid:
        p = q.cell_center(c.x, c.y)
        assert q.is_walkable(p.x, p.y, p.z) == c.visited

def test_built_maze_fully_walkable():
    q = query(12, 3)
    for c in q.maze.grid:
        p = q.cell_center(c.x, c.y)
        assert q.is_walkable(p.x, p.y, p.z)

def test_platform_space_always_walkable():
    q = MazeQuery(hand_maze(4, []))
    extent = q.coords.extent
    for z in (-0.01, -5, -1000, extent, extent + 3.5):
        for x in (-50, 0, 7, 10_000):
            assert q.is_walkable(x, 0, z)

def test_out_of_bounds_and_garbage_not_walkable():
    q = query(5, 1, path_width=4)
    for x in (-0.01, -8, 20, 20.5, 999):
        assert not q.is_walkable(x, 1, 6)
    for bad in (math.nan, math.inf, -math.inf):
        assert not q.is_walkable(bad, 1, 6)
        assert not q.is_walkable(6, 1, bad)
    assert not q.is_walkable_cell(-1, 0)
    assert not q.is_walkable_cell(0, 5)

def test_height_is_ignored():
    q = query(5, 1)
    p = q.cell_center(2, 2)
    assert q.is_walkable(p.x, -100, p.z) == q.is_walkable(p.x, 100, p.z)

def test_all_walkable_cells_row_major_and_fresh():
    m = hand_maze(4, [(3, 0), (1, 2), (0, 1), (2, 0)])
    q = MazeQuery(m)
    assert q.all_walkable_cells() == [(2, 0), (3, 0), (0, 1), (1, 2)]
    lst = q.all_walkable_cells()
    lst.clear()
    assert len(q.all_walkable_cells()) == 4
    assert len(query(7, 2).all_walkable_cells()) == 49

def test_maze_layout():
    m = hand_maze(3, [(1, 0), (2, 2)])
    assert MazeQuery(m).maze_layout() == [
        [False, True, False],
        [False, False, False],
        [False, False, True],
    ]

def test_random_position_respects_radius():
    q = query(15, 9)
    for r in (0, 1, 3, 6):
        for _ in range(200):
            xy = q.random_walkable_cell(r)
            assert manhattan(xy, q.maze.entrance) > r
            assert manhattan(xy, q.maze.exit) > r

def test_random_position_is_a_cell_center():
    q = query(8, 4)
    centres = {q.cell_center(x, z) for x, z in q.all_walkable_cells()}
    for _ in range(50):
        p = q.random_walkable_position(2)
        assert p in centres
        assert q.is_walkable(p.x, p.y, p.z)
        assert p.y == q.coords.anchor_height + 1

def test_falls_back_when_radius_excludes_everything():
    q = query(4, 2)
    assert q.eligible_cells(100) == []
    p = q.random_walkable_position(100)
    assert p is not None and q.is_walkable(p.x, p.y, p.z)

def test_none_only_when_nothing_walkable():
    q = MazeQuery(hand_maze(4, []))
    assert q.random_walkable_position(0) is None
    assert q.random_walkable_cell(3) is None

def test_sampling_reproducible_and_continues_build_stream():
    a, b = query(10, 77), query(10, 77)
    assert [a.random_walkable_cell(2) for _ in range(30)] == [b.random_walkable_cell(2) for _ in range(30)]
    q = query(10, 77)
    rng = PMRandom(q.maze.stream_state)
    cells = q.eligible_cells(2)
    assert q.random_walkable_cell(2) == cells[rng.below(len(cells))]

def test_explicit_rng_leaves_default_stream_alone():
    q = query(10, 8)
    before = q.rng.state
    q.random_walkable_position(2, PMRandom(1))
    assert q.rng.state == before

def test_anchor_delegates():
    q = query(10, 8)
    assert q.entrance_anchor() == q.coords.entrance_anchor()
    assert q.exit_anchor().z == q.coords.extent + q.maze.config.platform_depth / 2
