import pytest

from algolab.maze import (
    MOVE_TICK,
    Pos,
    TileType,
    Walker,
    astar_path,
    bfs_path,
    can_go,
    right_hand_path,
)


def make_grid(*rows):
    return [[TileType.WALL if c == "#" else TileType.EMPTY for c in row] for row in rows]


RING = make_grid(
    "#####",
    "#...#",
    "#.#.#",
    "#...#",
    "#####",
)

CORRIDOR = make_grid(
    "#####",
    "#...#",
    "#####",
)

DEAD_END = make_grid(
    "#######",
    "#.....#",
    "#.###.#",
    "#.#...#",
    "#.#.###",
    "#.#...#",
    "#######",
)

CLOSED = make_grid(
    "#####",
    "#.#.#",
    "#####",
)


def assert_valid_path(grid, path, start, dest):
    assert path[0] == start
    assert path[-1] == dest
    for cell in path:
        assert can_go(grid, cell)
    for a, b in zip(path, path[1:]):
        assert abs(a.y - b.y) + abs(a.x - b.x) == 1


def test_pos_add():
    assert Pos(1, 2) + Pos(3, 4) == Pos(4, 6)


def test_pos_orders_by_row_then_column():
    assert Pos(0, 5) < Pos(1, 0)
    assert Pos(2, 1) < Pos(2, 3)


def test_can_go():
    assert can_go(RING, Pos(1, 1))
    assert not can_go(RING, Pos(0, 0))
    assert not can_go(RING, Pos(-1, 1))
    assert not can_go(RING, Pos(1, 9))


def test_right_hand_corridor():
    path = right_hand_path(CORRIDOR, Pos(1, 1), Pos(1, 3))
    assert path == [Pos(1, 1), Pos(1, 2), Pos(1, 3)]


def test_right_hand_matches_bfs_in_corridor():
    start, dest = Pos(1, 1), Pos(1, 3)
    assert right_hand_path(CORRIDOR, start, dest) == bfs_path(CORRIDOR, start, dest)


def test_right_hand_ring_is_valid():
    path = right_hand_path(RING, Pos(1, 1), Pos(3, 3))
    assert_valid_path(RING, path, Pos(1, 1), Pos(3, 3))


def test_right_hand_drops_dead_ends():
    start, dest = Pos(1, 1), Pos(5, 5)
    path = right_hand_path(DEAD_END, start, dest)
    assert_valid_path(DEAD_END, path, start, dest)
    assert len(set(path)) == len(path)


def test_right_hand_start_is_dest():
    assert right_hand_path(RING, Pos(1, 1), Pos(1, 1)) == [Pos(1, 1)]


def test_right_hand_no_path():
    with pytest.raises(ValueError):
        right_hand_path(CLOSED, Pos(1, 1), Pos(1, 3))


@pytest.mark.parametrize("finder", [bfs_path, astar_path])
def test_shortest_on_ring(finder):
    path = finder(RING, Pos(1, 1), Pos(3, 3))
    assert_valid_path(RING, path, Pos(1, 1), Pos(3, 3))
    assert len(path) == 5


@pytest.mark.parametrize("finder", [bfs_path, astar_path])
def test_shortest_through_maze(finder):
    start, dest = Pos(1, 1), Pos(5, 5)
    path = finder(DEAD_END, start, dest)
    assert_valid_path(DEAD_END, path, start, dest)
    assert len(path) == len(bfs_path(DEAD_END, start, dest))


def test_astar_and_bfs_agree_on_length():
    start, dest = Pos(1, 1), Pos(5, 5)
    assert len(astar_path(DEAD_END, start, dest)) == len(bfs_path(DEAD_END, start, dest))


@pytest.mark.parametrize("finder", [bfs_path, astar_path])
def test_no_path(finder):
    with pytest.raises(ValueError):
        finder(CLOSED, Pos(1, 1), Pos(1, 3))


@pytest.mark.parametrize("finder", [bfs_path, astar_path])
def test_start_is_dest(finder):
    assert finder(RING, Pos(1, 1), Pos(1, 1)) == [Pos(1, 1)]


def test_walker_waits_for_move_tick():
    path = [Pos(1, 1), Pos(1, 2), Pos(1, 3)]
    walker = Walker(path)
    walker.update(MOVE_TICK - 1)
    assert walker.pos == Pos(1, 1)
    walker.update(1)
    assert walker.pos == Pos(1, 1)
    walker.update(MOVE_TICK)
    assert walker.pos == Pos(1, 2)


def test_walker_finishes_at_end():
    path = [Pos(1, 1), Pos(1, 2), Pos(1, 3)]
    walker = Walker(path)
    for _ in range(len(path)):
        assert not walker.finished()
        walker.update(MOVE_TICK)
    assert walker.finished()
    assert walker.pos == path[-1]
    walker.update(MOVE_TICK)
    assert walker.pos == path[-1]


def test_walker_rejects_empty_path():
    with pytest.raises(ValueError):
        Walker([])