import random
from collections import deque

import numpy as np

from mazes import Grid, parse_maze, reconstruct, solve, trace


def reference_distance(level):
    """Shortest path length in cells (both ends included) or None if unreachable."""
    h, w = len(level), len(level[0])
    if level[0][0] or level[h-1][w-1]:
        return None
    distance = {(0, 0): 1}
    q = deque([(0, 0)])
    while q:
        y, x = q.popleft()
        for dy, dx in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            c = (y + dy, x + dx)
            if 0 <= c[0] < h and 0 <= c[1] < w and not level[c[0]][c[1]] and c not in distance:
                distance[c] = distance[(y, x)] + 1
                q.append(c)
    return distance.get((h-1, w-1))


def test_two_by_two():
    grid = parse_maze("00\n00")
    result = solve(grid)
    assert result.reachable
    assert reconstruct(grid) == 3


def test_single_cell():
    grid = parse_maze("0")
    assert solve(grid)
    assert reconstruct(grid) == 1


def test_single_wall_cell():
    grid = parse_maze("1")
    assert not solve(grid)


def test_goal_is_a_wall():
    grid = parse_maze("0\n1")
    result = solve(grid)
    assert not result.reachable
    assert result.enqueued == 0
    assert not grid.visited.any()


def test_entry_is_a_wall():
    grid = parse_maze("10\n00")
    result = solve(grid)
    assert not result
    assert not grid.visited.any()
    assert (grid.parents == -1).all()


def test_solid_wall_row():
    grid = parse_maze("000\n000\n111\n000")
    result = solve(grid)
    assert not result.reachable
    assert result.enqueued == 6
    assert not grid.visited[grid.goal]


def test_winding_corridor():
    grid = parse_maze("0000\n1110\n0000\n0111\n0000")
    assert solve(grid)
    assert reconstruct(grid) == 14


def test_neighbour_order_decides_between_equal_paths():
    grid = parse_maze("000\n000\n000")
    assert solve(grid)
    assert trace(grid) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_stops_at_the_goal():
    grid = parse_maze("00000\n00000")
    result = solve(grid)
    assert result.reachable
    assert result.expanded <= result.enqueued <= grid.size


def test_large_open_maze():
    grid = Grid(200, 200)
    assert solve(grid)
    assert reconstruct(grid) == 399


def test_matches_reference_distances():
    rng = random.Random(1234)
    for _ in range(300):
        h, w = rng.randint(1, 7), rng.randint(1, 7)
        level = [[int(rng.random() < 0.3) for _ in range(w)] for _ in range(h)]
        grid = Grid.from_level(level)
        result = solve(grid)
        expected = reference_distance(level)
        assert result.reachable == (expected is not None)
        assert result.enqueued <= grid.size
        assert int(np.count_nonzero(grid.visited)) == result.enqueued
        if expected is not None:
            assert reconstruct(grid) == expected


def test_parent_links_form_a_tree_rooted_at_the_entry():
    rng = random.Random(42)
    level = [[int(rng.random() < 0.25) for _ in range(12)] for _ in range(12)]
    level[0][0] = level[11][11] = 0
    grid = Grid.from_level(level)
    solve(grid)
    for index in np.flatnonzero(grid.visited):
        steps = 0
        while grid.parent(index) is not None:
            parent = grid.parent(index)
            assert grid.visited[parent]
            assert int(index) in grid.neighbours(parent)
            index = parent
            steps += 1
            assert steps <= grid.size
        assert index == grid.entry


def test_fresh_grids_give_the_same_answer():
    text = "0010\n1000\n0011\n1000"
    lengths = set()
    for _ in range(3):
        grid = parse_maze(text)
        assert solve(grid)
        lengths.add(reconstruct(grid))
    assert lengths == {7}
