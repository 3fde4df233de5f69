import random
from collections import deque

import pytest

from maze_game.generator import MazeGenerator, generate
from maze_game.grid import DIRECTIONS, Grid, opposite, step


def _reachable(grid, start):
    """BFS over open passages; returns every cell reached from start."""
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for n in grid.open_neighbors(x, y):
            if n not in seen:
                seen.add(n)
                queue.append(n)
    return seen


def _snapshot(grid):
    return [[(sorted(c.passages), c.visited, c.parent) for c in row] for row in grid.cells]


class RecordingRandom(random.Random):
    def __init__(self, seed):
        super().__init__(seed)
        self.budget_calls = []

    def randint(self, a, b):
        self.budget_calls.append((a, b))
        return super().randint(a, b)


@pytest.mark.parametrize("width,height,seed", [
    (10, 10, 0), (10, 10, 1), (25, 25, 2), (1, 7, 3), (7, 1, 4), (3, 17, 5), (40, 16, 6),
])
def test_generates_spanning_tree(width, height, seed):
    grid = Grid(width, height)
    generate(grid, rng=random.Random(seed))

    assert grid.passage_count() == width * height - 1
    for start in [(0, 0), (width - 1, height - 1), (width // 2, height // 2)]:
        assert len(_reachable(grid, start)) == width * height
    assert all(cell.visited for _, cell in grid)


def test_wall_symmetry():
    grid = Grid(12, 9)
    generate(grid, rng=random.Random(42))

    for (x, y), cell in grid:
        for direction in DIRECTIONS:
            nx, ny = step(x, y, direction)
            if grid.in_bounds(nx, ny):
                assert cell.is_open(direction) == grid.cell(nx, ny).is_open(opposite(direction))
            else:
                assert not cell.is_open(direction)


def test_parent_pointers_form_tree_rooted_at_origin():
    grid = Grid(8, 8)
    generate(grid, rng=random.Random(7))

    assert grid.cell(0, 0).parent is None
    for (x, y), cell in grid:
        if (x, y) == (0, 0):
            continue
        px, py = cell.parent
        # every parent link is a carved passage
        assert (x, y) in grid.open_neighbors(px, py)


def test_custom_origin():
    grid = Grid(6, 5)
    generate(grid, origin=(3, 2), rng=random.Random(11))

    assert grid.cell(3, 2).parent is None
    assert grid.cell(0, 0).parent is not None
    assert grid.passage_count() == 29


def test_origin_out_of_bounds():
    with pytest.raises(ValueError):
        generate(Grid(3, 3), origin=(3, 0), rng=random.Random(0))


@pytest.mark.parametrize("divisor", [0, -2, 1.5, True])
def test_rejects_bad_divisor(divisor):
    with pytest.raises(ValueError):
        MazeGenerator(random.Random(0), reshuffle_divisor=divisor)


def test_deterministic_under_fixed_seed():
    first, second = Grid(15, 15), Grid(15, 15)
    generate(first, rng=random.Random(1234))
    generate(second, rng=random.Random(1234))

    assert _snapshot(first) == _snapshot(second)


def test_regenerating_resets_grid():
    grid = Grid(9, 9)
    generator = MazeGenerator(random.Random(5))
    generator.generate(grid)
    generator.generate(grid)

    assert grid.passage_count() == 80


def test_single_cell():
    grid = Grid(1, 1)
    generator = MazeGenerator(random.Random(0))
    generator.generate(grid)

    assert generator.metrics["cells_visited"] == 1
    assert generator.metrics["steps"] == 0
    assert grid.cell(0, 0).passages == set()
    assert grid.cell(0, 0).visited


def test_two_by_one_has_single_passage():
    grid = Grid(2, 1)
    generate(grid, rng=random.Random(9))

    assert grid.passage_count() == 1
    assert grid.cell(0, 0).passages == {'E'}
    assert grid.cell(1, 0).passages == {'W'}


def test_metrics_account_for_every_step():
    grid = Grid(20, 20)
    generator = MazeGenerator(random.Random(3))
    generator.generate(grid)
    m = generator.metrics

    assert m["cells_visited"] == 400
    assert m["steps"] == 399 + m["backtracks"]
    assert 1 <= m["reshuffles"] <= m["steps"]


def test_reshuffle_budget_range():
    rng = RecordingRandom(8)
    grid = Grid(10, 33)
    MazeGenerator(rng).generate(grid)

    assert rng.budget_calls
    assert set(rng.budget_calls) == {(0, 33 // 8)}


def test_zero_budget_reshuffles_every_step():
    # height // divisor == 0, so the budget is always 0
    grid = Grid(10, 10)
    generator = MazeGenerator(random.Random(2), reshuffle_divisor=100)
    generator.generate(grid)

    assert generator.metrics["reshuffles"] == generator.metrics["steps"]
    assert grid.passage_count() == 99
