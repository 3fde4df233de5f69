import pytest

from maze_game.grid import DIRECTIONS, Grid, initialize, opposite, step


def test_initialize_all_walls():
    grid = initialize(4, 3)

    assert grid.width == 4
    assert grid.height == 3
    assert len(grid.cells) == 3
    assert all(len(row) == 4 for row in grid.cells)
    for _, cell in grid:
        assert cell.passages == set()
        assert cell.visited is False
        assert cell.parent is None
    assert grid.passage_count() == 0


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (2.5, 2), (True, 3)])
def test_rejects_bad_dimensions(width, height):
    with pytest.raises(ValueError):
        Grid(width, height)


def test_in_bounds():
    grid = Grid(3, 2)

    assert grid.in_bounds(0, 0)
    assert grid.in_bounds(2, 1)
    assert not grid.in_bounds(3, 0)
    assert not grid.in_bounds(0, 2)
    assert not grid.in_bounds(-1, 0)


def test_open_passage_writes_both_sides():
    grid = Grid(3, 3)
    grid.open_passage(1, 1, 'N')
    grid.open_passage(1, 1, 'E')

    assert grid.cell(1, 1).passages == {'N', 'E'}
    assert grid.cell(1, 0).passages == {'S'}
    assert grid.cell(2, 1).passages == {'W'}
    assert grid.passage_count() == 2
    assert sorted(grid.open_neighbors(1, 1)) == [(1, 0), (2, 1)]


def test_open_passage_off_grid_raises():
    grid = Grid(2, 2)

    with pytest.raises(ValueError):
        grid.open_passage(0, 0, 'N')
    with pytest.raises(ValueError):
        grid.open_passage(1, 1, 'E')
    assert grid.passage_count() == 0


def test_reset_clears_state():
    grid = Grid(2, 2)
    grid.open_passage(0, 0, 'E')
    grid.cell(1, 0).visited = True
    grid.cell(1, 0).parent = (0, 0)

    grid.reset()

    for _, cell in grid:
        assert cell.passages == set()
        assert not cell.visited
        assert cell.parent is None


def test_direction_table_is_consistent():
    for direction in DIRECTIONS:
        x, y = step(5, 5, direction)
        assert step(x, y, opposite(direction)) == (5, 5)
        assert opposite(opposite(direction)) == direction


def test_corners():
    assert sorted(Grid(4, 3).corners()) == [(0, 0), (0, 2), (3, 0), (3, 2)]
    assert set(Grid(1, 1).corners()) == {(0, 0)}
