import random

from maze_game.generator import generate
from maze_game.grid import Grid
from maze_game.visualization import build_carving_tree


def test_carving_tree_has_one_edge_per_passage():
    grid = Grid(6, 4)
    generate(grid, rng=random.Random(5))

    dot = build_carving_tree(grid)
    edges = [line for line in dot.body if "->" in line]
    assert len(edges) == 23
    assert len(dot.body) == 24 + 23


def test_carving_tree_edges_follow_parent_pointers():
    grid = Grid(2, 1)
    generate(grid, rng=random.Random(0))

    source = build_carving_tree(grid).source
    assert '"(0, 0)" -> "(1, 0)"' in source
