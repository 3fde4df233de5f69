import argparse
import random

from graphviz import Digraph

from maze_game.session import MAZE_HEIGHT, MAZE_WIDTH, MazeSession


def build_carving_tree(grid):
    """One node per cell, one parent -> child edge per carved passage."""
    dot = Digraph()
    for (x, y), cell in grid:
        dot.node(str((x, y)))
    for (x, y), cell in grid:
        if cell.parent is not None:
            dot.edge(str(cell.parent), str((x, y)))
    return dot


def render_carving_tree(grid, filename='carving_tree', view=False, fmt='pdf'):
    dot = build_carving_tree(grid)
    dot.format = fmt
    return dot.render(filename, view=view)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render the carving tree of a generated maze with graphviz.")
    parser.add_argument("--width", type=int, default=MAZE_WIDTH)
    parser.add_argument("--height", type=int, default=MAZE_HEIGHT)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out", default="carving_tree")
    parser.add_argument("--format", default="pdf")
    parser.add_argument("--view", action="store_true")
    args = parser.parse_args(argv)

    session = MazeSession(args.width, args.height, rng=random.Random(args.seed))
    path = render_carving_tree(session.grid, args.out, view=args.view, fmt=args.format)
    print(f"Wrote carving tree to {path}")


if __name__ == "__main__":
    main()
