import random

from maze_game.grid import DIRECTION_ORDER, step

# Reshuffle budget is drawn from [0, height // RESHUFFLE_DIVISOR].
RESHUFFLE_DIVISOR = 8


class MazeGenerator:
    """
    Carves a "perfect" maze into a Grid using randomized depth-first carving
    with parent-pointer backtracking.

    High-level overview:
      - The grid is reset to all walls, then carving starts at a single origin
        (top-left by default), independent of where start/end are placed later.
      - At each step the four directions are scanned in a shuffled order; the
        first in-bounds unvisited neighbor gets a passage carved to it, records
        the current cell as its parent, and becomes the current cell.
      - When no neighbor is left, we retreat to the current cell's parent.
        Every cell has exactly one parent, so the parent pointers act as the
        backtracking stack.
      - The run ends once every cell has been visited. Exactly
        width * height - 1 passages are opened, i.e. a spanning tree.

    Corridor Heuristic:
      - The direction order is only reshuffled when a step budget runs out.
        The budget is redrawn after each reshuffle uniformly from
        [0, height // reshuffle_divisor]. A budget of 0 reshuffles on every
        step. Longer budgets keep the same order for longer and give
        straighter corridors; this never affects correctness.

    Randomness:
      - All draws go through the injected `rng` (a random.Random instance),
        so a seeded generator reproduces the same grid.
    """
    def __init__(self, rng=None, reshuffle_divisor=RESHUFFLE_DIVISOR):
        if isinstance(reshuffle_divisor, bool) or not isinstance(reshuffle_divisor, int) or reshuffle_divisor < 1:
            raise ValueError(f"reshuffle_divisor must be a positive integer, got {reshuffle_divisor!r}")
        self.rng = rng if rng is not None else random.Random()
        self.reshuffle_divisor = reshuffle_divisor
        self.metrics = self._empty_metrics()

    @staticmethod
    def _empty_metrics():
        return {"cells_visited": 0, "steps": 0, "reshuffles": 0, "backtracks": 0}

    def reshuffle_budget(self, height):
        return self.rng.randint(0, height // self.reshuffle_divisor)

    def generate(self, grid, origin=(0, 0)):
        ox, oy = origin
        if not grid.in_bounds(ox, oy):
            raise ValueError(f"origin {origin} is outside the {grid.width}x{grid.height} grid")

        grid.reset()
        self.metrics = m = self._empty_metrics()

        directions = list(DIRECTION_ORDER)
        num_cells = grid.width * grid.height
        budget = 0
        steps_since_shuffle = 0

        current = (ox, oy)
        grid.cell(ox, oy).visited = True
        cells_visited = 1

        while cells_visited < num_cells:
            if steps_since_shuffle >= budget:
                self.rng.shuffle(directions)
                budget = self.reshuffle_budget(grid.height)
                steps_since_shuffle = 0
                m["reshuffles"] += 1
            steps_since_shuffle += 1
            m["steps"] += 1

            cx, cy = current
            moved = False
            for direction in directions:
                nx, ny = step(cx, cy, direction)
                if not grid.in_bounds(nx, ny):
                    continue
                neighbor = grid.cell(nx, ny)
                if neighbor.visited:
                    continue
                grid.open_passage(cx, cy, direction)
                neighbor.parent = current
                neighbor.visited = True
                cells_visited += 1
                current = (nx, ny)
                moved = True
                break

            if not moved:
                # Dead end: retreat one level up the carving tree.
                current = grid.cell(cx, cy).parent
                m["backtracks"] += 1

        m["cells_visited"] = cells_visited


def generate(grid, origin=(0, 0), rng=None):
    MazeGenerator(rng).generate(grid, origin)
