import random

from maze_game.endpoints import select_endpoints
from maze_game.generator import RESHUFFLE_DIVISOR, MazeGenerator
from maze_game.grid import Grid
from maze_game.traversal import attempt_move

# --- Configuration ---
MAZE_WIDTH = 10
MAZE_HEIGHT = 10

# Difficulty levels offered by the menu. The value is recorded on the session
# but does not change the grid size or the carving.
LEVELS = [
    ("Easy", 10),
    ("Medium", 15),
    ("Hard", 20),
]


def level_value(name):
    for level_name, value in LEVELS:
        if level_name == name:
            return value
    raise ValueError(f"unknown level: {name!r} (expected one of {[n for n, _ in LEVELS]})")


class MazeSession:
    """
    One playable maze: the carved grid, its start/end corners and the player.

    Lifecycle:
      1. Validate dimensions and allocate the grid (all walls)
      2. Draw start/end corners
      3. Carve the grid from the top-left origin
      4. Place the player on start

    A new maze is a new session (see new_maze); a session's grid, start and
    end never change after construction.
    """
    def __init__(self, width=MAZE_WIDTH, height=MAZE_HEIGHT, level=None, rng=None, reshuffle_divisor=RESHUFFLE_DIVISOR):
        if level is not None:
            level_value(level)
        self.rng = rng if rng is not None else random.Random()
        self.reshuffle_divisor = reshuffle_divisor
        self.level = level

        self.grid = Grid(width, height)
        self.width, self.height = width, height
        self.start, self.end = select_endpoints(width, height, self.rng)

        generator = MazeGenerator(self.rng, reshuffle_divisor)
        generator.generate(self.grid)
        self.metrics = generator.metrics

        self.player = self.start
        self.path = [self.start]
        self.moves = 0

    @property
    def level_value(self):
        return level_value(self.level) if self.level is not None else None

    @property
    def at_end(self):
        return self.player == self.end

    def move(self, direction):
        """
        Try to move the player one cell.

        Returns (previous, current, moved) so a renderer can clear the old
        token and draw the new one.
        """
        previous = self.player
        current = attempt_move(self.grid, previous, direction)
        moved = current != previous
        if moved:
            self.player = current
            self.path.append(current)
            self.moves += 1
        return previous, current, moved

    def new_maze(self, level=None):
        return MazeSession(self.width, self.height, level if level is not None else self.level,
                           self.rng, self.reshuffle_divisor)
