"""
Grid model for the maze: a height x width array of cells, addressed [y][x].

Maze Representation:
  - Each cell holds a set of open directions {'N', 'S', 'W', 'E'}
    (top, bottom, left, right). A direction in the set means the passage
    toward that neighbor is open; a missing direction means a wall.
  - A fresh grid has empty sets everywhere (all walls present).
  - Passages are always opened on both sides of the shared wall, so a cell's
    open direction toward a neighbor always matches the neighbor's open
    direction back toward it.

Coordinates: (x, y) where x is column (0 to width-1) and y is row
(0 to height-1). Origin (0, 0) is top-left.
"""

# (dx, dy, opposite) for each direction
DIRECTIONS = {
    'N': (0, -1, 'S'),
    'S': (0, 1, 'N'),
    'W': (-1, 0, 'E'),
    'E': (1, 0, 'W'),
}
DIRECTION_ORDER = ['N', 'S', 'W', 'E']


def opposite(direction):
    return DIRECTIONS[direction][2]


def step(x, y, direction):
    """Coordinate one cell away from (x, y) in the given direction."""
    dx, dy, _ = DIRECTIONS[direction]
    return x + dx, y + dy


class Cell:
    __slots__ = ('passages', 'visited', 'parent')

    def __init__(self):
        self.passages = set()
        self.visited = False
        self.parent = None

    def is_open(self, direction):
        return direction in self.passages

    def __repr__(self):
        return f"Cell(passages={sorted(self.passages)}, visited={self.visited}, parent={self.parent})"


class Grid:
    """
    Owns the 2-D cell array and per-cell passage/visited/parent state.

    Only open_passage() adds passages, and it always writes both sides of a
    wall. The generator is the only caller that mutates a grid.
    """
    def __init__(self, width, height):
        for name, value in (('width', width), ('height', height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
        self.width = width
        self.height = height
        self.cells = [[Cell() for _ in range(width)] for _ in range(height)]

    def reset(self):
        """Back to all walls, unvisited, no parent."""
        for row in self.cells:
            for cell in row:
                cell.passages.clear()
                cell.visited = False
                cell.parent = None

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x, y):
        return self.cells[y][x]

    def open_passage(self, x, y, direction):
        """
        Knock down the wall between (x, y) and its neighbor in `direction`.

        Adds `direction` to the cell and the opposite direction to the
        neighbor. Raises ValueError if either coordinate is off the grid.
        """
        nx, ny = step(x, y, direction)
        if not self.in_bounds(x, y) or not self.in_bounds(nx, ny):
            raise ValueError(f"cannot open {direction} from {(x, y)} on a {self.width}x{self.height} grid")
        self.cells[y][x].passages.add(direction)
        self.cells[ny][nx].passages.add(opposite(direction))

    def get_valid_moves(self, x, y):
        return self.cells[y][x].passages

    def open_neighbors(self, x, y):
        return [step(x, y, d) for d in DIRECTION_ORDER if d in self.cells[y][x].passages]

    def passage_count(self):
        # Each open pair is counted once, from its west or north side.
        count = 0
        for row in self.cells:
            for cell in row:
                count += ('E' in cell.passages) + ('S' in cell.passages)
        return count

    def corners(self):
        w, h = self.width - 1, self.height - 1
        return [(0, 0), (w, 0), (0, h), (w, h)]

    def __iter__(self):
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                yield (x, y), cell


def initialize(width, height):
    return Grid(width, height)
