from maze_game.grid import DIRECTIONS, step

# Input names accepted from key handlers and callers, mapped onto grid directions.
DIRECTION_ALIASES = {
    'up': 'N', 'top': 'N',
    'down': 'S', 'bottom': 'S',
    'left': 'W',
    'right': 'E',
}


def parse_direction(name):
    """Normalize 'N'/'up'/'Up'/'top' style names to a grid direction."""
    if name in DIRECTIONS:
        return name
    key = str(name).lower()
    if key in DIRECTION_ALIASES:
        return DIRECTION_ALIASES[key]
    if key.upper() in DIRECTIONS:
        return key.upper()
    raise ValueError(f"unknown direction: {name!r}")


def attempt_move(grid, position, direction):
    """
    Returns the neighbor of `position` in `direction` if the passage is open,
    otherwise `position` unchanged. An illegal move is a silent no-op.
    """
    direction = parse_direction(direction)
    x, y = position
    if direction in grid.get_valid_moves(x, y):
        return step(x, y, direction)
    return position
