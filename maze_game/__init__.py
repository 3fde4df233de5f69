from maze_game.endpoints import select_endpoints
from maze_game.generator import MazeGenerator, generate
from maze_game.grid import Cell, Grid, initialize
from maze_game.session import LEVELS, MazeSession
from maze_game.traversal import attempt_move, parse_direction
