import tkinter as tk
from tkinter import ttk

from maze_game.session import LEVELS, MAZE_HEIGHT, MAZE_WIDTH, MazeSession

# --- Configuration ---
CELL_SIZE = 50
WALL_WIDTH = 2
FLAG_GRID = 4  # end flag is FLAG_GRID x FLAG_GRID checkers

# --- Color Scheme ---
BG_COLOR = "#2c3e50"
CELL_COLOR = "#ecf0f1"
WALL_COLOR = "#000000"
PLAYER_COLOR = "#000000"
START_COLOR = "#1abc9c"
FLAG_DARK = "#333333"
FLAG_LIGHT = "#ffffff"

KEY_DIRECTIONS = {
    "Up": 'N',
    "Down": 'S',
    "Left": 'W',
    "Right": 'E',
}


class MazeApp:
    """
    Tkinter front end: difficulty menu, maze drawing and arrow-key movement.

    Screens:
      1. "Choose Difficulty" button
      2. One button per level in LEVELS
      3. The maze canvas; arrow keys move the player, "New Maze" replaces
         the session with a fresh one at the same level.

    The canvas only reads session state. Win detection (player on the end
    cell) is a UI policy handled here; the session itself attaches no effect
    to reaching the end.
    """
    def __init__(self, root, width=MAZE_WIDTH, height=MAZE_HEIGHT):
        self.root = root
        self.root.title("Maze")
        self.root.configure(bg=BG_COLOR)
        self.root.resizable(False, False)

        self.maze_width = width
        self.maze_height = height
        self.session = None
        self.is_running = False
        self.status_var = tk.StringVar(value="Choose a difficulty to start")

        self._setup_ui()
        self.show_difficulty_button()

    def _setup_ui(self):
        style = ttk.Style()
        style.configure("TButton", padding=6, relief="flat", background="#34495e", foreground="black")
        style.map("TButton", background=[('active', '#4a627a')])
        style.configure("TLabel", background=BG_COLOR, foreground="white")

        control_frame = tk.Frame(self.root, bg=BG_COLOR, padx=10, pady=10)
        control_frame.pack(side=tk.TOP, fill=tk.X)
        self.new_maze_btn = ttk.Button(control_frame, text="New Maze", command=self.start_new_maze, state=tk.DISABLED)
        self.new_maze_btn.pack(side=tk.LEFT, padx=5)
        ttk.Button(control_frame, text="Levels", command=self.show_level_buttons).pack(side=tk.LEFT, padx=5)
        ttk.Label(control_frame, textvariable=self.status_var).pack(side=tk.LEFT, padx=15)

        maze_frame = tk.Frame(self.root, bg=BG_COLOR, padx=10, pady=10)
        maze_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self.canvas = tk.Canvas(maze_frame, width=CELL_SIZE * self.maze_width + 1,
                                height=CELL_SIZE * self.maze_height + 1, bg=CELL_COLOR, highlightthickness=0)
        self.canvas.pack()

        # Menu widgets are placed on the canvas as windows and removed on selection
        self.menu_frame = tk.Frame(self.canvas, bg=CELL_COLOR)

        for key, direction in KEY_DIRECTIONS.items():
            self.root.bind(f"<KeyPress-{key}>", lambda e, d=direction: self.move_player(d))

    # --- Menu screens ---
    def _clear_menu(self):
        for child in self.menu_frame.winfo_children():
            child.destroy()

    def _show_menu(self):
        self.canvas.delete("all")
        self.canvas.create_window(int(self.canvas["width"]) // 2, int(self.canvas["height"]) // 2,
                                  window=self.menu_frame)

    def show_difficulty_button(self):
        self.is_running = False
        self._clear_menu()
        ttk.Button(self.menu_frame, text="Choose Difficulty", command=self.show_level_buttons).pack(pady=10)
        self._show_menu()

    def show_level_buttons(self):
        self.is_running = False
        self._clear_menu()
        for name, value in LEVELS:
            ttk.Button(self.menu_frame, text=f"{name} ({value})",
                       command=lambda n=name: self.choose_level(n)).pack(fill=tk.X, pady=5)
        self._show_menu()
        self.status_var.set("Choose a difficulty to start")

    def choose_level(self, level):
        self.session = MazeSession(self.maze_width, self.maze_height, level=level)
        self._begin()

    def start_new_maze(self):
        if self.session is None:
            self.show_level_buttons()
            return
        self.session = self.session.new_maze()
        self._begin()

    def _begin(self):
        self.canvas.delete("all")
        self.draw_maze()
        self.draw_player()
        self.new_maze_btn.config(state=tk.NORMAL)
        self.is_running = True
        self.status_var.set(f"Level: {self.session.level}  |  Moves: 0")

    # --- Input ---
    def move_player(self, direction):
        if not self.is_running or self.session is None:
            return
        _, _, moved = self.session.move(direction)
        if not moved:
            return
        self.clear_player()
        self.draw_player()
        self.status_var.set(f"Level: {self.session.level}  |  Moves: {self.session.moves}")
        if self.session.at_end:
            self.is_running = False
            self.draw_winner_message("You Win!")

    # --- Drawing ---
    def draw_maze(self):
        grid = self.session.grid
        for (x, y), cell in grid:
            x1, y1 = x * CELL_SIZE, y * CELL_SIZE
            x2, y2 = x1 + CELL_SIZE, y1 + CELL_SIZE
            if not cell.is_open('N'):
                self.canvas.create_line(x1, y1, x2, y1, fill=WALL_COLOR, width=WALL_WIDTH)
            if not cell.is_open('S'):
                self.canvas.create_line(x1, y2, x2, y2, fill=WALL_COLOR, width=WALL_WIDTH)
            if not cell.is_open('W'):
                self.canvas.create_line(x1, y1, x1, y2, fill=WALL_COLOR, width=WALL_WIDTH)
            if not cell.is_open('E'):
                self.canvas.create_line(x2, y1, x2, y2, fill=WALL_COLOR, width=WALL_WIDTH)
        self._draw_start_marker()
        self.draw_end_flag()

    def _draw_start_marker(self):
        x, y = self.session.start
        m = CELL_SIZE // 5
        self.canvas.create_rectangle(x * CELL_SIZE + m, y * CELL_SIZE + m,
                                     (x + 1) * CELL_SIZE - m, (y + 1) * CELL_SIZE - m,
                                     fill=START_COLOR, outline="", tags="start")

    def draw_end_flag(self):
        x, y = self.session.end
        inset = 4
        square = (CELL_SIZE - 2 * inset) / FLAG_GRID
        for row in range(FLAG_GRID):
            for col in range(FLAG_GRID):
                color = FLAG_DARK if (row + col) % 2 == 0 else FLAG_LIGHT
                x1 = x * CELL_SIZE + inset + col * square
                y1 = y * CELL_SIZE + inset + row * square
                self.canvas.create_rectangle(x1, y1, x1 + square, y1 + square, fill=color, outline="", tags="end")

    def draw_player(self):
        x, y = self.session.player
        m = 3
        self.canvas.create_oval(x * CELL_SIZE + m, y * CELL_SIZE + m,
                                (x + 1) * CELL_SIZE - m, (y + 1) * CELL_SIZE - m,
                                fill=PLAYER_COLOR, outline="", tags="player")

    def clear_player(self):
        self.canvas.delete("player")

    def draw_winner_message(self, message):
        w, h = int(self.canvas["width"]), int(self.canvas["height"])
        self.canvas.create_rectangle(w/2 - 100, h/2 - 30, w/2 + 100, h/2 + 30, fill=BG_COLOR, outline="white", width=2)
        self.canvas.create_text(w/2, h/2, text=message, fill="white", font=("Helvetica", 16, "bold"))
        self.status_var.set(f"Level: {self.session.level}  |  Finished in {self.session.moves} moves")


def main():
    root = tk.Tk()
    MazeApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
