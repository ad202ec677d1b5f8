"""
Text front end: prints the board and reads moves from stdin.

Commands:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    restart     deal a new board with the same settings
    quit        leave the game
"""
import random
from typing import Callable, Optional

from minefield import Board, BoardConfig, new_board

from .screens import status_text


# ============================================================================
# Rendering
# ============================================================================

def render_board(board: Board) -> str:
    """
    Render board as ASCII string.

    '.' hidden, 'F' flagged, '*' mine, ' ' zero, digits for counts.
    Columns and rows are labelled with their index modulo 10.
    """
    obs = board.get_observation()
    header = "   " + " ".join(str(col % 10) for col in range(board.columns))
    lines = [header]

    for row in range(board.rows):
        row_str = f"{row % 10:>2} "
        for col in range(board.columns):
            val = obs[row, col]
            if val == -1:
                row_str += "."
            elif val == -2:
                row_str += "F"
            elif val == 9:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str.rstrip())

    return "\n".join(lines)


# ============================================================================
# Console Game
# ============================================================================

class ConsoleGame:
    """Line-oriented game loop over a single board configuration."""

    def __init__(
        self,
        config: BoardConfig,
        rng: Optional[random.Random] = None,
        output: Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.rng = rng
        self.output = output
        self.board = self._deal()

    def _deal(self) -> Board:
        config = self.config
        return new_board(config.width, config.height, config.num_mines, self.rng)

    def show(self) -> None:
        self.output(render_board(self.board))
        self.output(status_text(self.board))

    def handle(self, line: str) -> bool:
        """
        Apply one command line.

        Returns:
            False when the player asked to quit.
        """
        parts = line.split()
        if not parts:
            return True

        command = parts[0].lower()
        if command in ("q", "quit", "exit"):
            return False
        if command == "restart":
            self.board = self._deal()
            return True
        if command not in ("r", "f") or len(parts) != 3:
            self.output("Commands: r ROW COL | f ROW COL | restart | quit")
            return True

        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            self.output("Row and column must be integers")
            return True

        if command == "r":
            changed = self.board.reveal(row, col)
        else:
            changed = self.board.toggle_flag(row, col)
        if not changed:
            self.output(f"Nothing to do at ({row}, {col})")
        return True

    def run(self, read: Callable[[str], str] = input) -> None:
        """Play until the player quits or input runs out."""
        self.show()
        while True:
            try:
                line = read("> ")
            except EOFError:
                break
            if not self.handle(line):
                break
            self.show()
