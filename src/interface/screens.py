"""
Screen controllers for the graphical front end.

A screen turns clicks into board operations and reports which screen
should be active next. Drawing lives in the renderer, so controllers
can be driven directly in tests without opening a window.
"""
import random
from typing import Optional, Tuple, Union

from minefield import Board, BoardConfig, GameState, PRESETS, new_board

from .layout import DisplayConfig, GameLayout, MenuLayout


# pygame mouse button numbers
MOUSE_LEFT = 1
MOUSE_RIGHT = 3

WIN_MESSAGE = "You cleared the board! Congratulations!"
LOSS_MESSAGE = "Boom! You hit a mine."

Screen = Union["MenuScreen", "GameScreen"]


def status_text(board: Board) -> str:
    """Mine and flag counts while playing, the outcome afterwards."""
    if board.game_state == GameState.WON:
        return WIN_MESSAGE
    if board.game_state == GameState.LOST:
        return LOSS_MESSAGE
    return f"Mines: {board.mine_count} - Flags: {board.flag_count}"


# ============================================================================
# Difficulty Menu
# ============================================================================

class MenuScreen:
    """Difficulty selection: each preset button starts a new game."""

    title = "choose difficulty"
    labels = {"easy": "Easy", "medium": "Medium", "hard": "Hard"}

    def __init__(
        self,
        display: Optional[DisplayConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.display = display or DisplayConfig()
        self.rng = rng
        self.layout = MenuLayout(self.display)

    @property
    def size(self) -> Tuple[int, int]:
        return self.layout.size

    def handle_click(self, pos: Tuple[int, int], button: int) -> Screen:
        """Start a game when a difficulty button is clicked."""
        if button != MOUSE_LEFT:
            return self
        name = self.layout.button_at(pos)
        if name is None:
            return self
        return self.start(PRESETS[name])

    def start(self, config: BoardConfig) -> "GameScreen":
        return GameScreen(config, self.display, self.rng)


# ============================================================================
# Game Board
# ============================================================================

class GameScreen:
    """
    One game in progress.

    Left clicks reveal, right clicks toggle flags. The restart button
    throws the board away and deals a new one with the same
    configuration; the difficulty button returns to the menu.
    """

    def __init__(
        self,
        config: BoardConfig,
        display: Optional[DisplayConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.display = display or DisplayConfig()
        self.rng = rng
        self.layout = GameLayout(self.display, config.width, config.height)
        self.board = self._deal()

    def _deal(self) -> Board:
        config = self.config
        return new_board(config.width, config.height, config.num_mines, self.rng)

    @property
    def size(self) -> Tuple[int, int]:
        return self.layout.size

    @property
    def status_text(self) -> str:
        """Status line shown above the board."""
        return status_text(self.board)

    def handle_click(self, pos: Tuple[int, int], button: int) -> Screen:
        """Dispatch a mouse click and return the screen to show next."""
        if button == MOUSE_LEFT:
            if self.layout.restart_rect.collidepoint(pos):
                self.restart()
                return self
            if self.layout.difficulty_rect.collidepoint(pos):
                return self.change_difficulty()

        cell = self.layout.cell_at(pos)
        if cell is None:
            return self
        row, col = cell
        if button == MOUSE_LEFT:
            self.board.reveal(row, col)
        elif button == MOUSE_RIGHT:
            self.board.toggle_flag(row, col)
        return self

    def restart(self) -> None:
        """Replace the board with a fresh one of the same size."""
        self.board = self._deal()

    def change_difficulty(self) -> MenuScreen:
        return MenuScreen(self.display, self.rng)
