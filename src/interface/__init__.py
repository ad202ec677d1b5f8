"""
Front ends for the Minesweeper game.

Provides the pygame window (difficulty menu and game board) and a
text console game.
"""
from .layout import DisplayConfig, GameLayout, MenuLayout
from .screens import GameScreen, MenuScreen, MOUSE_LEFT, MOUSE_RIGHT
from .console import ConsoleGame, render_board

__all__ = [
    "DisplayConfig",
    "GameLayout",
    "MenuLayout",
    "GameScreen",
    "MenuScreen",
    "MOUSE_LEFT",
    "MOUSE_RIGHT",
    "ConsoleGame",
    "render_board",
]
