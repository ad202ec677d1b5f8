"""
Minesweeper game module.

Provides core game logic including board management and cell state.
"""
from .cell import Cell, CellState, Position
from .board import (
    Board,
    BoardConfig,
    CellView,
    EndMark,
    GameState,
    EASY,
    MEDIUM,
    HARD,
    PRESETS,
    get_preset,
    new_board,
    reveal,
    toggle_flag,
)

__all__ = [
    "Cell",
    "CellState",
    "Position",
    "Board",
    "BoardConfig",
    "CellView",
    "EndMark",
    "GameState",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "get_preset",
    "new_board",
    "reveal",
    "toggle_flag",
]
