"""
Screen geometry for the graphical front end.

Everything here is pure arithmetic on pygame rectangles: window sizes,
button placement and mapping a mouse position back to a board cell.
Nothing in this module needs an initialized display.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from pygame import Rect

from minefield import Position


Color = Tuple[int, int, int]


# ============================================================================
# Display Configuration
# ============================================================================

@dataclass
class DisplayConfig:
    """
    Pixel geometry and colors shared by both screens.

    Attributes:
        cell_size: Side of one square cell button.
        cell_gap: Space between neighboring cells.
        margin_left: Left edge of the board and the status line.
        margin_top: Top edge of the board.
        fps: Frame rate cap for the event loop.
    """

    cell_size: int = 30
    cell_gap: int = 2
    margin_left: int = 20
    margin_top: int = 60
    footer_height: int = 60
    button_width: int = 100
    button_height: int = 30
    menu_size: Tuple[int, int] = (480, 360)
    fps: int = 30
    title: str = "Minesweeper"

    color_game_bg: Color = (220, 220, 235)
    color_menu_bg: Color = (245, 245, 250)
    color_title: Color = (50, 50, 80)
    color_status: Color = (40, 40, 60)
    color_cell_hidden: Color = (189, 189, 200)
    color_cell_revealed: Color = (240, 240, 245)
    color_cell_border: Color = (120, 120, 140)
    color_detonated: Color = (220, 40, 40)
    color_mine: Color = (20, 20, 20)
    color_flag: Color = (200, 30, 30)
    color_easy: Color = (200, 230, 200)
    color_medium: Color = (230, 220, 180)
    color_hard: Color = (230, 200, 200)
    color_restart: Color = (180, 200, 220)
    color_difficulty: Color = (200, 190, 220)

    @property
    def cell_pitch(self) -> int:
        """Distance between the left edges of two adjacent cells."""
        return self.cell_size + self.cell_gap


NUMBER_COLORS: Dict[int, Color] = {
    1: (25, 118, 210),
    2: (56, 142, 60),
    3: (211, 47, 47),
    4: (123, 31, 162),
    5: (255, 143, 0),
    6: (0, 151, 167),
    7: (66, 66, 66),
    8: (158, 158, 158),
}


# ============================================================================
# Menu Layout
# ============================================================================

class MenuLayout:
    """Placement of the title and the three difficulty buttons."""

    BUTTON_ORDER = ("easy", "medium", "hard")

    def __init__(self, display: DisplayConfig) -> None:
        self.display = display
        self.size = display.menu_size
        self.title_rect = Rect(100, 50, 280, 40)
        self.buttons: Dict[str, Rect] = {
            name: Rect(150, 120 + index * 60, 180, 40)
            for index, name in enumerate(self.BUTTON_ORDER)
        }

    def button_at(self, pos: Tuple[int, int]) -> Optional[str]:
        """Name of the difficulty button under pos, if any."""
        for name, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return name
        return None


# ============================================================================
# Game Layout
# ============================================================================

class GameLayout:
    """Placement of the status line, cell grid and control buttons."""

    def __init__(self, display: DisplayConfig, columns: int, rows: int) -> None:
        self.display = display
        self.columns = columns
        self.rows = rows

        pitch = display.cell_pitch
        board_bottom = display.margin_top + rows * pitch
        self.status_rect = Rect(display.margin_left, 10, 300, 30)
        self.restart_rect = Rect(
            display.margin_left, board_bottom + 10,
            display.button_width, display.button_height,
        )
        self.difficulty_rect = Rect(
            display.margin_left + display.button_width + 10, board_bottom + 10,
            display.button_width, display.button_height,
        )
        board_width = display.margin_left * 2 + columns * pitch
        self.size = (
            max(board_width, self.difficulty_rect.right + display.margin_left),
            board_bottom + display.footer_height,
        )

    def cell_rect(self, row: int, col: int) -> Rect:
        """Screen rectangle of the cell at (row, col)."""
        pitch = self.display.cell_pitch
        return Rect(
            self.display.margin_left + col * pitch,
            self.display.margin_top + row * pitch,
            self.display.cell_size,
            self.display.cell_size,
        )

    def cell_at(self, pos: Tuple[int, int]) -> Optional[Position]:
        """
        Map a mouse position to a board cell.

        Returns:
            (row, col) of the cell under pos, or None for clicks outside
            the grid or in the gap between two cells.
        """
        x, y = pos
        pitch = self.display.cell_pitch
        col = (x - self.display.margin_left) // pitch
        row = (y - self.display.margin_top) // pitch
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            return None
        if not self.cell_rect(row, col).collidepoint(pos):
            return None
        return row, col
