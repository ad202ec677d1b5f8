"""
Pygame drawing for the menu and game screens.
"""
import pygame
from pygame import Rect

from minefield import CellView, EndMark

from .layout import NUMBER_COLORS, DisplayConfig
from .screens import GameScreen, MenuScreen


class Renderer:
    """Draws screens onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, display: DisplayConfig) -> None:
        self.surface = surface
        self.display = display
        self.font = pygame.font.Font(None, 24)
        self.title_font = pygame.font.Font(None, 36)

    # ========================================================================
    # Menu
    # ========================================================================

    def draw_menu(self, menu: MenuScreen) -> None:
        display = self.display
        self.surface.fill(display.color_menu_bg)

        title = self.title_font.render(menu.title, True, display.color_title)
        self.surface.blit(title, title.get_rect(center=menu.layout.title_rect.center))

        colors = {
            "easy": display.color_easy,
            "medium": display.color_medium,
            "hard": display.color_hard,
        }
        for name, rect in menu.layout.buttons.items():
            self._draw_button(rect, menu.labels[name], colors[name])

    # ========================================================================
    # Game
    # ========================================================================

    def draw_game(self, game: GameScreen) -> None:
        display = self.display
        layout = game.layout
        self.surface.fill(display.color_game_bg)

        status = self.font.render(game.status_text, True, display.color_status)
        self.surface.blit(status, (layout.status_rect.x, layout.status_rect.centery - status.get_height() // 2))

        for row_views in game.board.cell_views():
            for view in row_views:
                self._draw_cell(layout.cell_rect(view.row, view.column), view)

        self._draw_button(layout.restart_rect, "restart", display.color_restart)
        self._draw_button(layout.difficulty_rect, "difficulty", display.color_difficulty)

    def _draw_cell(self, rect: Rect, view: CellView) -> None:
        display = self.display
        if view.end_mark is not None:
            self._draw_final_cell(rect, view)
        elif view.is_revealed:
            pygame.draw.rect(self.surface, display.color_cell_revealed, rect)
            if view.adjacent_mines > 0:
                self._draw_number(rect, view.adjacent_mines)
        else:
            pygame.draw.rect(self.surface, display.color_cell_hidden, rect)
            if view.is_flagged:
                self._draw_flag(rect)
        pygame.draw.rect(self.surface, display.color_cell_border, rect, 1)

    def _draw_final_cell(self, rect: Rect, view: CellView) -> None:
        display = self.display
        if view.end_mark == EndMark.MINE:
            background = display.color_detonated if view.is_revealed else display.color_cell_revealed
            pygame.draw.rect(self.surface, background, rect)
            pygame.draw.circle(self.surface, display.color_mine, rect.center, rect.width // 4)
        elif view.end_mark == EndMark.FLAG:
            pygame.draw.rect(self.surface, display.color_cell_hidden, rect)
            self._draw_flag(rect)
        else:
            color = display.color_cell_revealed if view.is_revealed else display.color_cell_hidden
            pygame.draw.rect(self.surface, color, rect)

    def _draw_number(self, rect: Rect, count: int) -> None:
        color = NUMBER_COLORS.get(count, self.display.color_status)
        label = self.font.render(str(count), True, color)
        self.surface.blit(label, label.get_rect(center=rect.center))

    def _draw_flag(self, rect: Rect) -> None:
        color = self.display.color_flag
        flag_w = max(6, rect.width // 3)
        flag_h = max(8, rect.height // 2)
        pole_x = rect.left + rect.width // 3
        pole_y = rect.top + 4
        pygame.draw.line(self.surface, color, (pole_x, pole_y), (pole_x, pole_y + flag_h), 2)
        pygame.draw.polygon(self.surface, color, [
            (pole_x + 2, pole_y),
            (pole_x + 2 + flag_w, pole_y + flag_h // 3),
            (pole_x + 2, pole_y + flag_h // 2),
        ])

    def _draw_button(self, rect: Rect, text: str, color) -> None:
        pygame.draw.rect(self.surface, color, rect)
        pygame.draw.rect(self.surface, self.display.color_cell_border, rect, 1)
        label = self.font.render(text, True, self.display.color_title)
        self.surface.blit(label, label.get_rect(center=rect.center))
