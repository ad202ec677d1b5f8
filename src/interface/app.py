"""
Pygame event loop for the graphical front end.
"""
import random
from typing import Optional

import pygame

from minefield import BoardConfig

from .layout import DisplayConfig
from .renderer import Renderer
from .screens import GameScreen, MenuScreen, Screen


class App:
    """
    Owns the window and the active screen.

    Mouse clicks go to the active screen, which answers with the screen
    to show next. The window is resized whenever that screen needs a
    different size.
    """

    def __init__(
        self,
        start: Optional[BoardConfig] = None,
        display: Optional[DisplayConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.display = display or DisplayConfig()
        if start is None:
            self.screen: Screen = MenuScreen(self.display, rng)
        else:
            self.screen = GameScreen(start, self.display, rng)

        pygame.init()
        pygame.display.set_caption(self.display.title)
        self.clock = pygame.time.Clock()
        self.surface = pygame.display.set_mode(self.screen.size)
        self.renderer = Renderer(self.surface, self.display)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Apply one event.

        Returns:
            False when the window should close.
        """
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN:
            self._switch_to(self.screen.handle_click(event.pos, event.button))
        elif event.type == pygame.KEYDOWN and isinstance(self.screen, GameScreen):
            if event.key == pygame.K_r:
                self.screen.restart()
            elif event.key == pygame.K_ESCAPE:
                self._switch_to(self.screen.change_difficulty())
        return True

    def _switch_to(self, screen: Screen) -> None:
        if screen is self.screen:
            return
        resize = screen.size != self.screen.size
        self.screen = screen
        if resize:
            self.surface = pygame.display.set_mode(screen.size)
            self.renderer.surface = self.surface

    def draw(self) -> None:
        if isinstance(self.screen, GameScreen):
            self.renderer.draw_game(self.screen)
        else:
            self.renderer.draw_menu(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Process events until the window is closed."""
        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break
            self.draw()
            self.clock.tick(self.display.fps)
        pygame.quit()


def run_gui(
    start: Optional[BoardConfig] = None,
    rng: Optional[random.Random] = None,
) -> None:
    """Open the game window, on the menu unless a board is given."""
    App(start=start, rng=rng).run()
