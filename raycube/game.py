"""The game window, its event handling and its main loop."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .parsing import CubConfig  # noqa: E402

WINDOW_SIZE = (1920, 1080)
WINDOW_TITLE = "Cub3D"
ESCAPE_KEY = pygame.K_ESCAPE


class Game:
    """A running scene: opens the window and reacts to the player's keys."""

    def __init__(self, config: CubConfig) -> None:
        self.config = config
        self.running = False
        self.screen: pygame.Surface | None = None

    def handle_keypress(self, key: int) -> bool:
        """React to a released key; Escape closes the game."""
        if key == ESCAPE_KEY:
            self.destroy()
        return True

    def routine(self) -> int:
        """Work done once per pass of the main loop."""
        return 0

    def destroy(self) -> None:
        """Close the window and stop the main loop."""
        if pygame.display.get_init():
            pygame.display.quit()
        self.screen = None
        self.running = False

    def _dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYUP:
            self.handle_keypress(event.key)
        elif event.type == pygame.QUIT:
            self.destroy()

    def run(self) -> None:
        """Open the window and run until the game is closed."""
        pygame.display.init()
        self.screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.running = True
        while self.running:
            for event in pygame.event.get():
                self._dispatch(event)
                if not self.running:
                    break
            if self.running:
                self.routine()