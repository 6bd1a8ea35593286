from __future__ import annotations

"""
Engine entry point: owns the frame loop.

Each frame drains pygame's event queue into the keyboard, ticks the game
with the frame timestamp, then draws the stage.
"""

import logging

import pygame

from tilewalk import config
from tilewalk.game import Game
from tilewalk.render.tiles import TileRenderer

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: config.GameConfig, game: Game | None = None) -> None:
        pygame.init()
        self.cfg = cfg
        self.game = game if game is not None else Game(cfg)
        self.renderer = TileRenderer(
            cfg.view_width, cfg.view_height, self.game.atlas, cfg.tileset_path
        )
        self.running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        keyboard = self.game.keyboard
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
                return
            keyboard.press(event.key)
        elif event.type == pygame.KEYUP:
            keyboard.release(event.key)
        elif event.type == pygame.WINDOWFOCUSLOST:
            # key-ups that happen while unfocused never arrive
            keyboard.reset()

    def run(self) -> None:
        clock = pygame.time.Clock()
        self.running = True
        logger.info("starting in %s", self.cfg.initial_mode)
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.game.tick(float(pygame.time.get_ticks()))
                self.renderer.render(self.game.stage)
                clock.tick(self.cfg.fps)
        finally:
            self.renderer.teardown()
