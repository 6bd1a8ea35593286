"""Pygame renderer for the tile stage, with an ASCII fallback when no tileset is present."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, Optional, Tuple

import pygame

from tilewalk.render.stage import Group, Label, Sprite, Stage, TileAtlas

logger = logging.getLogger(__name__)


class TileRenderer:
    def __init__(
        self,
        width: int,
        height: int,
        atlas: TileAtlas,
        tileset_path: Optional[str] = None,
        *,
        caption: str = "tilewalk",
    ) -> None:
        pygame.init()
        self.width = width
        self.height = height
        self.atlas = atlas
        self.display = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)
        self.font = pygame.font.SysFont("consolas", 24)
        self.tile_font = pygame.font.SysFont("consolas", max(8, atlas.tile_height - 4))
        self.bg = (255, 255, 255)
        self.fg = (20, 20, 30)

        self.sheet: Optional[pygame.Surface] = None
        if tileset_path and Path(tileset_path).exists():
            self.sheet = pygame.image.load(tileset_path).convert_alpha()
            logger.info("loaded tileset %s", tileset_path)
        else:
            logger.info("no tileset at %s; drawing tiles as glyphs", tileset_path)
        # cached tile surfaces keyed by tile index
        self.tile_cache: Dict[int, pygame.Surface] = {}

    # ------------------------------------------------------------------ #
    # Tile surfaces

    def _glyph_color(self, index: int) -> Tuple[int, int, int]:
        # spread indices over the hue wheel so neighbours look different
        hue = (index * 47) % 360
        color = pygame.Color(0)
        color.hsva = (hue, 45, 85, 100)
        return color.r, color.g, color.b

    def tile_surface(self, index: int) -> pygame.Surface:
        surf = self.tile_cache.get(index)
        if surf is not None:
            return surf
        w, h = self.atlas.tile_width, self.atlas.tile_height
        if self.sheet is not None:
            surf = self.sheet.subsurface(pygame.Rect(self.atlas.frame_for(index))).copy()
        else:
            surf = pygame.Surface((w, h), pygame.SRCALPHA)
            surf.fill(self._glyph_color(index))
            glyph = self.tile_font.render(str(index % 100), True, self.fg)
            surf.blit(glyph, glyph.get_rect(center=(w // 2, h // 2)))
        self.tile_cache[index] = surf
        return surf

    # ------------------------------------------------------------------ #
    # Drawing

    def _draw_sprite(self, sprite: Sprite, ox: float, oy: float) -> None:
        surf = self.tile_surface(sprite.tile_index)
        if sprite.rotation:
            # pygame rotates counter-clockwise in degrees
            surf = pygame.transform.rotate(surf, -math.degrees(sprite.rotation))
        ax, ay = sprite.anchor
        x = ox + sprite.x - surf.get_width() * ax
        y = oy + sprite.y - surf.get_height() * ay
        self.display.blit(surf, (int(x), int(y)))

    def _draw_label(self, label: Label, ox: float, oy: float) -> None:
        surf = self.font.render(label.text, True, self.fg)
        x = ox + label.x - surf.get_width() * label.anchor_x
        self.display.blit(surf, (int(x), int(oy + label.y)))

    def _draw(self, handle, ox: float, oy: float) -> None:
        if isinstance(handle, Group):
            for child in handle.children:
                self._draw(child, ox + handle.x, oy + handle.y)
        elif isinstance(handle, Sprite):
            self._draw_sprite(handle, ox, oy)
        elif isinstance(handle, Label):
            self._draw_label(handle, ox, oy)

    def render(self, stage: Stage) -> None:
        self.display.fill(self.bg)
        for handle in stage.children:
            self._draw(handle, 0.0, 0.0)
        pygame.display.flip()

    def teardown(self) -> None:
        pygame.quit()
