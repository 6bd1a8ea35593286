from __future__ import annotations

"""
Root game context.

Everything that changes while the game runs (keyboard state, display
list, the scene state machine) hangs off one Game object instead of
living in module globals, so tests can build as many as they like.
"""

import logging
from typing import Dict

from tilewalk.config import GameConfig
from tilewalk.content.maps import MapSpec, load_map
from tilewalk.render.stage import Stage, TileAtlas
from tilewalk.scenes.base import Scene
from tilewalk.scenes.game_input import Keyboard, resolve_bindings
from tilewalk.scenes.main_menu import MainMenuScene
from tilewalk.scenes.manager import SceneManager
from tilewalk.scenes.read_sign_scene import ReadSignScene
from tilewalk.scenes.transition_scene import TransitionScene
from tilewalk.scenes.world_scene import WorldScene

logger = logging.getLogger(__name__)


def build_scenes(
    cfg: GameConfig, stage: Stage, keyboard: Keyboard, world_map: MapSpec, atlas: TileAtlas
) -> Dict[str, Scene]:
    """Build every scene up front; they are reused on each activation."""
    center = (cfg.view_width / 2.0, cfg.view_height / 2.0)
    return {
        "MainMenu": MainMenuScene(
            stage, keyboard, prompt=cfg.menu_prompt, center=center, next_mode="ToWorld"
        ),
        "ToWorld": TransitionScene(
            stage, cfg.transition_text, cfg.transition_timeout_ms, "World", center=center
        ),
        "World": WorldScene(
            stage,
            keyboard,
            world_map,
            atlas,
            move_debounce_ms=cfg.move_debounce_ms,
            spin=cfg.player_spin,
        ),
        "ReadSign": ReadSignScene(stage, keyboard, text=world_map.sign_text, center=center),
    }


class Game:
    def __init__(self, cfg: GameConfig, world_map: MapSpec | None = None) -> None:
        self.cfg = cfg
        self.map = world_map if world_map is not None else load_map(cfg.map_path)
        self.atlas = TileAtlas(cfg.tileset_columns, cfg.tile_width, cfg.tile_height)
        self.keyboard = Keyboard(bindings=resolve_bindings(cfg.key_bindings))
        self.stage = Stage()
        self.scenes = build_scenes(cfg, self.stage, self.keyboard, self.map, self.atlas)
        self.manager = SceneManager(self.scenes, cfg.initial_mode)
        logger.debug("game ready with scenes %s", list(self.scenes))

    def tick(self, now: float) -> None:
        """Advance one frame; ``now`` must not go backwards between calls."""
        self.manager.tick(now)
