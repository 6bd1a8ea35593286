from __future__ import annotations

import logging

from tilewalk.content.maps import MapSpec
from tilewalk.render.stage import Group, Stage, TileAtlas, build_layer_group
from tilewalk.state.actors import Actor, make_player
from tilewalk.systems.actions import (
    Blocked,
    Interact,
    InteractionKind,
    Move,
    classify_step,
    commit_move,
)
from tilewalk.systems.debounce import DebounceGate

from .base import CONTINUE, RequestTransition, Scene, SceneEvent
from .game_input import Keyboard

logger = logging.getLogger(__name__)


class WorldScene(Scene):
    """The overworld: map layers plus the player walking one cell per step."""

    def __init__(
        self,
        stage: Stage,
        keyboard: Keyboard,
        world_map: MapSpec,
        atlas: TileAtlas,
        *,
        move_debounce_ms: float = 200.0,
        spin: float = 0.01,
        sign_mode: str = "ReadSign",
    ) -> None:
        self.stage = stage
        self.keyboard = keyboard
        self.map = world_map
        self.atlas = atlas
        self.spin = spin
        self.sign_mode = sign_mode

        self.player: Actor = make_player(
            world_map.player_start, world_map.player_hp, world_map.player_texture
        )
        self.player_sprite = atlas.sprite_for(self.player.texture_index)
        stage.set_position(self.player_sprite, *atlas.map_position(self.player.location))
        self.move_gate = DebounceGate(move_debounce_ms)
        self.event: SceneEvent = CONTINUE

        # Container built once; layers never change after load.
        self.container = Group()
        for _name, layer in world_map.layers:
            self.container.add(build_layer_group(layer, atlas))
        self.container.add(self.player_sprite)

    def on_enter(self) -> None:
        self.event = CONTINUE
        self.stage.attach(self.container)

    def on_exit(self) -> None:
        self.stage.detach(self.container)

    def update(self, now: float) -> None:
        self.player_sprite.rotation += self.spin

        if not self.move_gate.try_fire(now):
            return
        delta = self.keyboard.direction()
        if delta == (0, 0):
            return

        outcome = classify_step(self.player, delta, self.map.obstacles)
        if isinstance(outcome, Move):
            commit_move(self.player, outcome.location)
            self.stage.set_position(self.player_sprite, *self.atlas.map_position(outcome.location))
        elif isinstance(outcome, Interact):
            if outcome.kind is InteractionKind.READ_SIGN:
                logger.debug("player reads sign at %s", outcome.location)
                self.event = RequestTransition(self.sign_mode)
        elif isinstance(outcome, Blocked):
            logger.debug("step %s from %s blocked", delta, self.player.location)

    def poll_event(self) -> SceneEvent:
        return self.event
