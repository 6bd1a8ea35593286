from __future__ import annotations

import os

# Keep pygame headless; nothing in the tests opens a window.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from tilewalk.config import GameConfig
from tilewalk.content.maps import MapSpec
from tilewalk.game import Game
from tilewalk.render.stage import Stage, TileAtlas
from tilewalk.scenes.game_input import Keyboard
from tilewalk.state.world import Location, TileLayer


def make_layer(rows: int, cols: int, cells: dict | None = None) -> TileLayer:
    """Empty layer with the given ``{(row, col): index}`` cells filled in."""
    grid = [[0] * cols for _ in range(rows)]
    for (r, c), index in (cells or {}).items():
        grid[r][c] = index
    return TileLayer.from_rows(grid)


def make_map(obstacles: TileLayer, *, start: Location = Location(1, 3), sign_text: str = "Hi") -> MapSpec:
    return MapSpec(
        id="test",
        layers=(("obstacles", obstacles),),
        obstacle_layer="obstacles",
        player_start=start,
        player_hp=12,
        player_texture=45,
        sign_text=sign_text,
    )


@pytest.fixture()
def keyboard() -> Keyboard:
    return Keyboard()


@pytest.fixture()
def stage() -> Stage:
    return Stage()


@pytest.fixture()
def atlas() -> TileAtlas:
    return TileAtlas(columns=8, tile_width=16, tile_height=16)


@pytest.fixture()
def cfg() -> GameConfig:
    return GameConfig(transition_timeout_ms=2000.0, move_debounce_ms=200.0)


@pytest.fixture()
def game(cfg: GameConfig) -> Game:
    """A game on the bundled overworld map."""
    return Game(cfg)
