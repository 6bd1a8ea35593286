from __future__ import annotations

import logging
from pathlib import Path

import pygame
import pytest

from tilewalk import main as cli
from tilewalk.config import GameConfig
from tilewalk.engine import Engine
from tilewalk.main import parse_args
from tilewalk.render.stage import Sprite, Stage, TileAtlas
from tilewalk.render.tiles import TileRenderer


@pytest.fixture()
def engine(cfg: GameConfig):
    eng = Engine(cfg)
    eng.running = True
    yield eng
    eng.renderer.teardown()


def test_key_events_feed_the_keyboard(engine: Engine) -> None:
    engine.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    assert engine.game.keyboard.direction() == (0, -1)
    engine.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
    assert engine.game.keyboard.direction() == (0, 0)


def test_focus_loss_resets_keyboard(engine: Engine) -> None:
    engine.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    engine.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    assert engine.game.keyboard.pressed == set()


def test_escape_and_quit_stop_the_loop(engine: Engine) -> None:
    engine.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert not engine.running
    assert not engine.game.keyboard.is_pressed(pygame.K_ESCAPE)
    engine.running = True
    engine.handle_event(pygame.event.Event(pygame.QUIT))
    assert not engine.running


def test_renderer_draws_every_scene_without_a_tileset(engine: Engine) -> None:
    game = engine.game
    game.tick(0.0)
    engine.renderer.render(game.stage)
    game.keyboard.press(pygame.K_RETURN)
    for t in (1.0, 2.0, 3000.0, 3001.0, 3002.0):
        game.tick(t)
    assert game.manager.current_id == "World"
    engine.renderer.render(game.stage)
    assert engine.renderer.tile_cache  # map tiles were built


def test_cli_args() -> None:
    args = parse_args(["--config", "x.yaml", "--log-level", "debug"])
    assert args.config == "x.yaml"
    assert args.log_level == "debug"
    assert parse_args([]).config is None


def test_renderer_blits_from_a_tileset_sheet(tmp_path: Path) -> None:
    red, blue = (200, 30, 30), (30, 30, 200)
    sheet = pygame.Surface((128, 128))
    sheet.fill((0, 0, 0))
    sheet.fill(red, pygame.Rect(0, 16, 16, 16))  # tile 9: first frame of the second row
    sheet.fill(blue, pygame.Rect(64, 80, 16, 16))  # tile 45
    path = tmp_path / "sheet.bmp"
    pygame.image.save(sheet, str(path))

    renderer = TileRenderer(320, 240, TileAtlas(8, 16, 16), str(path))
    try:
        assert renderer.sheet is not None
        assert tuple(renderer.tile_surface(9).get_at((0, 0)))[:3] == red
        assert tuple(renderer.tile_surface(45).get_at((15, 15)))[:3] == blue

        stage = Stage()
        stage.attach(Sprite(tile_index=9, x=40, y=40))
        stage.attach(Sprite(tile_index=45, x=120, y=120, rotation=0.5))
        renderer.render(stage)
        assert tuple(renderer.display.get_at((40, 40)))[:3] == red
        assert tuple(renderer.display.get_at((120, 120)))[:3] == blue
        # rotated corners stay transparent, so the background shows through
        assert tuple(renderer.display.get_at((110, 109)))[:3] == renderer.bg
    finally:
        renderer.teardown()


def test_logging_is_configured_before_the_config_is_read(monkeypatch, tmp_path: Path) -> None:
    calls = []
    monkeypatch.setattr(cli, "configure_logging", lambda level: calls.append(("logging", level)))
    real_load = cli.config.load_config

    def load(path):
        calls.append(("config", path))
        return real_load(path)

    class StubEngine:
        def __init__(self, cfg: GameConfig) -> None:
            calls.append(("engine", cfg.log_level))

        def run(self) -> None:
            calls.append(("run", None))

    monkeypatch.setattr(cli.config, "load_config", load)
    monkeypatch.setattr(cli, "Engine", StubEngine)
    path = tmp_path / "quiet.yaml"
    path.write_text("log_level: WARNING\n", encoding="utf-8")
    root = logging.getLogger()
    old_level = root.level
    try:
        cli.main(["--config", str(path)])
        assert root.level == logging.WARNING
    finally:
        root.setLevel(old_level)

    assert [name for name, _ in calls] == ["logging", "config", "engine", "run"]
    assert calls[0] == ("logging", "INFO")
