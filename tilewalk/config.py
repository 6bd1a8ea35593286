from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from tilewalk.errors import ConfigError

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent


@dataclass(frozen=True)
class GameConfig:
    view_width: int = 800
    view_height: int = 600
    fps: int = 60
    # tileset: 1-bit sheet, 8 tiles per row, 16px tiles
    tileset_path: str = str(PACKAGE_ROOT / "assets" / "tileset_1bit.png")
    tileset_columns: int = 8
    tile_width: int = 16
    tile_height: int = 16
    map_path: str = str(PACKAGE_ROOT / "content" / "maps.yaml")
    initial_mode: str = "MainMenu"
    move_debounce_ms: float = 200.0
    transition_timeout_ms: float = 2000.0
    transition_text: str = "World 1-1"
    menu_prompt: str = "Press Enter to Begin."
    player_spin: float = 0.01  # radians per tick
    log_level: str = "INFO"
    # command -> pygame key names, e.g. {"up": ["UP", "w"]}; unlisted commands keep defaults
    key_bindings: Dict[str, List[str]] = field(default_factory=dict)


def _coerce(name: str, expected: Any, value: Any) -> Any:
    # bool is an int subclass; reject it explicitly for numeric fields
    if isinstance(value, bool) and expected is not bool:
        raise ConfigError(f"config key {name!r} must be {expected.__name__}, got bool")
    if expected is float and isinstance(value, int):
        return float(value)
    if not isinstance(value, expected):
        raise ConfigError(
            f"config key {name!r} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _check_bindings(value: Dict[Any, Any]) -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {}
    for command, keys in value.items():
        if not isinstance(command, str) or not isinstance(keys, list):
            raise ConfigError(f"key_bindings.{command} must be a list of key names")
        out[command] = [str(k) for k in keys]
    return out


def config_from_dict(data: Dict[str, Any], base: Optional[GameConfig] = None) -> GameConfig:
    """Overlay a plain mapping onto ``base`` (defaults when omitted)."""
    base = base or GameConfig()
    types = {f.name: type(getattr(base, f.name)) for f in fields(base)}
    unknown = sorted(set(data) - set(types))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    overrides = {k: _coerce(k, types[k], v) for k, v in data.items()}
    if "key_bindings" in overrides:
        overrides["key_bindings"] = _check_bindings(overrides["key_bindings"])
    return replace(base, **overrides)


def load_config(path: Path | str | None = None) -> GameConfig:
    """
    Load a YAML config file on top of the defaults.

    A missing file (or no path at all) just gives the defaults; an empty
    file is treated the same way.
    """
    if path is None:
        return GameConfig()
    path = Path(path)
    if not path.exists():
        logger.info("config file %s not found; using defaults", path)
        return GameConfig()
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    logger.info("loaded config from %s", path)
    return config_from_dict(data)
