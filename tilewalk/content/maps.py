from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import yaml

from tilewalk.errors import MapDataError
from tilewalk.state.world import Location, TileLayer, is_walkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapSpec:
    id: str
    # (name, layer) pairs in draw order
    layers: Tuple[Tuple[str, TileLayer], ...]
    obstacle_layer: str
    player_start: Location
    player_hp: int
    player_texture: int
    sign_text: str

    @property
    def obstacles(self) -> TileLayer:
        return self.layer(self.obstacle_layer)

    def layer(self, name: str) -> TileLayer:
        for layer_name, layer in self.layers:
            if layer_name == name:
                return layer
        raise MapDataError(f"map {self.id!r} has no layer {name!r}")


def _require_mapping(map_id: str, what: str, value: Any) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise MapDataError(f"map {map_id!r}: {what} must be a mapping, got {type(value).__name__}")
    return value


def _require_int(map_id: str, what: str, value: Any) -> int:
    # bool is an int subclass; a YAML `yes` is not a tile coordinate
    if isinstance(value, bool) or not isinstance(value, int):
        raise MapDataError(f"map {map_id!r}: {what} must be an integer, got {value!r}")
    return value


def _parse_layer(map_id: str, name: str, rows: Any) -> TileLayer:
    rows = rows or []
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise MapDataError(f"map {map_id!r}: layer {name!r} must be a list of rows")
    try:
        return TileLayer.from_rows(rows)
    except MapDataError as exc:
        raise MapDataError(f"map {map_id!r}: layer {name!r}: {exc}") from None


def _parse_start(map_id: str, raw: Any) -> Location:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise MapDataError(f"map {map_id!r}: player start must be a [row, col] pair, got {raw!r}")
    row, col = (_require_int(map_id, "player start", v) for v in raw)
    return Location(row, col)


def _parse_map(map_id: str, spec: Any) -> MapSpec:
    spec = _require_mapping(map_id, "map entry", spec or {})
    raw_layers = _require_mapping(map_id, "layers", spec.get("layers") or {})
    if not raw_layers:
        raise MapDataError(f"map {map_id!r} defines no layers")
    layers = tuple(
        (name, _parse_layer(map_id, name, rows)) for name, rows in raw_layers.items()
    )

    obstacle_name = spec.get("obstacle_layer", "obstacles")
    if not isinstance(obstacle_name, str) or obstacle_name not in raw_layers:
        raise MapDataError(f"map {map_id!r}: obstacle layer {obstacle_name!r} missing")
    obstacles = dict(layers)[obstacle_name]
    shape = (obstacles.row_count, obstacles.col_count)
    for name, layer in layers:
        if (layer.row_count, layer.col_count) != shape:
            raise MapDataError(
                f"map {map_id!r}: layer {name!r} is {layer.row_count}x{layer.col_count},"
                f" expected {shape[0]}x{shape[1]}"
            )

    player = _require_mapping(map_id, "player", spec.get("player") or {})
    start = _parse_start(map_id, player.get("start", [0, 0]))
    if not is_walkable(obstacles, start):
        raise MapDataError(f"map {map_id!r}: player start {start} is off the map or blocked")
    return MapSpec(
        id=map_id,
        layers=layers,
        obstacle_layer=obstacle_name,
        player_start=start,
        player_hp=_require_int(map_id, "player hp", player.get("hp", 12)),
        player_texture=_require_int(map_id, "player texture", player.get("texture", 45)),
        sign_text=str(spec.get("sign_text", "")),
    )


def load_maps(path: pathlib.Path | str) -> Dict[str, MapSpec]:
    path = pathlib.Path(path)
    if not path.exists():
        raise MapDataError(f"map file {path} not found")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise MapDataError(f"{path}: top level must be a mapping of map ids")
    out = {map_id: _parse_map(str(map_id), spec) for map_id, spec in data.items()}
    logger.info("loaded %d map(s) from %s: %s", len(out), path, list(out))
    return out


def load_map(path: pathlib.Path | str, map_id: str = "world") -> MapSpec:
    maps = load_maps(path)
    try:
        return maps[map_id]
    except KeyError:
        raise MapDataError(f"{path} has no map {map_id!r}") from None
