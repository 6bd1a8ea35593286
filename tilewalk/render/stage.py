"""Display list shared by scenes and the pygame renderer.

Scenes never draw; they attach/detach handles here and move them around.
The renderer walks ``Stage.children`` once per frame.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

from tilewalk.state.world import Location, TileLayer


@dataclass(eq=False)
class Sprite:
    tile_index: int
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0  # radians
    # sprites are positioned by their centre
    anchor: Tuple[float, float] = (0.5, 0.5)


@dataclass(eq=False)
class Label:
    text: str
    x: float = 0.0
    y: float = 0.0
    # horizontally centred on x, top edge at y
    anchor_x: float = 0.5


@dataclass(eq=False)
class Group:
    children: List["Handle"] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0

    def add(self, child: "Handle") -> None:
        self.children.append(child)


Handle = Union[Sprite, Label, Group]


class Stage:
    """Root of the display list."""

    def __init__(self) -> None:
        self.children: List[Handle] = []

    def attach(self, handle: Handle) -> None:
        if handle not in self.children:
            self.children.append(handle)

    def detach(self, handle: Handle) -> None:
        if handle in self.children:
            self.children.remove(handle)

    def set_position(self, handle: Handle, x: float, y: float) -> None:
        handle.x = x
        handle.y = y

    def is_attached(self, handle: Handle) -> bool:
        return handle in self.children


@dataclass(frozen=True)
class TileAtlas:
    """Geometry of a tileset sheet; ids are 1-based like Tiled gids."""

    columns: int
    tile_width: int
    tile_height: int

    def frame_for(self, tile_index: int) -> Tuple[int, int, int, int]:
        """Source rect (x, y, w, h) of ``tile_index`` on the sheet."""
        row, col = divmod(tile_index - 1, self.columns)
        return (col * self.tile_width, row * self.tile_height, self.tile_width, self.tile_height)

    def map_position(self, location: Location) -> Tuple[float, float]:
        return (float(location.col * self.tile_width), float(location.row * self.tile_height))

    def sprite_for(self, tile_index: int) -> Sprite:
        return Sprite(tile_index=tile_index)


def build_layer_group(layer: TileLayer, atlas: TileAtlas) -> Group:
    """One sprite per non-empty cell of ``layer``."""
    group = Group()
    for loc, index in layer.cells():
        if index > 0:
            sprite = atlas.sprite_for(index)
            sprite.x, sprite.y = atlas.map_position(loc)
            group.add(sprite)
    return group
