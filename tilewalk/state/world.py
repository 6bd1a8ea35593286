from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from tilewalk.errors import MapDataError, OffMapError

Delta = Tuple[int, int]  # (d_row, d_col)

EMPTY_INDEX = 0
SIGN_INDEX = 15


@dataclass(frozen=True)
class Location:
    row: int
    col: int

    def __add__(self, delta: Delta) -> "Location":
        d_row, d_col = delta
        return Location(self.row + d_row, self.col + d_col)


@dataclass(frozen=True)
class TileLayer:
    """Immutable rectangular grid of tile indices, indexed [row][col]."""

    rows: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if self.rows:
            width = len(self.rows[0])
            for r, row in enumerate(self.rows):
                if len(row) != width:
                    raise MapDataError(f"row {r} has {len(row)} tiles, expected {width}")
                for c, index in enumerate(row):
                    if not isinstance(index, int) or index < 0:
                        raise MapDataError(f"bad tile index {index!r} at row {r} col {c}")

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "TileLayer":
        return cls(tuple(tuple(row) for row in rows))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def cells(self) -> Iterator[Tuple[Location, int]]:
        for r, row in enumerate(self.rows):
            for c, index in enumerate(row):
                yield Location(r, c), index


def is_on_map(layer: TileLayer, loc: Location) -> bool:
    return (
        0 <= loc.row < layer.row_count
        and 0 <= loc.col < len(layer.rows[loc.row])
    )


def tile_at(layer: TileLayer, loc: Location) -> int:
    # negative indices would wrap around in Python, so check explicitly
    if not is_on_map(layer, loc):
        raise OffMapError(f"{loc} is outside a {layer.row_count}x{layer.col_count} layer")
    return layer.rows[loc.row][loc.col]


def is_walkable(obstacles: TileLayer, loc: Location) -> bool:
    return is_on_map(obstacles, loc) and tile_at(obstacles, loc) == EMPTY_INDEX


def is_sign(obstacles: TileLayer, loc: Location) -> bool:
    return is_on_map(obstacles, loc) and tile_at(obstacles, loc) == SIGN_INDEX
