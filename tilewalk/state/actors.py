from __future__ import annotations

from dataclasses import dataclass

from tilewalk.state.world import Location


@dataclass
class Stats:
    hp: int = 12
    max_hp: int = 12


@dataclass
class Actor:
    """The player-controlled walker on the tile grid.

    ``location`` is only ever changed through
    ``tilewalk.systems.actions.commit_move``.
    """
    location: Location
    stats: Stats
    texture_index: int = 45

    @property
    def hit_points(self) -> int:
        return self.stats.hp


def make_player(location: Location, hp: int, texture_index: int) -> Actor:
    return Actor(location=location, stats=Stats(hp=hp, max_hp=hp), texture_index=texture_index)
