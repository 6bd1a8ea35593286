"""
Step classification for the player.

Moving is split in two phases: ``classify_step`` looks at the obstacle
layer and decides what a step would do without touching the actor, and
``commit_move`` applies a ``Move`` once the caller has decided to.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from tilewalk.state.actors import Actor
from tilewalk.state.world import Delta, Location, TileLayer, is_sign, is_walkable


class InteractionKind(Enum):
    READ_SIGN = "ReadSign"


@dataclass(frozen=True)
class Move:
    location: Location


@dataclass(frozen=True)
class Blocked:
    pass


@dataclass(frozen=True)
class Interact:
    kind: InteractionKind
    location: Location


StepOutcome = Union[Move, Blocked, Interact]

BLOCKED = Blocked()


def classify_step(actor: Actor, delta: Delta, obstacles: TileLayer) -> StepOutcome:
    new_loc = actor.location + delta
    if is_walkable(obstacles, new_loc):
        return Move(new_loc)
    if is_sign(obstacles, new_loc):
        return Interact(InteractionKind.READ_SIGN, new_loc)
    return BLOCKED


def commit_move(actor: Actor, new_loc: Location) -> None:
    """Overwrite the actor's location. Only call after ``classify_step`` said ``Move``."""
    actor.location = new_loc
