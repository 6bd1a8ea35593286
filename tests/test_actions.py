from __future__ import annotations

from conftest import make_layer
from tilewalk.state.actors import make_player
from tilewalk.state.world import SIGN_INDEX, Location
from tilewalk.systems.actions import (
    Blocked,
    Interact,
    InteractionKind,
    Move,
    classify_step,
    commit_move,
)


def test_blocked_by_obstacle_leaves_actor_in_place() -> None:
    obstacles = make_layer(20, 20, {(1, 4): 22})
    player = make_player(Location(1, 3), 12, 45)

    outcome = classify_step(player, (0, 1), obstacles)

    assert isinstance(outcome, Blocked)
    assert player.location == Location(1, 3)


def test_move_onto_empty_cell() -> None:
    obstacles = make_layer(20, 20)
    player = make_player(Location(1, 3), 12, 45)
    assert classify_step(player, (1, 0), obstacles) == Move(Location(2, 3))
    assert classify_step(player, (-1, -1), obstacles) == Move(Location(0, 2))


def test_edge_of_map_is_blocked() -> None:
    obstacles = make_layer(5, 5)
    player = make_player(Location(0, 0), 12, 45)
    assert isinstance(classify_step(player, (-1, 0), obstacles), Blocked)
    assert isinstance(classify_step(player, (0, -1), obstacles), Blocked)


def test_sign_triggers_read_interaction() -> None:
    obstacles = make_layer(20, 20, {(5, 12): SIGN_INDEX})
    player = make_player(Location(5, 11), 12, 45)

    outcome = classify_step(player, (0, 1), obstacles)

    assert outcome == Interact(InteractionKind.READ_SIGN, Location(5, 12))
    assert player.location == Location(5, 11)


def test_classify_is_pure() -> None:
    obstacles = make_layer(4, 4, {(1, 2): 3})
    player = make_player(Location(1, 1), 12, 45)
    first = classify_step(player, (0, 1), obstacles)
    second = classify_step(player, (0, 1), obstacles)
    assert first == second
    assert player.location == Location(1, 1)
    assert player.hit_points == 12


def test_commit_move_round_trip() -> None:
    player = make_player(Location(1, 3), 12, 45)
    commit_move(player, Location(7, 8))
    assert player.location == Location(7, 8)
