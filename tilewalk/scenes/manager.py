# manager.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Union

from tilewalk.errors import UnknownModeError

from .base import RequestTransition, Scene

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Transition state: exactly one of these is current at any tick boundary
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Empty:
    """No scene has been entered yet."""


@dataclass(frozen=True)
class Active:
    mode_id: str
    scene: Scene


@dataclass(frozen=True)
class Pending:
    from_id: str
    to_id: str
    from_scene: Scene
    to_scene: Scene


TransitionState = Union[Empty, Active, Pending]


class SceneManager:
    """
    Switches between registered scenes, one at a time.

    Call ``tick(now)`` once per frame. Each tick resolves the current
    state with exactly one step (enter the initial scene, poll the active
    scene, or finish a pending hand-off) and then updates the active scene,
    if there is one.
    """

    def __init__(self, scenes: Mapping[str, Scene], initial: str) -> None:
        self.scenes: Dict[str, Scene] = dict(scenes)
        if initial not in self.scenes:
            raise UnknownModeError(initial)
        self.initial = initial
        self.state: TransitionState = Empty()

    def lookup(self, mode_id: str) -> Scene:
        try:
            return self.scenes[mode_id]
        except KeyError:
            raise UnknownModeError(mode_id) from None

    @property
    def current(self) -> Scene | None:
        return self.state.scene if isinstance(self.state, Active) else None

    @property
    def current_id(self) -> str | None:
        return self.state.mode_id if isinstance(self.state, Active) else None

    # ------------------------------------------------------------------ #

    def _enter(self, mode_id: str) -> None:
        scene = self.lookup(mode_id)
        logger.debug("entering %s", mode_id)
        scene.on_enter()
        self.state = Active(mode_id, scene)

    def resolve(self) -> TransitionState:
        state = self.state
        if isinstance(state, Empty):
            self._enter(self.initial)
        elif isinstance(state, Active):
            event = state.scene.poll_event()
            if isinstance(event, RequestTransition):
                logger.debug("%s requested %s", state.mode_id, event.target)
                self.state = Pending(
                    state.mode_id, event.target, state.scene, self.lookup(event.target)
                )
        elif isinstance(state, Pending):
            logger.debug("leaving %s", state.from_id)
            state.from_scene.on_exit()
            logger.debug("entering %s", state.to_id)
            state.to_scene.on_enter()
            self.state = Active(state.to_id, state.to_scene)
        return self.state

    def tick(self, now: float) -> None:
        state = self.resolve()
        if isinstance(state, Active):
            state.scene.update(now)
