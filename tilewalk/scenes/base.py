from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tilewalk.render.stage import Label, Stage


# ---------------------------------------------------------------------------
# Events a scene reports back to the manager
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class RequestTransition:
    target: str


SceneEvent = Union[Continue, RequestTransition]

CONTINUE = Continue()


# ---------------------------------------------------------------------------
# Base Scene
# ---------------------------------------------------------------------------


class Scene:
    """
    Base for all game modes.

    A scene is built once and reused every time it becomes active, so any
    per-activation state must be reset in on_enter(). The manager calls the
    hooks in a fixed order: on_enter() once, then update(now) every tick
    while active (poll_event() is asked first on every later tick), and
    on_exit() once when another scene takes over.
    """

    def on_enter(self) -> None:
        """Attach presentation state and reset per-activation fields."""
        return None

    def update(self, now: float) -> None:
        """Advance one tick. ``now`` is the frame timestamp in ms."""
        return None

    def poll_event(self) -> SceneEvent:
        """Ask whether the scene wants to hand control to another one."""
        return CONTINUE

    def on_exit(self) -> None:
        """Detach presentation state."""
        return None


class TextScene(Scene):
    """A scene that shows one centred line of text while it is active."""

    def __init__(self, stage: Stage, text: str, *, center: tuple[float, float]) -> None:
        self.stage = stage
        cx, cy = center
        self.label = Label(text=text, x=cx, y=cy)

    def on_enter(self) -> None:
        self.stage.attach(self.label)

    def on_exit(self) -> None:
        self.stage.detach(self.label)
