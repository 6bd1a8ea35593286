from __future__ import annotations

from typing import Optional

from tilewalk.render.stage import Stage

from .base import CONTINUE, RequestTransition, SceneEvent, TextScene


class TransitionScene(TextScene):
    """
    Title card shown for ``timeout_ms`` before handing off to ``next_mode``.

    The clock starts at the first ``update`` after ``on_enter`` rather than
    at ``on_enter`` itself, since only update() sees frame timestamps.
    ``start`` is None until then, so a frame stamped 0 still counts.
    """

    def __init__(
        self,
        stage: Stage,
        text: str,
        timeout_ms: float,
        next_mode: str,
        *,
        center: tuple[float, float],
    ) -> None:
        super().__init__(stage, text, center=center)
        self.timeout_ms = timeout_ms
        self.next_mode = next_mode
        self.start: Optional[float] = None
        self.elapsed = 0.0

    def on_enter(self) -> None:
        self.start = None
        self.elapsed = 0.0
        super().on_enter()

    def update(self, now: float) -> None:
        if self.start is None:
            self.start = now
        self.elapsed = now - self.start

    def poll_event(self) -> SceneEvent:
        if self.elapsed > self.timeout_ms:
            return RequestTransition(self.next_mode)
        return CONTINUE
