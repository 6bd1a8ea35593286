from __future__ import annotations

from tilewalk.render.stage import Stage

from .base import CONTINUE, RequestTransition, SceneEvent, TextScene
from .game_input import Keyboard


class ReadSignScene(TextScene):
    """Shows the sign's text until confirm is held, then returns to the world."""

    def __init__(
        self,
        stage: Stage,
        keyboard: Keyboard,
        *,
        text: str,
        center: tuple[float, float],
        return_mode: str = "World",
    ) -> None:
        super().__init__(stage, text, center=center)
        self.keyboard = keyboard
        self.return_mode = return_mode

    def poll_event(self) -> SceneEvent:
        if self.keyboard.is_held("confirm"):
            return RequestTransition(self.return_mode)
        return CONTINUE
