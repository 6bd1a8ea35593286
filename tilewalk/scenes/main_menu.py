from __future__ import annotations

from tilewalk.render.stage import Stage

from .base import CONTINUE, RequestTransition, SceneEvent, TextScene
from .game_input import Keyboard


class MainMenuScene(TextScene):
    """Title prompt; holding confirm starts the game."""

    def __init__(
        self,
        stage: Stage,
        keyboard: Keyboard,
        *,
        prompt: str,
        center: tuple[float, float],
        next_mode: str = "ToWorld",
    ) -> None:
        super().__init__(stage, prompt, center=center)
        self.keyboard = keyboard
        self.next_mode = next_mode

    def poll_event(self) -> SceneEvent:
        if self.keyboard.is_held("confirm"):
            return RequestTransition(self.next_mode)
        return CONTINUE
