from __future__ import annotations

from copy import deepcopy
from typing import Dict, Iterable, List, Optional, Set, Tuple

import pygame

from tilewalk.errors import ConfigError

# Default keymap for named commands. Each command may have several keys.
DEFAULT_BINDINGS: Dict[str, List[int]] = {
    "up": [pygame.K_UP],
    "down": [pygame.K_DOWN],
    "left": [pygame.K_LEFT],
    "right": [pygame.K_RIGHT],
    "confirm": [pygame.K_RETURN, pygame.K_KP_ENTER],
}


def _merge_default_bindings(binds: Dict[str, Iterable[int]]) -> Dict[str, List[int]]:
    merged = deepcopy(DEFAULT_BINDINGS)
    for k, vals in binds.items():
        merged[k] = [int(v) for v in vals]
    return merged


def key_code(name: str) -> int:
    """pygame keycode for a config key name such as ``"w"``, ``"RETURN"`` or ``"KP_ENTER"``."""
    name = str(name)
    code = None
    for candidate in (name, name.lower(), name.upper()):
        code = getattr(pygame, f"K_{candidate}", None)
        if code is not None:
            break
    if not isinstance(code, int):
        raise ConfigError(f"unknown key name {name!r}")
    return code


def resolve_bindings(names: Dict[str, Iterable[str]]) -> Dict[str, List[int]]:
    """Turn ``{command: [key names]}`` from the config into keycodes."""
    unknown = sorted(set(names) - set(DEFAULT_BINDINGS))
    if unknown:
        raise ConfigError(f"unknown key binding commands: {', '.join(unknown)}")
    return {command: [key_code(n) for n in keys] for command, keys in names.items()}


class Keyboard:
    """
    Level-triggered keyboard state.

    The engine feeds raw KEYDOWN/KEYUP codes into ``press``/``release``;
    scenes only ever ask "is this held right now?". Nothing is queued, so a
    key tapped and released between two samples is never seen.
    """

    def __init__(self, *, bindings: Optional[Dict[str, Iterable[int]]] = None) -> None:
        self.pressed: Set[int] = set()
        self.bindings: Dict[str, List[int]] = _merge_default_bindings(bindings or {})

    # ---- raw events --------------------------------------------------- #
    def press(self, code: int) -> None:
        self.pressed.add(code)

    def release(self, code: int) -> None:
        self.pressed.discard(code)

    def reset(self) -> None:
        self.pressed.clear()

    # ---- queries ------------------------------------------------------ #
    def is_pressed(self, code: int) -> bool:
        return code in self.pressed

    def is_held(self, command: str) -> bool:
        """True if any key bound to ``command`` is down."""
        return any(code in self.pressed for code in self.bindings.get(command, ()))

    def direction(self) -> Tuple[int, int]:
        """(d_row, d_col) from the held arrows; opposite keys cancel out."""
        d_row = (1 if self.is_held("down") else 0) - (1 if self.is_held("up") else 0)
        d_col = (1 if self.is_held("right") else 0) - (1 if self.is_held("left") else 0)
        return d_row, d_col
