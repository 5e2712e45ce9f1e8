from __future__ import annotations

from dataclasses import dataclass, field

import pygame

KEYDOWN = "keydown"
KEYUP = "keyup"

_PYGAME_KEY_TYPES = {pygame.KEYDOWN: KEYDOWN, pygame.KEYUP: KEYUP}


@dataclass
class KeyEvent:
    """Keyboard event handed to listeners.

    Listeners call `prevent_default()` to stop the host's own action for the
    key (e.g. Escape closing the window).
    """

    type: str
    key: int
    mod: int = 0
    unicode: str = ""
    scancode: int = 0
    default_prevented: bool = field(default=False, init=False)

    @property
    def name(self) -> str:
        return pygame.key.name(self.key)

    def prevent_default(self) -> None:
        self.default_prevented = True

    @classmethod
    def from_pygame(cls, event: pygame.event.Event) -> "KeyEvent":
        return cls(
            type=_PYGAME_KEY_TYPES[event.type],
            key=event.key,
            mod=getattr(event, "mod", 0),
            unicode=getattr(event, "unicode", ""),
            scancode=getattr(event, "scancode", 0),
        )

    @staticmethod
    def is_key_event(event: pygame.event.Event) -> bool:
        return event.type in _PYGAME_KEY_TYPES


__all__ = ["KeyEvent", "KEYDOWN", "KEYUP"]
