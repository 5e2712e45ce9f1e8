from __future__ import annotations

from core.engine_api import SimulationEngine
from core.events import KeyEvent, KEYDOWN, KEYUP


class InputRouter:
    """Forwards key presses and releases to the engine.

    If the engine reports it consumed the event, the host's default action
    for that key is suppressed. Filtering, repeats and modifiers are left
    entirely to the engine.
    """

    def __init__(self, engine: SimulationEngine) -> None:
        self.engine = engine
        self.attached = False

    def attach(self, scheduler) -> None:
        if self.attached:
            return
        scheduler.add_event_listener(KEYDOWN, self.handle)
        scheduler.add_event_listener(KEYUP, self.handle)
        self.attached = True

    def handle(self, event: KeyEvent) -> None:
        if self.engine.on_keyboard_event(event, event.type == KEYDOWN):
            event.prevent_default()


__all__ = ["InputRouter"]
