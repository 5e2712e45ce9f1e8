"""Per-frame driver for the engine.

Each activation runs, in this order:

1. resize the output surface to the engine's world size if they differ and
   re-fetch the drawing context (the old one belongs to the replaced window)
2. mirror the engine's current level into the level store if it changed
3. engine.draw(context)
4. refresh the inventory text
5. request the next frame

Resizing comes before drawing so the engine never draws into a stale
context. Once started the loop keeps rescheduling itself; there is no stop.
"""

from __future__ import annotations

from enum import Enum

from core.engine_api import SimulationEngine
from storage.level_store import LevelStore


class LoopState(Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"


class RenderLoop:
    def __init__(
        self,
        engine: SimulationEngine,
        surface,
        level_store: LevelStore,
        inventory,
        scheduler,
    ) -> None:
        self.engine = engine
        self.surface = surface
        self.level_store = level_store
        self.inventory = inventory
        self.scheduler = scheduler
        self.state = LoopState.IDLE
        self.context = surface.context

    def start(self) -> None:
        if self.state is LoopState.SCHEDULED:
            return
        self.scheduler.request_frame(self.frame)
        self.state = LoopState.SCHEDULED

    def draw_once(self) -> None:
        """Draw into the current context without touching the schedule."""
        self.engine.draw(self.context)

    def frame(self) -> None:
        width, height = self.engine.width(), self.engine.height()
        if self.surface.size != (width, height):
            self.surface.resize(width, height)
            self.context = self.surface.context

        level = self.engine.current_level()
        if level != self.level_store.read():
            self.level_store.write(level)

        self.engine.draw(self.context)
        self.inventory.set_text(self.engine.get_inventory())
        self.scheduler.request_frame(self.frame)


__all__ = ["RenderLoop", "LoopState"]
