"""Host process: window, scheduler and startup wiring.

Separates concerns:
- Host: pygame setup, persistent storage, default key actions, main loop.
- Bootstrap: asset loading and engine construction.
- RenderLoop / InputRouter: everything that happens after startup.
"""

from __future__ import annotations

from typing import Optional

import pygame

from config import *
from core.bootstrap import Bootstrap
from core.engine_api import EngineFactory, load_engine_factory
from core.events import KEYDOWN
from core.scheduler import FrameScheduler
from render.surface import OutputSurface
from storage.level_store import LevelStore
from storage.local_storage import LocalStorage
from textures.resourcepath import TILESET_PATH
from ui.inventory_display import InventoryDisplay


class Host:
    def __init__(
        self,
        *,
        engine_factory: Optional[EngineFactory] = None,
        tileset_path: str = TILESET_PATH,
        storage_path: str = STORAGE_PATH,
        settle_delay_ms: float = SETTLE_DELAY_MS,
    ) -> None:
        pygame.init()
        pygame.display.set_caption(TITLE)

        self.surface = OutputSurface(status_height=STATUS_BAR_HEIGHT, vsync=VSYNC)
        # Something to look at while the tileset loads
        self.surface.resize(WIDTH, HEIGHT)

        self.scheduler = FrameScheduler(fps=FPS, vsync=VSYNC, present=self.surface.present)
        self.scheduler.set_default_action(KEYDOWN, pygame.K_ESCAPE, self.scheduler.stop)

        self.storage = LocalStorage(storage_path)
        self.level_store = LevelStore(self.storage, LEVEL_KEY)
        self.inventory = InventoryDisplay(self.surface)

        factory = engine_factory or load_engine_factory(ENGINE)
        self.bootstrap = Bootstrap(
            self.scheduler,
            self.surface,
            self.level_store,
            factory,
            self.inventory,
            tileset_path=tileset_path,
            settle_delay_ms=settle_delay_ms,
        )

    def run(self) -> None:  # pragma: no cover - interactive
        self.bootstrap.start()
        try:
            self.scheduler.run()
        finally:
            pygame.quit()


__all__ = ["Host"]
