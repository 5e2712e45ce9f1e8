"""Startup sequence.

load tileset (background thread) -> settle delay -> extract palette ->
read persisted level -> construct engine -> draw once -> start the render
loop and attach keyboard routing.

A tileset that fails to load stops startup for good: there is no fallback
palette and no retry.
"""

from __future__ import annotations

import time
from typing import Optional

import pygame

from config import SETTLE_DELAY_MS, LOG_TIMING
from core.engine_api import EngineFactory, SimulationEngine
from core.input_router import InputRouter
from core.render_loop import RenderLoop
from storage.level_store import LevelStore
from textures.palette import extract_palette, load_image
from textures.resourcepath import TILESET_PATH


class BootstrapError(RuntimeError):
    pass


class Bootstrap:
    def __init__(
        self,
        scheduler,
        surface,
        level_store: LevelStore,
        engine_factory: EngineFactory,
        inventory,
        *,
        tileset_path: str = TILESET_PATH,
        settle_delay_ms: float = SETTLE_DELAY_MS,
    ) -> None:
        self.scheduler = scheduler
        self.surface = surface
        self.level_store = level_store
        self.engine_factory = engine_factory
        self.inventory = inventory
        self.tileset_path = tileset_path
        self.settle_delay_ms = settle_delay_ms

        self.engine: Optional[SimulationEngine] = None
        self.render_loop: Optional[RenderLoop] = None
        self.input_router: Optional[InputRouter] = None
        self.started = False
        self._load_started_at = 0.0

    def start(self) -> None:
        if self.started:
            return
        self.started = True
        self._load_started_at = time.perf_counter()
        self.scheduler.submit(
            load_image,
            self.tileset_path,
            on_done=self._on_image_loaded,
            on_error=self._on_image_failed,
        )

    def _on_image_loaded(self, image: pygame.Surface) -> None:
        self.log_timing("Loading tileset", self._load_started_at, time.perf_counter())
        self.scheduler.call_later(self.settle_delay_ms, lambda: self._construct(image))

    def _on_image_failed(self, exc: BaseException) -> None:
        print(f"[Bootstrap] Failed to load tileset {self.tileset_path}: {exc}")
        raise BootstrapError(f"could not load tileset {self.tileset_path}") from exc

    def _construct(self, image: pygame.Surface) -> None:
        start_time = time.perf_counter()
        palette = extract_palette(image)
        self.log_timing("Extracting palette", start_time, time.perf_counter())

        level = self.level_store.read()
        start_time = time.perf_counter()
        self.engine = self.engine_factory(palette, level)
        self.log_timing("Constructing engine", start_time, time.perf_counter())
        print(f"[Bootstrap] Engine ready at level {level}")

        self.render_loop = RenderLoop(
            self.engine, self.surface, self.level_store, self.inventory, self.scheduler
        )
        self.render_loop.draw_once()
        self.render_loop.start()

        self.input_router = InputRouter(self.engine)
        self.input_router.attach(self.scheduler)

    def log_timing(self, message: str, start_time: float, end_time: float, log: bool = LOG_TIMING):
        if log:
            print(f"[Bootstrap] {message} took {end_time - start_time:.6f} seconds")


__all__ = ["Bootstrap", "BootstrapError"]
