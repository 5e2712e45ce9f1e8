"""Contract between the host shell and the simulation engine.

The engine owns the world, the rules and the drawing. The shell only ever
talks to it through the operations below, so any object that provides them
(native bindings, a remote proxy, a test double) can be plugged in via
`config.ENGINE`.
"""

from __future__ import annotations

import importlib
from typing import Callable, Protocol

import pygame

from textures.palette import PixelBuffer


class SimulationEngine(Protocol):
    def width(self) -> int: ...

    def height(self) -> int: ...

    def current_level(self) -> int: ...

    def draw(self, context: pygame.Surface) -> None: ...

    def get_inventory(self) -> str: ...

    def on_keyboard_event(self, event, is_keydown: bool) -> bool: ...


# construct(palette, starting_level) -> engine; an engine class satisfies this
EngineFactory = Callable[[PixelBuffer, int], SimulationEngine]


def load_engine_factory(path: str) -> EngineFactory:
    """Resolve a "package.module:attribute" path to an engine factory."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"engine path must look like 'module:attribute', got {path!r}")
    module = importlib.import_module(module_name)
    factory = getattr(module, attr)
    if not callable(factory):
        raise TypeError(f"engine factory {path!r} is not callable")
    print(f"[Engine] Using engine factory {path}")
    return factory


__all__ = ["SimulationEngine", "EngineFactory", "load_engine_factory"]
