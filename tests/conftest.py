from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from concurrent.futures import Future
from typing import List, Tuple

import pygame
import pytest


@pytest.fixture
def display():
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.display.quit()


class FakeEngine:
    """Scriptable engine that records every call in order."""

    def __init__(self, palette=None, level: int = 0, size: Tuple[int, int] = (320, 240)):
        self.palette = palette
        self.starting_level = level
        self.level = level
        self.size = size
        self.inventory = "level: 01"
        self.consume = False
        self.calls: List[tuple] = []

    def width(self) -> int:
        return self.size[0]

    def height(self) -> int:
        return self.size[1]

    def current_level(self) -> int:
        return self.level

    def draw(self, context) -> None:
        self.calls.append(("draw", context))

    def get_inventory(self) -> str:
        return self.inventory

    def on_keyboard_event(self, event, is_keydown: bool) -> bool:
        self.calls.append(("key", event.key, is_keydown))
        return self.consume


class FakeSurface:
    """Output surface whose context changes identity on every resize."""

    def __init__(self, width: int = 0, height: int = 0, log: list | None = None):
        self.width = width
        self.height = height
        self.generation = 0
        self.log = log if log is not None else []
        self.context = ("context", 0) if width or height else None
        self.status_context = None

    @property
    def size(self):
        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self.generation += 1
        self.context = ("context", self.generation)
        self.log.append(("resize", width, height))


class FakeInventory:
    def __init__(self):
        self.texts: List[str] = []

    def set_text(self, text: str) -> None:
        self.texts.append(text)


class RecordingScheduler:
    """Collects requested frames, timers and listeners without running them."""

    def __init__(self):
        self.frames = []
        self.timers = []
        self.listeners = {}

    def request_frame(self, callback) -> None:
        self.frames.append(callback)

    def call_later(self, delay_ms, callback) -> None:
        self.timers.append((delay_ms, callback))

    def add_event_listener(self, event_type, handler) -> None:
        self.listeners.setdefault(event_type, []).append(handler)

    def run_next_frame(self) -> None:
        callback = self.frames.pop(0)
        callback()


class ImmediateExecutor:
    """Executor that runs work inline; futures are done on return."""

    def submit(self, fn, *args, **kwargs) -> Future:
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:  # noqa: BLE001 - stored on the future
            future.set_exception(exc)
        return future

    def shutdown(self, wait=True, cancel_futures=False) -> None:
        pass


class FakeClock:
    def __init__(self, step_ms: int = 16):
        self.step_ms = step_ms
        self.calls = []

    def tick(self, framerate: int = 0) -> int:
        self.calls.append(framerate)
        return self.step_ms


class ManualTime:
    def __init__(self):
        self.value = 0.0

    def __call__(self) -> float:
        return self.value

    def advance_ms(self, ms: float) -> None:
        self.value += ms / 1000.0


def make_image(width: int, height: int, color=(0, 0, 0, 0)) -> pygame.Surface:
    surface = pygame.Surface((width, height), pygame.SRCALPHA, 32)
    surface.fill(color)
    return surface
