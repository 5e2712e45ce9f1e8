"""Single-threaded frame scheduler.

Plays the role a browser event loop plays for a page: it owns the only
thread that touches the engine, and every callback (OS events, finished
background jobs, timers, the frame callback) runs to completion on that
thread, one at a time, in this order on each tick:

1. queued pygame events, dispatched to listeners, then default actions
2. completion callbacks of background jobs
3. timers that have come due
4. the pending frame callback (at most one)
5. present the display, if a frame ran

Blocking work such as image decoding goes through `submit()`, which runs it
on a worker thread and hands the result back on the loop thread.
"""

from __future__ import annotations

import heapq
import itertools
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Tuple

import pygame

from config import FPS, VSYNC
from core.events import KeyEvent

Callback = Callable[[], None]


class FrameScheduler:
    def __init__(
        self,
        *,
        fps: int = FPS,
        vsync: bool = VSYNC,
        clock: Optional[Any] = None,
        executor: Optional[Executor] = None,
        event_source: Optional[Callable[[], List[Any]]] = None,
        present: Optional[Callback] = None,
        now: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.fps = fps
        self.vsync = vsync
        self.clock = clock or pygame.time.Clock()
        self._executor = executor
        self._owns_executor = executor is None
        self._event_source = event_source or pygame.event.get
        self._present = present
        self._now = now

        self._frame_callback: Optional[Callback] = None
        self._timers: List[Tuple[float, int, Callback]] = []
        self._timer_seq = itertools.count()
        self._jobs: List[Tuple[Future, Callable[[Any], None], Optional[Callable[[BaseException], None]]]] = []
        self._listeners: Dict[str, List[Callable[[KeyEvent], None]]] = {}
        self._default_actions: Dict[Tuple[str, int], Callback] = {}

        self.running = False
        self.frame_count = 0

    # ------------------------------------------------------------------
    # scheduling primitives
    # ------------------------------------------------------------------
    @property
    def frame_pending(self) -> bool:
        return self._frame_callback is not None

    def request_frame(self, callback: Callback) -> None:
        """Run `callback` once on the next tick.

        Only one frame callback may be pending; a callback that wants to run
        every frame requests itself again.
        """
        if self._frame_callback is not None:
            raise RuntimeError("a frame callback is already pending")
        self._frame_callback = callback

    def call_later(self, delay_ms: float, callback: Callback) -> None:
        due = self._now() + max(0.0, float(delay_ms)) / 1000.0
        heapq.heappush(self._timers, (due, next(self._timer_seq), callback))

    def submit(
        self,
        fn: Callable[..., Any],
        *args: Any,
        on_done: Callable[[Any], None],
        on_error: Optional[Callable[[BaseException], None]] = None,
    ) -> Future:
        """Run `fn(*args)` on a worker thread.

        `on_done(result)` or `on_error(exc)` runs later on the loop thread.
        Without `on_error` the exception is re-raised from `tick()`.
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="loader")
        future = self._executor.submit(fn, *args)
        self._jobs.append((future, on_done, on_error))
        return future

    # ------------------------------------------------------------------
    # events
    # ------------------------------------------------------------------
    def add_event_listener(self, event_type: str, handler: Callable[[KeyEvent], None]) -> None:
        self._listeners.setdefault(event_type, []).append(handler)

    def set_default_action(self, event_type: str, key: int, action: Callback) -> None:
        self._default_actions[(event_type, key)] = action

    def dispatch(self, event: KeyEvent) -> KeyEvent:
        for handler in list(self._listeners.get(event.type, ())):
            handler(event)
        if not event.default_prevented:
            action = self._default_actions.get((event.type, event.key))
            if action is not None:
                action()
        return event

    def _process_events(self) -> None:
        for event in self._event_source():
            if event.type == pygame.QUIT:
                self.stop()
            elif KeyEvent.is_key_event(event):
                self.dispatch(KeyEvent.from_pygame(event))

    # ------------------------------------------------------------------
    # loop
    # ------------------------------------------------------------------
    def _process_jobs(self) -> None:
        if not self._jobs:
            return
        pending = []
        finished = []
        for job in self._jobs:
            (finished if job[0].done() else pending).append(job)
        self._jobs = pending
        for future, on_done, on_error in finished:
            exc = future.exception()
            if exc is None:
                on_done(future.result())
            elif on_error is not None:
                on_error(exc)
            else:
                print(f"[Scheduler] Background job failed: {exc!r}")
                raise exc

    def _process_timers(self) -> None:
        now = self._now()
        while self._timers and self._timers[0][0] <= now:
            _, _, callback = heapq.heappop(self._timers)
            callback()

    def _process_frame(self) -> bool:
        callback = self._frame_callback
        if callback is None:
            return False
        # Cleared first so the callback can request the next frame
        self._frame_callback = None
        callback()
        self.frame_count += 1
        return True

    def tick(self) -> float:
        """Run one loop iteration; returns the elapsed time in seconds."""
        # With vsync the window flip paces us (see OutputSurface); the cap is
        # a safety net for drivers that don't honour it. Without vsync tick()
        # just measures.
        if self.vsync:
            dt = self.clock.tick(self.fps) / 1000.0
        else:
            dt = self.clock.tick() / 1000.0
        self._process_events()
        self._process_jobs()
        self._process_timers()
        if self._process_frame() and self._present is not None:
            self._present()
        return dt

    def run(self) -> None:  # pragma: no cover - interactive
        self.running = True
        try:
            while self.running:
                self.tick()
        finally:
            self.shutdown()

    def stop(self) -> None:
        self.running = False

    def shutdown(self) -> None:
        self.running = False
        print(f"[Scheduler] Stopped after {self.frame_count} frames")
        if self._executor is not None and self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None


__all__ = ["FrameScheduler"]
