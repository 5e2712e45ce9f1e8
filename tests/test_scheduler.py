from __future__ import annotations

import pygame
import pytest

from conftest import FakeClock, ImmediateExecutor, ManualTime
from core.events import KEYDOWN, KEYUP, KeyEvent
from core.scheduler import FrameScheduler


def make_scheduler(events=None, **kwargs):
    queue = events if events is not None else []

    def source():
        batch = list(queue)
        queue.clear()
        return batch

    now = kwargs.pop("now", ManualTime())
    scheduler = FrameScheduler(
        clock=FakeClock(),
        executor=ImmediateExecutor(),
        event_source=source,
        now=now,
        **kwargs,
    )
    return scheduler, queue, now


def test_frame_callback_runs_once_per_request() -> None:
    scheduler, _, _ = make_scheduler()
    runs = []
    scheduler.request_frame(lambda: runs.append(1))
    scheduler.tick()
    scheduler.tick()
    assert runs == [1]
    assert scheduler.frame_count == 1


def test_self_rescheduling_callback() -> None:
    scheduler, _, _ = make_scheduler()
    runs = []

    def frame():
        runs.append(scheduler.frame_count)
        scheduler.request_frame(frame)

    scheduler.request_frame(frame)
    for _ in range(3):
        scheduler.tick()
    assert runs == [0, 1, 2]
    assert scheduler.frame_pending


def test_second_pending_frame_is_rejected() -> None:
    scheduler, _, _ = make_scheduler()
    scheduler.request_frame(lambda: None)
    with pytest.raises(RuntimeError):
        scheduler.request_frame(lambda: None)


def test_present_only_after_a_frame() -> None:
    presented = []
    scheduler, _, _ = make_scheduler(present=lambda: presented.append(1))
    scheduler.tick()
    assert presented == []
    scheduler.request_frame(lambda: None)
    scheduler.tick()
    assert presented == [1]


def test_timers_fire_when_due_in_order() -> None:
    scheduler, _, now = make_scheduler()
    fired = []
    scheduler.call_later(100, lambda: fired.append("b"))
    scheduler.call_later(50, lambda: fired.append("a"))
    scheduler.tick()
    assert fired == []
    now.advance_ms(60)
    scheduler.tick()
    assert fired == ["a"]
    now.advance_ms(40)
    scheduler.tick()
    assert fired == ["a", "b"]


def test_submit_delivers_result_on_tick() -> None:
    scheduler, _, _ = make_scheduler()
    results = []
    scheduler.submit(lambda x: x * 2, 21, on_done=results.append)
    assert results == []
    scheduler.tick()
    assert results == [42]


def test_submit_error_goes_to_on_error() -> None:
    scheduler, _, _ = make_scheduler()
    errors = []

    def boom():
        raise OSError("broken")

    scheduler.submit(boom, on_done=lambda r: None, on_error=errors.append)
    scheduler.tick()
    assert isinstance(errors[0], OSError)


def test_submit_error_without_handler_propagates() -> None:
    scheduler, _, _ = make_scheduler()

    def boom():
        raise OSError("broken")

    scheduler.submit(boom, on_done=lambda r: None)
    with pytest.raises(OSError):
        scheduler.tick()


def test_unhandled_job_error_is_logged(capsys) -> None:
    scheduler, _, _ = make_scheduler()

    def boom():
        raise OSError("broken")

    scheduler.submit(boom, on_done=lambda r: None)
    with pytest.raises(OSError):
        scheduler.tick()
    assert "[Scheduler] Background job failed" in capsys.readouterr().out


def test_shutdown_logs_frame_count(capsys) -> None:
    scheduler, _, _ = make_scheduler()
    scheduler.request_frame(lambda: None)
    scheduler.tick()
    scheduler.shutdown()
    assert "[Scheduler] Stopped after 1 frames" in capsys.readouterr().out
    assert scheduler.running is False


def test_key_events_reach_listeners_in_order() -> None:
    scheduler, queue, _ = make_scheduler()
    seen = []
    scheduler.add_event_listener(KEYDOWN, lambda e: seen.append(("down", e.key)))
    scheduler.add_event_listener(KEYUP, lambda e: seen.append(("up", e.key)))
    queue.append(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a, mod=0, unicode="a", scancode=4))
    queue.append(pygame.event.Event(pygame.KEYUP, key=pygame.K_a, mod=0, unicode="a", scancode=4))
    scheduler.tick()
    assert seen == [("down", pygame.K_a), ("up", pygame.K_a)]


def test_events_are_handled_before_the_frame() -> None:
    scheduler, queue, _ = make_scheduler()
    order = []
    scheduler.add_event_listener(KEYDOWN, lambda e: order.append("key"))
    scheduler.request_frame(lambda: order.append("frame"))
    queue.append(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    scheduler.tick()
    assert order == ["key", "frame"]


def test_default_action_runs_unless_prevented() -> None:
    scheduler, _, _ = make_scheduler()
    actions = []
    scheduler.set_default_action(KEYDOWN, pygame.K_ESCAPE, lambda: actions.append("esc"))

    scheduler.dispatch(KeyEvent(type=KEYDOWN, key=pygame.K_ESCAPE))
    assert actions == ["esc"]

    scheduler.add_event_listener(KEYDOWN, lambda e: e.prevent_default())
    event = scheduler.dispatch(KeyEvent(type=KEYDOWN, key=pygame.K_ESCAPE))
    assert event.default_prevented
    assert actions == ["esc"]


def test_quit_event_stops_loop() -> None:
    scheduler, queue, _ = make_scheduler()
    scheduler.running = True
    queue.append(pygame.event.Event(pygame.QUIT))
    scheduler.tick()
    assert scheduler.running is False


def test_clock_cap_follows_vsync() -> None:
    capped, _, _ = make_scheduler(fps=30, vsync=True)
    capped.tick()
    assert capped.clock.calls == [30]
    uncapped, _, _ = make_scheduler(fps=30, vsync=False)
    uncapped.tick()
    assert uncapped.clock.calls == [0]
