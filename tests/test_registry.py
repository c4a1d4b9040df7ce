"""Tests for meeting_notes.editor.registry: session lifetime and limits."""

from __future__ import annotations

import pytest

from meeting_notes.editor.registry import EditorRegistry


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestCapacity:
    def test_least_recently_used_evicted(self, clock):
        reg = EditorRegistry(max_sessions=2, idle_seconds=0, clock=clock)
        first, _ = reg.create("a")
        second, _ = reg.create("b")
        third, _ = reg.create("c")
        assert len(reg) == 2
        assert reg.get(first) is None
        assert reg.get(second) is not None
        assert reg.get(third) is not None

    def test_touch_keeps_session(self, clock):
        reg = EditorRegistry(max_sessions=2, idle_seconds=0, clock=clock)
        first, _ = reg.create("a")
        second, _ = reg.create("b")
        with reg.locked(first) as editor:
            assert editor.summary == "a"
        reg.create("c")
        assert reg.get(first) is not None
        assert reg.get(second) is None


class TestIdleExpiry:
    def test_idle_session_expires(self, clock):
        reg = EditorRegistry(idle_seconds=60, clock=clock)
        session_id, _ = reg.create("a")
        clock.now = 59
        assert reg.get(session_id) is not None
        clock.now = 59 + 60
        assert reg.get(session_id) is None
        assert len(reg) == 0

    def test_use_resets_idle_timer(self, clock):
        reg = EditorRegistry(idle_seconds=60, clock=clock)
        kept, _ = reg.create("a")
        clock.now = 30
        dropped, _ = reg.create("b")
        for now in (50, 100, 150):
            clock.now = now
            assert reg.get(kept) is not None
        assert reg.get(dropped) is None

    def test_locked_yields_none_when_expired(self, clock):
        reg = EditorRegistry(idle_seconds=10, clock=clock)
        session_id, _ = reg.create("a")
        clock.now = 10
        with reg.locked(session_id) as editor:
            assert editor is None

    def test_zero_disables_expiry(self, clock):
        reg = EditorRegistry(idle_seconds=0, clock=clock)
        session_id, _ = reg.create("a")
        clock.now = 10 ** 9
        assert reg.get(session_id) is not None

    def test_discard(self, clock):
        reg = EditorRegistry(clock=clock)
        session_id, _ = reg.create("a")
        assert reg.discard(session_id)
        assert not reg.discard(session_id)
        assert len(reg) == 0
