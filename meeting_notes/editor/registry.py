# meeting_notes/editor/registry.py
from __future__ import annotations

import logging
import secrets
import threading
import time
from collections import OrderedDict
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from .session import SummaryEditor, DEFAULT_CHECKPOINT_DELTA

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 500
DEFAULT_IDLE_SECONDS = 3600.0


class EditorRegistry:
    """
    In-memory editor sessions keyed by a random id. Nothing outlives the process.

    Sessions stand in for editors open in a browser, so they are reclaimed
    when the client goes away without saying so: any session untouched for
    ``idle_seconds`` is dropped, and when ``max_sessions`` are open the least
    recently used one makes room for a new one.
    """

    def __init__(
        self,
        checkpoint_delta: int = DEFAULT_CHECKPOINT_DELTA,
        *,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
        idle_seconds: float = DEFAULT_IDLE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.checkpoint_delta = checkpoint_delta
        self.max_sessions = max(1, max_sessions)
        self.idle_seconds = idle_seconds
        self._clock = clock
        # id -> (editor, last used); oldest first
        self._sessions: OrderedDict[str, tuple[SummaryEditor, float]] = OrderedDict()
        self._lock = threading.RLock()

    def _evict_idle(self, now: float) -> None:
        if self.idle_seconds <= 0:
            return
        while self._sessions:
            session_id, (_, last_used) = next(iter(self._sessions.items()))
            if now - last_used < self.idle_seconds:
                break
            del self._sessions[session_id]
            logger.info(f"Editor session {session_id} expired after {now - last_used:.0f}s idle")

    def _touch(self, session_id: str) -> Optional[SummaryEditor]:
        now = self._clock()
        self._evict_idle(now)
        entry = self._sessions.get(session_id)
        if entry is None:
            return None
        self._sessions[session_id] = (entry[0], now)
        self._sessions.move_to_end(session_id)
        return entry[0]

    def create(self, summary: str) -> tuple[str, SummaryEditor]:
        editor = SummaryEditor(summary, checkpoint_delta=self.checkpoint_delta)
        with self._lock:
            now = self._clock()
            self._evict_idle(now)
            while len(self._sessions) >= self.max_sessions:
                oldest, _ = self._sessions.popitem(last=False)
                logger.info(f"Editor session {oldest} evicted (limit {self.max_sessions})")
            session_id = secrets.token_urlsafe(12)
            while session_id in self._sessions:
                session_id = secrets.token_urlsafe(12)
            self._sessions[session_id] = (editor, now)
        logger.info(f"Editor session {session_id} opened ({len(summary)} chars)")
        return session_id, editor

    def get(self, session_id: str) -> Optional[SummaryEditor]:
        with self._lock:
            return self._touch(session_id)

    def discard(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info(f"Editor session {session_id} closed")
        return removed

    @contextmanager
    def locked(self, session_id: str) -> Iterator[Optional[SummaryEditor]]:
        """Hold the registry lock while one request works on a session."""
        with self._lock:
            yield self._touch(session_id)

    def __len__(self) -> int:
        with self._lock:
            self._evict_idle(self._clock())
            return len(self._sessions)
