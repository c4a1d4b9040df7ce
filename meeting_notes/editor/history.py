# meeting_notes/editor/history.py
from __future__ import annotations

from typing import List


class EditHistory:
    """
    Linear undo/redo log over snapshots of a text buffer.

    Index 0 holds the value editing started from. Committing after an undo
    drops everything past the current index, so there is never more than one
    redo branch. Moving past either end is a no-op.
    """

    def __init__(self, initial: str = "") -> None:
        self._entries: List[str] = [initial]
        self._index: int = 0

    def reset(self, initial: str) -> None:
        self._entries = [initial]
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> str:
        return self._entries[self._index]

    def __len__(self) -> int:
        return len(self._entries)

    def commit(self, text: str) -> None:
        del self._entries[self._index + 1:]
        self._entries.append(text)
        self._index = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> str | None:
        if not self.can_undo():
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> str | None:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]
