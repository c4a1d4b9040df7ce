# meeting_notes/editor/session.py
from __future__ import annotations

import enum
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from .history import EditHistory
from .stats import SummaryStats, summary_stats

logger = logging.getLogger(__name__)

DEFAULT_CHECKPOINT_DELTA = 10

class EditorMode(str, enum.Enum):
    PREVIEW = "preview"
    EDITING = "editing"

# Toolbar markers: (before, after)
FORMAT_PRESETS = {
    "bold": ("**", "**"),
    "italic": ("*", "*"),
    "bullet": ("• ", ""),
    "numbered": ("1. ", ""),
    "heading1": ("# ", ""),
    "heading2": ("## ", ""),
    "heading3": ("### ", ""),
}

def _now() -> datetime:
    return datetime.now(timezone.utc)

class SummaryEditor:
    """
    Editing state for one generated summary.

    ``summary`` is the published text owned by the caller; ``buffer`` is what
    the user is typing. Edits are checkpointed into an :class:`EditHistory`
    when the buffer length jumps by more than ``checkpoint_delta`` characters,
    and unconditionally on formatting insertions and saves.
    """

    def __init__(
        self,
        summary: str = "",
        *,
        checkpoint_delta: int = DEFAULT_CHECKPOINT_DELTA,
        on_save: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.summary = summary
        self.buffer = summary
        self.history = EditHistory(summary)
        self.mode = EditorMode.PREVIEW
        self.checkpoint_delta = checkpoint_delta
        self.on_save = on_save
        self.last_saved: Optional[datetime] = None
        self.selection: tuple[int, int] = (0, 0)

    # ---------- external summary ----------

    def set_summary(self, summary: str) -> None:
        """The caller replaced the summary: start a fresh history from it."""
        if summary == self.summary:
            return
        self.summary = summary
        self.buffer = summary
        self.history.reset(summary)
        self.selection = (0, 0)

    # ---------- modes ----------

    @property
    def is_editing(self) -> bool:
        return self.mode is EditorMode.EDITING

    def set_editing(self, editing: bool) -> None:
        # Re-entering edit mode keeps whatever was left in the buffer
        self.mode = EditorMode.EDITING if editing else EditorMode.PREVIEW

    def toggle(self) -> None:
        self.set_editing(not self.is_editing)

    # ---------- history ----------

    def commit(self, text: str) -> None:
        self.history.commit(text)

    def type(self, new_text: str) -> None:
        previous = self.buffer
        self.buffer = new_text
        if abs(len(new_text) - len(previous)) > self.checkpoint_delta:
            self.commit(new_text)

    def undo(self) -> None:
        text = self.history.undo()
        if text is not None:
            self.buffer = text

    def redo(self) -> None:
        text = self.history.redo()
        if text is not None:
            self.buffer = text

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo()

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo()

    # ---------- formatting ----------

    def insert_formatting(self, before: str, after: str = "", selection_start: int = 0, selection_end: int = 0) -> tuple[int, int]:
        """
        Wrap the selected range in ``before``/``after`` and checkpoint the result.

        Returns the new selection, shifted right by ``len(before)`` so the
        originally selected text stays selected.
        """
        size = len(self.buffer)
        start = min(max(selection_start, 0), size)
        end = min(max(selection_end, 0), size)
        if end < start:
            start, end = end, start

        selected = self.buffer[start:end]
        new_text = self.buffer[:start] + before + selected + after + self.buffer[end:]
        self.buffer = new_text
        self.commit(new_text)

        self.selection = (start + len(before), end + len(before))
        return self.selection

    def apply_preset(self, preset: str, selection_start: int = 0, selection_end: int = 0) -> tuple[int, int]:
        before, after = FORMAT_PRESETS[preset]
        return self.insert_formatting(before, after, selection_start, selection_end)

    # ---------- save / cancel ----------

    def save(self) -> None:
        self.summary = self.buffer
        if self.on_save is not None:
            self.on_save(self.buffer)
        self.mode = EditorMode.PREVIEW
        self.last_saved = _now()
        self.commit(self.buffer)
        logger.debug("Editor saved %d chars", len(self.buffer))

    def cancel(self) -> None:
        self.buffer = self.summary
        self.mode = EditorMode.PREVIEW

    # ---------- derived ----------

    def stats(self) -> SummaryStats:
        return summary_stats(self.buffer, self.summary)
