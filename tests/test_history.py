"""Tests for meeting_notes.editor.history: the linear undo/redo log."""

from __future__ import annotations

import pytest

from meeting_notes.editor.history import EditHistory


class TestEditHistory:
    def test_starts_with_initial_entry(self):
        h = EditHistory("start")
        assert h.entries == ("start",)
        assert h.index == 0
        assert h.current == "start"
        assert not h.can_undo()
        assert not h.can_redo()

    def test_commit_moves_index_to_end(self):
        h = EditHistory("a")
        h.commit("b")
        h.commit("c")
        assert h.entries == ("a", "b", "c")
        assert h.index == 2

    def test_undo_at_start_is_noop(self):
        h = EditHistory("a")
        assert h.undo() is None
        assert h.index == 0

    def test_redo_at_end_is_noop(self):
        h = EditHistory("a")
        h.commit("b")
        assert h.redo() is None
        assert h.index == 1

    def test_undo_then_redo_round_trip(self):
        h = EditHistory("a")
        for text in ("b", "c", "d"):
            h.commit(text)
        before = h.current
        assert h.undo() == "c"
        assert h.redo() == before
        assert h.index == 3

    def test_commit_after_undo_drops_redo_tail(self):
        h = EditHistory("a")
        h.commit("b")
        h.commit("c")
        h.undo()
        h.undo()
        h.commit("x")
        assert h.entries == ("a", "x")
        assert not h.can_redo()
        assert h.redo() is None
        assert h.current == "x"

    def test_reset(self):
        h = EditHistory("a")
        h.commit("b")
        h.reset("fresh")
        assert h.entries == ("fresh",)
        assert h.index == 0
        assert len(h) == 1


def _replay(steps: str) -> EditHistory:
    """Build a history from steps: c commits the next letter, u undoes, r redoes."""
    h = EditHistory("a")
    letters = iter("bcdefghijklmnop")
    for step in steps:
        if step == "c":
            h.commit(next(letters))
        elif step == "u":
            h.undo()
        else:
            h.redo()
    return h


class TestUndoRedoInverse:
    @pytest.mark.parametrize("steps", ["", "c", "ccc", "ccuu", "ccuuc", "cccuucc", "cuucrrcu", "ccccuuuru"])
    def test_redo_restores_every_reachable_index(self, steps):
        h = _replay(steps)
        # walk to each index and check undo then redo lands back on it
        while h.undo() is not None:
            pass
        for index in range(len(h)):
            assert h.index == index
            current = h.current
            if index > 0:
                h.undo()
                assert h.index == index - 1
                assert h.redo() == current
                assert h.index == index
                assert h.current == current
            h.redo()
        assert not h.can_redo()
