# meeting_notes/routers/editor.py
from typing import Callable, Literal

from fastapi import APIRouter, Request, Response, Query

from ..editor import FORMAT_PRESETS, SummaryEditor
from ..editor.registry import EditorRegistry
from ..errors import ApiError
from ..schemas import (
    CreateEditorSession, EditorState, FormatRequest, ModeUpdate, SummaryUpdate, TypeRequest,
)
from ..services.exporter import export_summary

router = APIRouter(prefix="/editor/sessions", tags=["editor"])

def get_registry(request: Request) -> EditorRegistry:
    return request.app.state.editors

def _state(session_id: str, editor: SummaryEditor) -> dict:
    return {
        "id": session_id,
        "mode": editor.mode.value,
        "buffer": editor.buffer,
        "summary": editor.summary,
        "history_index": editor.history.index,
        "history_length": len(editor.history),
        "can_undo": editor.can_undo,
        "can_redo": editor.can_redo,
        "last_saved": editor.last_saved.isoformat() if editor.last_saved else None,
        "selection": editor.selection,
        "stats": editor.stats().to_dict(),
    }

def _apply(request: Request, session_id: str, op: Callable[[SummaryEditor], object]) -> dict:
    with get_registry(request).locked(session_id) as editor:
        if editor is None:
            raise ApiError(404, "Editor session not found")
        op(editor)
        return _state(session_id, editor)

@router.post("", response_model=EditorState, status_code=201)
def create_session(body: CreateEditorSession, request: Request):
    session_id, editor = get_registry(request).create(body.summary)
    return _state(session_id, editor)

@router.get("/{session_id}", response_model=EditorState)
def get_session(session_id: str, request: Request):
    return _apply(request, session_id, lambda e: None)

@router.delete("/{session_id}", status_code=204)
def close_session(session_id: str, request: Request):
    if not get_registry(request).discard(session_id):
        raise ApiError(404, "Editor session not found")
    return Response(status_code=204)

@router.put("/{session_id}/summary", response_model=EditorState)
def replace_summary(session_id: str, body: SummaryUpdate, request: Request):
    """The summary was regenerated upstream; history restarts from it."""
    return _apply(request, session_id, lambda e: e.set_summary(body.summary))

@router.post("/{session_id}/mode", response_model=EditorState)
def set_mode(session_id: str, body: ModeUpdate, request: Request):
    def op(e: SummaryEditor):
        if body.editing is None:
            e.toggle()
        else:
            e.set_editing(body.editing)
    return _apply(request, session_id, op)

@router.post("/{session_id}/type", response_model=EditorState)
def type_text(session_id: str, body: TypeRequest, request: Request):
    return _apply(request, session_id, lambda e: e.type(body.text))

@router.post("/{session_id}/format", response_model=EditorState)
def insert_formatting(session_id: str, body: FormatRequest, request: Request):
    if body.preset is not None and body.preset not in FORMAT_PRESETS:
        raise ApiError(400, f"Unknown formatting preset: {body.preset}")

    def op(e: SummaryEditor):
        if body.preset is not None:
            e.apply_preset(body.preset, body.selection_start, body.selection_end)
        else:
            e.insert_formatting(body.before, body.after, body.selection_start, body.selection_end)
    return _apply(request, session_id, op)

@router.post("/{session_id}/undo", response_model=EditorState)
def undo(session_id: str, request: Request):
    return _apply(request, session_id, lambda e: e.undo())

@router.post("/{session_id}/redo", response_model=EditorState)
def redo(session_id: str, request: Request):
    return _apply(request, session_id, lambda e: e.redo())

@router.post("/{session_id}/save", response_model=EditorState)
def save(session_id: str, request: Request):
    return _apply(request, session_id, lambda e: e.save())

@router.post("/{session_id}/cancel", response_model=EditorState)
def cancel(session_id: str, request: Request):
    return _apply(request, session_id, lambda e: e.cancel())

@router.get("/{session_id}/export")
def export(session_id: str, request: Request, format: Literal["markdown", "text"] = Query("markdown")):
    with get_registry(request).locked(session_id) as editor:
        if editor is None:
            raise ApiError(404, "Editor session not found")
        filename, media_type, content = export_summary(editor.summary, format)
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
