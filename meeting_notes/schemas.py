# meeting_notes/schemas.py
from typing import Optional, Any
from pydantic import BaseModel, Field

from .catalog import DEFAULT_MODEL, DEFAULT_TEMPLATE, DEFAULT_EMAIL_TEMPLATE, EmailFormat

# ---------- summarize ----------

class SummarizeRequest(BaseModel):
    transcript: Optional[str] = None
    prompt: Optional[str] = None
    model: str = DEFAULT_MODEL
    template: str = DEFAULT_TEMPLATE

class SummarizeResponse(BaseModel):
    summary: str

# ---------- share ----------

class ShareRequest(BaseModel):
    # Loose on purpose: the handler reports missing/invalid recipients itself
    recipients: Any = None
    subject: Optional[str] = None
    body: Optional[str] = None
    # Echoed back as sent; values outside EmailFormat mail the text unchanged
    format: Any = EmailFormat.HTML.value
    summary: Optional[str] = None

class ShareResponse(BaseModel):
    success: bool = True
    message: str
    recipients: int
    format: Any

class ComposeRequest(BaseModel):
    template: str = DEFAULT_EMAIL_TEMPLATE
    summary: str = ""
    date: Optional[str] = None  # defaults to today

class ComposeResponse(BaseModel):
    template: str
    subject: str
    body: str

# ---------- transcripts ----------

class TranscriptUploadResponse(BaseModel):
    filename: str
    transcript: str
    parsed: bool
    size_bytes: int

# ---------- editor ----------

class CreateEditorSession(BaseModel):
    summary: str = ""

class SummaryUpdate(BaseModel):
    summary: str

class ModeUpdate(BaseModel):
    editing: Optional[bool] = None  # None toggles

class TypeRequest(BaseModel):
    text: str

class FormatRequest(BaseModel):
    preset: Optional[str] = None
    before: str = ""
    after: str = ""
    selection_start: int = 0
    selection_end: int = 0

class EditorStats(BaseModel):
    words: int
    characters: int
    lines: int
    sections: int
    action_items: int

class EditorState(BaseModel):
    id: str
    mode: str
    buffer: str
    summary: str
    history_index: int
    history_length: int
    can_undo: bool
    can_redo: bool
    last_saved: Optional[str] = None
    selection: tuple[int, int] = Field(default=(0, 0))
    stats: EditorStats
