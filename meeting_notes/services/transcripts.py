# meeting_notes/services/transcripts.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import ApiError

logger = logging.getLogger(__name__)

WORD_TYPES = (
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)
ALLOWED_TYPES = (
    "text/plain",
    "application/pdf",
    *WORD_TYPES,
    "text/rtf",
    "application/rtf",
)
ALLOWED_EXTENSIONS = (".txt", ".pdf", ".doc", ".docx", ".rtf")

INVALID_UPLOAD = "Please upload a valid document file (.txt, .pdf, .doc, .docx, .rtf) - max {mb}MB"

PDF_NOTE = (
    "PDF file uploaded: {name}\n\n"
    "Note: Please copy and paste the text content from your PDF file into the text area below, "
    "as PDF parsing requires additional setup."
)
WORD_NOTE = (
    "Word document uploaded: {name}\n\n"
    "Note: Please copy and paste the text content from your Word document into the text area below, "
    "as Word document parsing requires additional setup."
)

@dataclass
class LoadedTranscript:
    filename: str
    transcript: str
    parsed: bool  # False when the text is a paste-it-yourself placeholder
    size_bytes: int

def _media_type(content_type: Optional[str]) -> str:
    """Content type without parameters, e.g. text/plain for "text/plain; charset=utf-8"."""
    return (content_type or "").split(";", 1)[0].strip().lower()

def is_allowed(filename: str, content_type: Optional[str]) -> bool:
    if _media_type(content_type) in ALLOWED_TYPES:
        return True
    return filename.lower().endswith(ALLOWED_EXTENSIONS)

def load_transcript(filename: str, content_type: Optional[str], data: bytes, *, max_bytes: int) -> LoadedTranscript:
    """
    Turn an uploaded document into transcript text.
    Plain text and RTF are decoded as UTF-8; PDF and Word files get a placeholder.
    """
    name = Path(filename or "transcript.txt").name
    if not is_allowed(name, content_type) or len(data) > max_bytes:
        logger.info(f"Rejected upload name={name!r} type={content_type!r} size={len(data)}")
        raise ApiError(400, INVALID_UPLOAD.format(mb=max_bytes // (1024 * 1024)))

    lower = name.lower()
    ctype = _media_type(content_type)
    if ctype == "application/pdf" or lower.endswith(".pdf"):
        return LoadedTranscript(name, PDF_NOTE.format(name=name), False, len(data))
    if ctype in WORD_TYPES or lower.endswith((".doc", ".docx")):
        return LoadedTranscript(name, WORD_NOTE.format(name=name), False, len(data))

    text = data.decode("utf-8-sig", errors="replace")
    return LoadedTranscript(name, text, True, len(data))
