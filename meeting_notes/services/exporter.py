# meeting_notes/services/exporter.py
from datetime import datetime, timezone
from typing import Optional

# format -> (extension, media type)
EXPORT_FORMATS = {
    "markdown": ("md", "text/markdown"),
    "text": ("txt", "text/plain"),
}

def export_filename(fmt: str, when: Optional[datetime] = None) -> str:
    ext, _ = EXPORT_FORMATS[fmt]
    when = when or datetime.now(timezone.utc)
    return f"meeting-summary-{when.date().isoformat()}.{ext}"

def export_summary(summary: str, fmt: str, when: Optional[datetime] = None) -> tuple[str, str, bytes]:
    """
    Returns: (filename, media_type, content)
    The summary is written out unchanged for both formats.
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}")
    _, media_type = EXPORT_FORMATS[fmt]
    return export_filename(fmt, when), media_type, (summary or "").encode("utf-8")
