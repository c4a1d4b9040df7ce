# meeting_notes/routers/transcripts.py
from fastapi import APIRouter, UploadFile, File, Depends

from ..config import Settings, get_settings
from ..schemas import TranscriptUploadResponse
from ..services.transcripts import load_transcript

router = APIRouter(prefix="/transcripts", tags=["transcripts"])

@router.post("/upload", response_model=TranscriptUploadResponse)
async def upload_transcript(file: UploadFile = File(...), settings: Settings = Depends(get_settings)):
    # read one byte past the limit so oversize files are caught without buffering them whole
    data = await file.read(settings.max_upload_bytes + 1)
    loaded = load_transcript(
        file.filename or "",
        file.content_type,
        data,
        max_bytes=settings.max_upload_bytes,
    )
    return {
        "filename": loaded.filename,
        "transcript": loaded.transcript,
        "parsed": loaded.parsed,
        "size_bytes": loaded.size_bytes,
    }
