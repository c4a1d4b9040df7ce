# meeting_notes/routers/summarize.py
import logging
from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..errors import ApiError
from ..schemas import SummarizeRequest, SummarizeResponse
from ..services.summarizer import summarize

logger = logging.getLogger(__name__)

router = APIRouter(tags=["summaries"])

@router.post("/summarize", response_model=SummarizeResponse)
async def summarize_transcript(body: SummarizeRequest, settings: Settings = Depends(get_settings)):
    """
    Mock summary: a fixed per-template layout over the first five transcript
    lines, returned after a model-dependent delay.
    """
    if not body.transcript or not body.prompt:
        raise ApiError(400, "Transcript and prompt are required")

    try:
        text = await summarize(
            body.transcript,
            body.prompt,
            body.model,
            body.template,
            delay_scale=settings.summary_delay_scale,
        )
    except Exception:
        logger.exception("Error in summarize API")
        raise ApiError(500, "Failed to generate summary")
    return {"summary": text}
