# meeting_notes/routers/share.py
import logging
from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..errors import ApiError, EmailDeliveryError
from ..schemas import ShareRequest, ShareResponse, ComposeRequest, ComposeResponse
from ..services.emailer import share_summary, compose_from_template

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/share", tags=["share"])

@router.post("", response_model=ShareResponse)
def share(body: ShareRequest, settings: Settings = Depends(get_settings)):
    try:
        count = share_summary(
            settings,
            recipients=body.recipients,
            summary=body.summary,
            body=body.body,
            subject=body.subject,
            fmt=body.format,
        )
    except EmailDeliveryError as e:
        logger.exception("Error in share API")
        raise ApiError(500, str(e) or "Failed to send email")

    return {
        "success": True,
        "message": f"Email sent successfully to {count} recipient(s)",
        "recipients": count,
        "format": body.format,
    }

@router.post("/compose", response_model=ComposeResponse)
def compose(body: ComposeRequest):
    """Fill an email template with the summary so the user can edit it before sending."""
    subject, text = compose_from_template(body.template, body.summary, body.date)
    return {"template": body.template, "subject": subject, "body": text}
