# meeting_notes/routers/catalog.py
from fastapi import APIRouter

from ..catalog import SUMMARY_TEMPLATES, AI_MODELS, EMAIL_TEMPLATES, EMAIL_FORMATS, as_listing

router = APIRouter(prefix="/catalog", tags=["catalog"])

@router.get("/templates")
def list_templates():
    return as_listing(SUMMARY_TEMPLATES)

@router.get("/models")
def list_models():
    return as_listing(AI_MODELS)

@router.get("/email-templates")
def list_email_templates():
    return as_listing(EMAIL_TEMPLATES)

@router.get("/formats")
def list_formats():
    return as_listing(EMAIL_FORMATS)
