# meeting_notes/main.py
import logging
import os
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .editor.registry import EditorRegistry
from .errors import install_error_handlers
from .routers import catalog, editor, share, summarize, transcripts

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    custom = settings is not None
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=settings.app_name)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    if custom:
        app.dependency_overrides[get_settings] = lambda: settings

    app.state.editors = EditorRegistry(
        checkpoint_delta=settings.editor_checkpoint_delta,
        max_sessions=settings.editor_max_sessions,
        idle_seconds=settings.editor_idle_seconds,
    )

    app.include_router(summarize.router)
    app.include_router(share.router)
    app.include_router(transcripts.router)
    app.include_router(editor.router)
    app.include_router(catalog.router)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    logger.info(f"{settings.app_name} ready (env={settings.env})")
    return app

app = create_app()

def run() -> None:
    import uvicorn
    uvicorn.run(
        "meeting_notes.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
