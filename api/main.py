"""FastAPI server exposing SidebarUnlock functionality."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from sidebarunlock.config import Config
from sidebarunlock.document import detect_layout, get_video_id
from sidebarunlock.errors import MalformedDocument, UnlockFailed
from sidebarunlock.inspector import is_sidebar_empty
from sidebarunlock.models import Layout
from sidebarunlock.unlocker import SidebarUnlocker, create_default_unlocker
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# Pydantic models for API
# =============================================================================


class UnlockRequest(BaseModel):
    document: dict[str, Any]


class UnlockResponse(BaseModel):
    video_id: str
    unlocked: bool  # False when the sidebar was already present
    document: dict[str, Any]


class InspectRequest(BaseModel):
    document: dict[str, Any]


class InspectResponse(BaseModel):
    video_id: str | None
    layout: str | None
    sidebar_empty: bool | None


# =============================================================================
# App state
# =============================================================================


class AppState:
    unlocker: SidebarUnlocker | None = None
    layout: Layout = Layout.DESKTOP


state = AppState()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup application state."""
    config = Config.load()
    state.layout = config.layout
    state.unlocker = create_default_unlocker(config)
    logger.info(f"Unlocker ready (layout={config.layout.value}, proxy={config.proxy_host})")
    yield
    state.unlocker = None


# =============================================================================
# FastAPI app
# =============================================================================


app = FastAPI(
    title="SidebarUnlock API",
    description="Recover sidebars of age-restricted videos",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Routes
# =============================================================================


@app.get("/api/health")
def health():
    return {"status": "ok", "layout": state.layout.value}


@app.post("/api/unlock", response_model=UnlockResponse)
def unlock(request: UnlockRequest):
    """Unlock a next response and return it with sidebar and description filled in.

    The server's configured layout is used; every response a session sends
    is expected to share it.
    """
    document = request.document
    try:
        video_id = get_video_id(document)
    except MalformedDocument as e:
        raise HTTPException(status_code=422, detail=str(e))

    if not state.unlocker.inspector.is_sidebar_empty(document):
        return UnlockResponse(video_id=video_id, unlocked=False, document=document)

    try:
        state.unlocker.unlock(document)
    except UnlockFailed as e:
        raise HTTPException(status_code=502, detail=str(e))
    except MalformedDocument as e:
        raise HTTPException(status_code=422, detail=str(e))

    return UnlockResponse(video_id=video_id, unlocked=True, document=document)


@app.post("/api/inspect", response_model=InspectResponse)
def inspect(request: InspectRequest):
    """Report the video id, layout and sidebar state of a next response."""
    document = request.document
    try:
        video_id = get_video_id(document)
    except MalformedDocument:
        video_id = None

    layout = detect_layout(document)
    return InspectResponse(
        video_id=video_id,
        layout=layout.value if layout else None,
        sidebar_empty=is_sidebar_empty(document, layout) if layout else None,
    )
