"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from tandadj.api.state import AppState, get_state
from tandadj.config import TANDADJ_WEB_ORIGIN

# Import routes after state to avoid circular imports
from tandadj.api.routes import audio, library, playlists, tanda_library

__all__ = ["app", "AppState", "get_state"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    state = get_state()
    state.ensure_dirs()
    logging.getLogger(__name__).info(
        "Data in %s, music root %s, planner %s",
        state.data_dir,
        state.music_root,
        state.agent.name if state.agent is not None else "fallback only",
    )
    yield


app = FastAPI(
    title="Tanda DJ API",
    description="Local REST API for building tango playlists",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[TANDADJ_WEB_ORIGIN] if TANDADJ_WEB_ORIGIN else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(library.router, prefix="/api/library", tags=["library"])
app.include_router(playlists.router, prefix="/api/playlists", tags=["playlists"])
app.include_router(tanda_library.router, prefix="/api/tanda-library", tags=["tanda-library"])
app.include_router(audio.router, prefix="/api/audio", tags=["audio"])
