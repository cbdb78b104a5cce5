"""Library snapshot and directory scan."""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from tandadj.api.state import AppState, get_state
from tandadj.core.scanner import build_library

logger = logging.getLogger(__name__)

router = APIRouter()


class ScanBody(BaseModel):
    root: Optional[str] = None


@router.get("")
def get_library(state: AppState = Depends(get_state)):
    """Return the scanned library document."""
    return state.load_library()


@router.post("/scan")
def scan_library(
    body: ScanBody | None = Body(None),
    state: AppState = Depends(get_state),
):
    """Rescan the music root (or body.root) and replace the library."""
    root = (body.root if body else None) or str(state.music_root)
    try:
        return build_library(root, state.library_path)
    except FileNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OSError as e:
        logger.warning("Library scan of %s failed: %s", root, e)
        raise HTTPException(status_code=500, detail=str(e))
