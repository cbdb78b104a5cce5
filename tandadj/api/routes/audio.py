"""Stream a library track's audio file."""
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from tandadj.api.state import AppState, get_state

router = APIRouter()


@router.get("/{track_id:path}")
def get_audio(track_id: str, state: AppState = Depends(get_state)):
    """Serve the source file of a cataloged track."""
    track = state.catalog().find_by_id(track_id)
    if track is None:
        raise HTTPException(status_code=404, detail="Track not found")
    path = Path(track.source_path)
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Audio file missing")
    return FileResponse(path)
