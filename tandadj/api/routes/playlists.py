"""Playlist generation, retrieval, and edits (stored as JSON, one file per playlist)."""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field

from tandadj.api.state import AppState, get_state
from tandadj.core.errors import InvalidArgumentError, NotFoundError
from tandadj.core.mutator import move_tanda, rename_playlist, replace_track
from tandadj.core.pipeline import generate_playlist

router = APIRouter()


class CreatePlaylistBody(BaseModel):
    name: Optional[str] = None
    prompt: Optional[str] = None


class UpdatePlaylistBody(BaseModel):
    name: Optional[str] = None
    prompt: Optional[str] = None


# Index fields stay untyped so malformed values reach the mutator and come back as 400
class MoveTandaBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_index: Any = Field(None, alias="fromIndex")
    to_index: Any = Field(None, alias="toIndex")


class ReplaceTrackBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tanda_index: Any = Field(None, alias="tandaIndex")
    track_index: Any = Field(None, alias="trackIndex")
    replacement_track_id: Any = Field(None, alias="replacementTrackId")


def _load(state: AppState, playlist_id: str):
    try:
        return state.get_playlist(playlist_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("")
def list_playlists(state: AppState = Depends(get_state)):
    """List playlist summaries, most recently updated first."""
    playlists = [
        {"id": doc.get("id"), "name": doc.get("name"), "updatedAt": doc.get("updatedAt")}
        for doc in state.playlists.list()
        if doc.get("id")
    ]
    playlists.sort(key=lambda p: p["updatedAt"] or "", reverse=True)
    return {"playlists": playlists}


@router.get("/{playlist_id}")
def get_playlist(playlist_id: str, state: AppState = Depends(get_state)):
    doc = state.playlists.read(playlist_id)
    if doc is None:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return doc


@router.post("", status_code=201)
async def create_playlist(
    body: CreatePlaylistBody | None = Body(None),
    state: AppState = Depends(get_state),
):
    """Generate a playlist with the agent, falling back to the random planner."""
    catalog = await run_in_threadpool(state.catalog)
    if not len(catalog):
        raise HTTPException(status_code=400, detail="Library is empty. Scan library first.")
    prompt = (body.prompt if body else None) or ""
    name = body.name if body else None
    playlist = await generate_playlist(catalog, prompt=prompt, name=name, agent=state.agent)
    return await run_in_threadpool(state.save_playlist, playlist)


@router.put("/{playlist_id}")
def update_playlist(
    playlist_id: str,
    body: UpdatePlaylistBody,
    state: AppState = Depends(get_state),
):
    """Rename or re-prompt a playlist."""
    playlist = _load(state, playlist_id)
    return state.save_playlist(rename_playlist(playlist, name=body.name, prompt=body.prompt))


@router.post("/{playlist_id}/move-tanda")
def move_tanda_route(
    playlist_id: str,
    body: MoveTandaBody,
    state: AppState = Depends(get_state),
):
    """Move a tanda (with its cortina) from fromIndex to toIndex."""
    playlist = _load(state, playlist_id)
    try:
        updated = move_tanda(playlist, body.from_index, body.to_index)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return state.save_playlist(updated)


@router.post("/{playlist_id}/replace-track")
def replace_track_route(
    playlist_id: str,
    body: ReplaceTrackBody,
    state: AppState = Depends(get_state),
):
    """Replace one track in a tanda with a library track."""
    playlist = _load(state, playlist_id)
    try:
        updated = replace_track(
            playlist,
            state.catalog(),
            body.tanda_index,
            body.track_index,
            body.replacement_track_id,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return state.save_playlist(updated)
