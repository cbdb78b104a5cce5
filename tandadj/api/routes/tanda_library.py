"""Saved tanda templates copied out of playlists."""
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from tandadj.api.state import AppState, get_state
from tandadj.core.errors import NotFoundError
from tandadj.core.mutator import extract_tanda
from tandadj.models.playlist import saved_tanda_to_dict

router = APIRouter()


class SaveTandaBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    playlist_id: str = Field(alias="playlistId")
    tanda_index: Any = Field(None, alias="tandaIndex")
    name: Optional[str] = None


@router.post("", status_code=201)
def save_tanda(body: SaveTandaBody, state: AppState = Depends(get_state)):
    """Copy a playlist's tanda into the tanda library."""
    try:
        playlist = state.get_playlist(body.playlist_id)
        saved = extract_tanda(playlist, body.tanda_index, name=body.name)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    doc = saved_tanda_to_dict(saved)
    state.tanda_library.write(saved.id, doc)
    return doc


@router.get("")
def list_saved_tandas(state: AppState = Depends(get_state)):
    """List saved tandas, newest first."""
    tandas = state.tanda_library.list()
    tandas.sort(key=lambda t: t.get("savedAt") or "", reverse=True)
    return {"tandas": tandas}
