"""Edits to hydrated playlists. Each returns a new playlist and leaves the input untouched."""
import copy
import time
from datetime import datetime, timezone
from typing import Optional

from tandadj.core.catalog import TrackCatalog
from tandadj.core.errors import InvalidArgumentError, NotFoundError
from tandadj.models.playlist import Playlist, SavedTanda


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def normalize_playlist(playlist: Playlist) -> Playlist:
    """Give every tanda a track list, align one cortina slot per tanda, and re-stamp updated_at."""
    for tanda in playlist.tandas:
        if tanda.tracks is None:
            tanda.tracks = []
    cortinas = [c or None for c in playlist.cortinas or []][: len(playlist.tandas)]
    cortinas += [None] * (len(playlist.tandas) - len(cortinas))
    playlist.cortinas = cortinas
    playlist.updated_at = now_iso()
    return playlist


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_index(name: str, value, size: int) -> int:
    if not _is_index(value):
        raise InvalidArgumentError(f"{name} must be an integer")
    if not 0 <= value < size:
        raise InvalidArgumentError(f"{name} must be between 0 and {size - 1}")
    return value


def move_tanda(playlist: Playlist, from_index, to_index) -> Playlist:
    """Move a tanda together with its cortina. The tanda keeps its own type."""
    size = len(playlist.tandas)
    _check_index("fromIndex", from_index, size)
    _check_index("toIndex", to_index, size)
    updated = normalize_playlist(copy.deepcopy(playlist))
    tanda = updated.tandas.pop(from_index)
    cortina = updated.cortinas.pop(from_index)
    updated.tandas.insert(to_index, tanda)
    updated.cortinas.insert(to_index, cortina)
    return normalize_playlist(updated)


def replace_track(
    playlist: Playlist,
    catalog: TrackCatalog,
    tanda_index,
    track_index,
    replacement_track_id: str,
) -> Playlist:
    """Swap one track for a catalog track. Duplicates elsewhere in the playlist are allowed."""
    replacement = catalog.find_by_id(replacement_track_id) if isinstance(replacement_track_id, str) else None
    if replacement is None:
        raise NotFoundError("replacementTrackId not found in library")
    _check_index("tandaIndex", tanda_index, len(playlist.tandas))
    _check_index("trackIndex", track_index, len(playlist.tandas[tanda_index].tracks or []))
    updated = copy.deepcopy(playlist)
    updated.tandas[tanda_index].tracks[track_index] = replacement
    return normalize_playlist(updated)


def rename_playlist(playlist: Playlist, name: Optional[str] = None, prompt: Optional[str] = None) -> Playlist:
    updated = copy.deepcopy(playlist)
    if name is not None:
        updated.name = name
    if prompt is not None:
        updated.prompt = prompt
    return normalize_playlist(updated)


def extract_tanda(playlist: Playlist, tanda_index, name: Optional[str] = None) -> SavedTanda:
    """Copy a tanda out of the playlist into a standalone saved tanda."""
    if not _is_index(tanda_index) or not 0 <= tanda_index < len(playlist.tandas):
        raise NotFoundError("Tanda not found")
    tanda = copy.deepcopy(playlist.tandas[tanda_index])
    saved_at = now_iso()
    return SavedTanda(
        id=f"saved-tanda-{int(time.time() * 1000)}",
        name=name or f"{tanda.type} tanda {saved_at}",
        source_playlist_id=playlist.id,
        saved_at=saved_at,
        tanda=tanda,
    )
