"""Shared application state (injected into routes)."""
from pathlib import Path
from typing import Optional

from tandadj.config import (
    DATA_DIR,
    MUSIC_ROOT,
    ensure_data_dirs,
    library_file,
    playlists_dir,
    tanda_library_dir,
)
from tandadj.core.agent import PlanningAgent, get_planning_agent
from tandadj.core.catalog import TrackCatalog
from tandadj.core.document_store import DocumentStore, load_library
from tandadj.core.errors import NotFoundError
from tandadj.models.playlist import Playlist, playlist_from_dict, playlist_to_dict

_UNSET = object()


class AppState:
    def __init__(
        self,
        data_dir: Path = DATA_DIR,
        music_root: Path = MUSIC_ROOT,
        agent=_UNSET,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.music_root = Path(music_root)
        self.library_path = library_file(self.data_dir)
        self.playlists = DocumentStore(playlists_dir(self.data_dir))
        self.tanda_library = DocumentStore(tanda_library_dir(self.data_dir))
        self._agent = agent

    def ensure_dirs(self) -> None:
        ensure_data_dirs(self.data_dir)

    def load_library(self) -> dict:
        return load_library(self.library_path, root=str(self.music_root))

    def catalog(self) -> TrackCatalog:
        """Fresh snapshot of the scanned library."""
        return TrackCatalog.from_library(self.load_library())

    def get_playlist(self, playlist_id: str) -> Playlist:
        doc = self.playlists.read(playlist_id)
        if doc is None:
            raise NotFoundError("Playlist not found")
        try:
            return playlist_from_dict(doc)
        except (AttributeError, KeyError, TypeError, ValueError):
            raise NotFoundError("Playlist not found")

    def save_playlist(self, playlist: Playlist) -> dict:
        doc = playlist_to_dict(playlist)
        self.playlists.write(playlist.id, doc)
        return doc

    @property
    def agent(self) -> Optional[PlanningAgent]:
        if self._agent is _UNSET:
            self._agent = get_planning_agent()
        return self._agent


_state = AppState()


def get_state() -> AppState:
    return _state
