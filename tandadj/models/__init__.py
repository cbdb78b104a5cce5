"""Data models for tracks, playlists, and saved tandas."""
from tandadj.models.playlist import Playlist, SavedTanda, Tanda
from tandadj.models.track import STYLES, Track

__all__ = [
    "Playlist",
    "SavedTanda",
    "STYLES",
    "Tanda",
    "Track",
]
