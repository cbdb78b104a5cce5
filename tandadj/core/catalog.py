"""Read-only track catalog built from the library document."""
from typing import Dict, Iterable, List, Optional

from tandadj.models.track import STYLES, Track, track_from_dict


class TrackCatalog:
    """Snapshot of the scanned library, looked up by track id."""

    def __init__(self, tracks: Iterable[Track] = ()) -> None:
        self._tracks: List[Track] = list(tracks)
        self._by_id: Dict[str, Track] = {t.id: t for t in self._tracks}

    @classmethod
    def from_library(cls, library: dict) -> "TrackCatalog":
        """Build from a library document ({generatedAt, root, trackCount, tracks})."""
        tracks = []
        for item in library.get("tracks") or []:
            try:
                tracks.append(track_from_dict(item))
            except (KeyError, TypeError, ValueError):
                continue
        return cls(tracks)

    def all_tracks(self) -> List[Track]:
        return list(self._tracks)

    def find_by_id(self, track_id: str) -> Optional[Track]:
        return self._by_id.get(track_id)

    def __len__(self) -> int:
        return len(self._tracks)

    def group_by_style(self) -> Dict[str, List[Track]]:
        """Partition tracks into style buckets; unknown styles count as tango."""
        grouped: Dict[str, List[Track]] = {style: [] for style in STYLES}
        for track in self._tracks:
            style = track.style if track.style in grouped else "tango"
            grouped[style].append(track)
        return grouped
