"""Track metadata as cataloged by the library scan."""
from dataclasses import dataclass
from typing import Optional

STYLES = ("tango", "vals", "milonga", "cortina")


@dataclass(frozen=True)
class Track:
    """One audio file in the library. Identity is the id (path relative to the music root)."""
    id: str
    title: str
    artist: str
    album: str
    genre: str
    year: Optional[int]
    duration: float  # seconds
    style: str  # "tango" | "vals" | "milonga" | "cortina"
    source_path: str
    relative_path: str


def track_to_dict(t: Track) -> dict:
    return {
        "id": t.id,
        "sourcePath": t.source_path,
        "relativePath": t.relative_path,
        "title": t.title,
        "artist": t.artist,
        "album": t.album,
        "genre": t.genre,
        "year": t.year,
        "duration": t.duration,
        "style": t.style,
    }


def track_from_dict(item: dict) -> Track:
    """Build a Track from its JSON document shape. Raises KeyError when id is missing."""
    year = item.get("year")
    return Track(
        id=item["id"],
        title=item.get("title") or "",
        artist=item.get("artist") or "",
        album=item.get("album") or "",
        genre=item.get("genre") or "",
        year=int(year) if isinstance(year, (int, float)) and not isinstance(year, bool) else None,
        duration=float(item.get("duration") or 0.0),
        style=item.get("style") or "tango",
        source_path=item.get("sourcePath") or "",
        relative_path=item.get("relativePath") or item["id"],
    )
