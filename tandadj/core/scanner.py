"""Scan a music directory into the JSON library (tags via mutagen)."""
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import mutagen

from tandadj.config import AUDIO_EXTENSIONS
from tandadj.core.document_store import write_json
from tandadj.models.track import Track, track_to_dict

logger = logging.getLogger(__name__)

_YEAR_REGEX = re.compile(r"(\d{4})")


def find_audio_files(directory: str | Path) -> List[Path]:
    """Recursively find all audio files in a directory."""
    root = Path(directory).expanduser().resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Directory not found: {root}")
    return [
        p for p in sorted(root.rglob("*"))
        if p.is_file() and p.suffix.lower() in AUDIO_EXTENSIONS
    ]


def guess_style(genre: str, title: str, album: str) -> str:
    """Dance style from free-text tags: vals/waltz, milonga, cortina, else tango."""
    text = f"{genre} {title} {album}".lower()
    if "vals" in text or "waltz" in text:
        return "vals"
    if "milonga" in text:
        return "milonga"
    if "cortina" in text:
        return "cortina"
    return "tango"


def _first_tag(tags, key: str) -> str:
    if tags is None:
        return ""
    value = tags.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return str(value).strip() if value else ""


def _parse_year(value: str) -> Optional[int]:
    match = _YEAR_REGEX.search(value or "")
    return int(match.group(1)) if match else None


def read_track(path: Path, root: Path) -> Track:
    """Read tags and duration for one file. Raises if mutagen cannot open it."""
    meta = mutagen.File(path, easy=True)
    if meta is None:
        raise ValueError("unsupported or unreadable audio file")
    tags = meta.tags
    relative_path = path.relative_to(root).as_posix()
    title = _first_tag(tags, "title") or path.name
    album = _first_tag(tags, "album") or "Unknown Album"
    genre = _first_tag(tags, "genre")
    info = getattr(meta, "info", None)
    duration = float(getattr(info, "length", 0.0) or 0.0)
    return Track(
        id=relative_path,
        title=title,
        artist=_first_tag(tags, "artist") or "Unknown Artist",
        album=album,
        genre=genre,
        year=_parse_year(_first_tag(tags, "date") or _first_tag(tags, "year")),
        duration=duration,
        style=guess_style(genre, title, album),
        source_path=str(path),
        relative_path=relative_path,
    )


def build_library(root_dir: str | Path, library_path: Path) -> dict:
    """Scan root_dir, write the library document to library_path, and return it."""
    root = Path(root_dir).expanduser().resolve()
    files = find_audio_files(root)
    logger.info("Scanning %d audio files under %s", len(files), root)
    tracks = []
    for path in files:
        try:
            tracks.append(read_track(path, root))
        except Exception as e:
            logger.warning("Could not parse %s: %s", path, e)
    library = {
        "generatedAt": datetime.now(timezone.utc).isoformat(),
        "root": str(root),
        "trackCount": len(tracks),
        "tracks": [track_to_dict(t) for t in tracks],
    }
    write_json(library_path, library)
    logger.info("Library written: %d tracks", len(tracks))
    return library
