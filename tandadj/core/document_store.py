"""Persist and load JSON documents (playlists, saved tandas, library) keyed by id."""
import json
import logging
import re
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

# Document ids become file names; keep them to one path segment
_DOC_ID_REGEX = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def read_json(path: Path, default=None):
    """Return parsed JSON from path, or default if missing or unreadable."""
    if not path.exists():
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return default


def write_json(path: Path, value) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(value, indent=2), encoding="utf-8")


class DocumentStore:
    """One JSON file per document in a flat directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def _path(self, doc_id: str) -> Optional[Path]:
        if not isinstance(doc_id, str) or not _DOC_ID_REGEX.match(doc_id):
            return None
        return self.directory / f"{doc_id}.json"

    def read(self, doc_id: str) -> Optional[dict]:
        """Return the document for doc_id or None."""
        p = self._path(doc_id)
        if p is None:
            return None
        doc = read_json(p)
        return doc if isinstance(doc, dict) else None

    def write(self, doc_id: str, doc: dict) -> None:
        p = self._path(doc_id)
        if p is None:
            raise ValueError(f"Invalid document id: {doc_id!r}")
        write_json(p, doc)

    def list(self) -> List[dict]:
        """Return every readable document in the directory (unordered)."""
        if not self.directory.is_dir():
            return []
        out = []
        for p in sorted(self.directory.glob("*.json")):
            if not p.is_file():
                continue
            doc = read_json(p)
            if isinstance(doc, dict):
                out.append(doc)
        return out


def empty_library(root: str) -> dict:
    return {"generatedAt": None, "root": root, "trackCount": 0, "tracks": []}


def load_library(path: Path, root: str = "") -> dict:
    """Load the library document; an empty library if none was scanned yet."""
    library = read_json(path)
    if not isinstance(library, dict):
        return empty_library(root)
    return library
