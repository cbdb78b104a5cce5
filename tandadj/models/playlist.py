"""Playlists, tandas, and saved tanda templates."""
from dataclasses import dataclass, field
from typing import List, Optional

from tandadj.models.track import Track, track_from_dict, track_to_dict


@dataclass
class Tanda:
    """Ordered group of same-style tracks."""
    id: str
    type: str  # "tango" | "vals" | "milonga"
    reasoning: str
    tracks: List[Track] = field(default_factory=list)


@dataclass
class Playlist:
    """Six tandas with one cortina slot after each (index-aligned)."""
    id: str
    name: str
    prompt: str
    generation_source: str  # "agent" | "fallback"
    agent_debug: dict
    tandas: List[Tanda]
    cortinas: List[Optional[Track]]
    created_at: str
    updated_at: str


@dataclass
class SavedTanda:
    """A tanda copied out of a playlist into the tanda library."""
    id: str
    name: str
    source_playlist_id: str
    saved_at: str
    tanda: Tanda


def tanda_to_dict(t: Tanda) -> dict:
    return {
        "id": t.id,
        "type": t.type,
        "reasoning": t.reasoning,
        "tracks": [track_to_dict(track) for track in t.tracks],
    }


def tanda_from_dict(item: dict) -> Tanda:
    return Tanda(
        id=item.get("id") or "",
        type=item.get("type") or "tango",
        reasoning=item.get("reasoning") or "",
        tracks=[track_from_dict(track) for track in item.get("tracks") or [] if track],
    )


def playlist_to_dict(p: Playlist) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "prompt": p.prompt,
        "generationSource": p.generation_source,
        "agentDebug": p.agent_debug,
        "tandas": [tanda_to_dict(t) for t in p.tandas],
        "cortinas": [track_to_dict(c) if c is not None else None for c in p.cortinas],
        "createdAt": p.created_at,
        "updatedAt": p.updated_at,
    }


def playlist_from_dict(item: dict) -> Playlist:
    return Playlist(
        id=item["id"],
        name=item.get("name") or "",
        prompt=item.get("prompt") or "",
        generation_source=item.get("generationSource") or "fallback",
        agent_debug=item.get("agentDebug") or {},
        tandas=[tanda_from_dict(t) for t in item.get("tandas") or []],
        cortinas=[track_from_dict(c) if c else None for c in item.get("cortinas") or []],
        created_at=item.get("createdAt") or "",
        updated_at=item.get("updatedAt") or "",
    )


def saved_tanda_to_dict(s: SavedTanda) -> dict:
    return {
        "id": s.id,
        "name": s.name,
        "sourcePlaylistId": s.source_playlist_id,
        "savedAt": s.saved_at,
        "tanda": tanda_to_dict(s.tanda),
    }

