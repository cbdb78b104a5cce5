"""Resolve a validated raw plan's track ids against the catalog."""
from typing import List, Optional, Tuple

from tandadj.core.catalog import TrackCatalog
from tandadj.core.pattern import PATTERN
from tandadj.models.playlist import Tanda
from tandadj.models.track import Track

DEFAULT_REASONING = "AI selected this tanda for flow."


def _resolve(catalog: TrackCatalog, track_id) -> Optional[Track]:
    if not isinstance(track_id, str):
        return None
    return catalog.find_by_id(track_id)


def _reasoning(entry: dict) -> str:
    reasoning = entry.get("reasoning")
    return reasoning if isinstance(reasoning, str) and reasoning else DEFAULT_REASONING


def hydrate_plan(plan: dict, catalog: TrackCatalog) -> Tuple[List[Tanda], List[Optional[Track]]]:
    """Materialize tandas and cortinas.

    Unknown ids are dropped (tandas may come out short) and each tanda is
    clamped to its pattern slot size. Cortinas keep their position; an
    unknown cortina id leaves that slot empty.
    """
    tandas = []
    for idx, (entry, slot) in enumerate(zip(plan["tandas"], PATTERN)):
        resolved = [_resolve(catalog, track_id) for track_id in entry.get("trackIds") or []]
        tracks = [t for t in resolved if t is not None][: slot.size]
        tandas.append(
            Tanda(
                id=f"tanda-{idx + 1}",
                type=entry.get("type") or slot.style,
                reasoning=_reasoning(entry),
                tracks=tracks,
            )
        )

    cortina_ids = plan.get("cortinaTrackIds")
    if not isinstance(cortina_ids, list):
        cortina_ids = []
    cortinas = [_resolve(catalog, track_id) for track_id in cortina_ids[: len(PATTERN)]]
    cortinas += [None] * (len(PATTERN) - len(cortinas))
    return tandas, cortinas
