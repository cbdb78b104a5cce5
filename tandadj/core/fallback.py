"""Randomized planner used when the agent is unavailable or its plan is invalid."""
import random
from typing import List, Optional, Set, Tuple

from tandadj.core.catalog import TrackCatalog
from tandadj.core.pattern import PATTERN, PatternSlot
from tandadj.models.playlist import Tanda
from tandadj.models.track import Track

FALLBACK_REASONING = "Fallback selection due to unavailable OpenAI plan."


def _shuffled(tracks: List[Track], rng: random.Random) -> List[Track]:
    copy = list(tracks)
    rng.shuffle(copy)
    return copy


def _fill_slot(
    slot: PatternSlot,
    pool: List[Track],
    used: Set[str],
    rng: random.Random,
) -> Tuple[List[Track], Set[str]]:
    """Pick up to slot.size unused tracks; returns them and the grown used set."""
    chosen = [t for t in _shuffled(pool, rng) if t.id not in used][: slot.size]
    return chosen, used | {t.id for t in chosen}


def fallback_plan(
    catalog: TrackCatalog,
    rng: Optional[random.Random] = None,
) -> Tuple[List[Tanda], List[Optional[Track]]]:
    """Build tandas and cortinas following PATTERN. Never fails; short pools give short tandas."""
    rng = rng or random.Random()
    grouped = catalog.group_by_style()
    used: Set[str] = set()
    tandas = []
    for idx, slot in enumerate(PATTERN):
        chosen, used = _fill_slot(slot, grouped[slot.style], used, rng)
        tandas.append(
            Tanda(id=f"tanda-{idx + 1}", type=slot.style, reasoning=FALLBACK_REASONING, tracks=chosen)
        )

    cortina_source = grouped["cortina"] or grouped["tango"]
    cortina_pool = [t for t in _shuffled(cortina_source, rng) if t.id not in used]
    cortinas = [cortina_pool[idx] if idx < len(cortina_pool) else None for idx in range(len(tandas))]
    return tandas, cortinas
