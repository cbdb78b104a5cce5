"""Create a playlist: agent proposal, validation, then hydration or fallback."""
import logging
import random
import time
from datetime import date
from typing import Optional

from tandadj.core.agent import PlanningAgent
from tandadj.core.catalog import TrackCatalog
from tandadj.core.fallback import fallback_plan
from tandadj.core.hydrator import hydrate_plan
from tandadj.core.mutator import normalize_playlist, now_iso
from tandadj.core.proposer import CANDIDATE, propose
from tandadj.core.validator import plan_problems
from tandadj.models.playlist import Playlist

logger = logging.getLogger(__name__)


def default_playlist_name() -> str:
    return f"Milonga {date.today().isoformat()}"


async def generate_playlist(
    catalog: TrackCatalog,
    prompt: str = "",
    name: Optional[str] = None,
    agent: Optional[PlanningAgent] = None,
    rng: Optional[random.Random] = None,
) -> Playlist:
    """Always returns a usable playlist; agent problems only switch to the fallback planner."""
    result = await propose(catalog, prompt, agent)
    debug = dict(result.debug)
    debug["status"] = result.status
    debug["reason"] = result.reason
    debug["validationNotes"] = []

    if result.status == CANDIDATE:
        problems = plan_problems(result.plan)
        debug["validationNotes"] = problems
        if not problems:
            tandas, cortinas = hydrate_plan(result.plan, catalog)
            source = "agent"
        else:
            logger.warning("Discarding agent plan: %s", "; ".join(problems))
            tandas, cortinas = fallback_plan(catalog, rng)
            source = "fallback"
    else:
        tandas, cortinas = fallback_plan(catalog, rng)
        source = "fallback"
    logger.info("Playlist generated from %s plan", source)

    created_at = now_iso()
    playlist = Playlist(
        id=f"playlist-{int(time.time() * 1000)}",
        name=name or default_playlist_name(),
        prompt=prompt or "",
        generation_source=source,
        agent_debug=debug,
        tandas=tandas,
        cortinas=cortinas,
        created_at=created_at,
        updated_at=created_at,
    )
    return normalize_playlist(playlist)
