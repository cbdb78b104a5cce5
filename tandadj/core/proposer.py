"""Ask the planning agent for a raw tanda plan; never raises past this boundary."""
import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tandadj.core.agent import PlanningAgent
from tandadj.core.catalog import TrackCatalog
from tandadj.core.pattern import PATTERN_STYLES

logger = logging.getLogger(__name__)

UNAVAILABLE = "unavailable"
FAILURE = "failure"
CANDIDATE = "candidate"


@dataclass
class ProposalResult:
    """Outcome of one planning attempt. plan is set only for candidates."""
    status: str  # "unavailable" | "failure" | "candidate"
    reason: str = ""
    plan: Optional[dict] = None
    debug: Dict[str, Any] = field(default_factory=dict)


def condensed_tracks(catalog: TrackCatalog) -> List[dict]:
    """Per-track view sent to the agent (no file paths)."""
    return [
        {
            "id": t.id,
            "title": t.title,
            "artist": t.artist,
            "album": t.album,
            "style": t.style,
            "year": t.year,
            "duration": t.duration,
        }
        for t in catalog.all_tracks()
    ]


def _strip_fences(raw: str) -> str:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.split("\n", 1)[1] if "\n" in cleaned else ""
        if cleaned.rstrip().endswith("```"):
            cleaned = cleaned.rstrip()[:-3]
    return cleaned


def _plan_summary(plan: dict) -> Dict[str, Any]:
    tandas = plan.get("tandas")
    cortinas = plan.get("cortinaTrackIds")
    return {
        "tandaTypes": [t.get("type") if isinstance(t, dict) else None for t in tandas]
        if isinstance(tandas, list) else [],
        "cortinaCount": len(cortinas) if isinstance(cortinas, list) else 0,
    }


async def propose(
    catalog: TrackCatalog,
    prompt: str,
    agent: Optional[PlanningAgent],
) -> ProposalResult:
    """Request a plan from agent for the catalog and steering prompt."""
    tracks = condensed_tracks(catalog)
    debug: Dict[str, Any] = {
        "planner": agent.name if agent is not None else None,
        "trackCount": len(tracks),
        "durationMs": 0,
        "responseBytes": 0,
        "tandaTypes": [],
        "cortinaCount": 0,
    }
    if agent is None:
        result = ProposalResult(UNAVAILABLE, "No planning agent configured", debug=debug)
        logger.info("Plan proposal unavailable: %s", result.reason)
        return result

    request = {"pattern": list(PATTERN_STYLES), "tracks": tracks, "userPrompt": prompt or ""}
    started = time.monotonic()
    try:
        raw = await agent.plan(request)
    except Exception as e:
        debug["durationMs"] = int((time.monotonic() - started) * 1000)
        logger.warning("Planning agent %s failed after %d ms: %s", agent.name, debug["durationMs"], e)
        return ProposalResult(FAILURE, f"Agent call failed: {e}", debug=debug)
    debug["durationMs"] = int((time.monotonic() - started) * 1000)

    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if not isinstance(raw, str):
        logger.warning("Planning agent %s returned %s, expected text", agent.name, type(raw).__name__)
        return ProposalResult(FAILURE, "Agent response is not text", debug=debug)
    debug["responseBytes"] = len(raw.encode("utf-8"))

    try:
        plan = json.loads(_strip_fences(raw))
    except (ValueError, RecursionError) as e:
        logger.warning("Planning agent %s returned unparseable output: %s", agent.name, e)
        return ProposalResult(FAILURE, f"Could not parse agent response as JSON: {e}", debug=debug)
    if not isinstance(plan, dict):
        logger.warning("Planning agent %s returned %s, expected an object", agent.name, type(plan).__name__)
        return ProposalResult(FAILURE, "Agent response is not a JSON object", debug=debug)

    debug.update(_plan_summary(plan))
    logger.info(
        "Plan proposed by %s in %d ms (%d bytes): tandas=%s cortinas=%d",
        agent.name,
        debug["durationMs"],
        debug["responseBytes"],
        debug["tandaTypes"],
        debug["cortinaCount"],
    )
    return ProposalResult(CANDIDATE, plan=plan, debug=debug)
