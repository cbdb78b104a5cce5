"""Structural check of a raw agent plan against the fixed pattern."""
from typing import List

from tandadj.core.pattern import PATTERN_STYLES


def plan_problems(plan) -> List[str]:
    """Return why plan does not fit the pattern; empty when it does.

    Only the shape is checked. Whether track ids exist in the catalog is left
    to hydration.
    """
    if not isinstance(plan, dict):
        return ["plan is not an object"]
    tandas = plan.get("tandas")
    if not isinstance(tandas, list):
        return ["tandas is missing or not a list"]
    if len(tandas) != len(PATTERN_STYLES):
        return [f"expected {len(PATTERN_STYLES)} tandas, got {len(tandas)}"]
    problems = []
    for i, (entry, style) in enumerate(zip(tandas, PATTERN_STYLES)):
        if not isinstance(entry, dict):
            problems.append(f"tanda {i} is not an object")
            continue
        if entry.get("type") != style:
            problems.append(f"tanda {i} type is {entry.get('type')!r}, expected {style!r}")
        track_ids = entry.get("trackIds")
        if not isinstance(track_ids, list):
            problems.append(f"tanda {i} trackIds is missing or not a list")
        elif not all(isinstance(track_id, str) for track_id in track_ids):
            problems.append(f"tanda {i} trackIds holds non-string ids")
    return problems


def validate_plan(plan) -> bool:
    return not plan_problems(plan)
