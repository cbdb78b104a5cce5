"""Instructions and response schema for the tanda planning agent."""
from tandadj.core.pattern import PATTERN

PLAN_SCHEMA_NAME = "tango_playlist_plan"

PLAN_SCHEMA = {
    "type": "object",
    "required": ["tandas", "cortinaTrackIds"],
    "properties": {
        "tandas": {
            "type": "array",
            "minItems": len(PATTERN),
            "maxItems": len(PATTERN),
            "items": {
                "type": "object",
                "required": ["type", "reasoning", "trackIds"],
                "properties": {
                    "type": {"type": "string", "enum": ["tango", "vals", "milonga"]},
                    "reasoning": {"type": "string"},
                    "trackIds": {"type": "array", "items": {"type": "string"}},
                },
                "additionalProperties": False,
            },
        },
        "cortinaTrackIds": {
            "type": "array",
            "minItems": len(PATTERN),
            "maxItems": len(PATTERN),
            "items": {"type": "string"},
        },
    },
    "additionalProperties": False,
}


def _pattern_text() -> str:
    return ", ".join(f"{slot.style}({slot.size})" for slot in PATTERN)


def build_instructions(user_prompt: str) -> str:
    """System instructions for one planning call, with the DJ's direction appended."""
    lines = [
        "You are an expert Tango DJ agent. Build tandas with strong dance-floor flow.",
        f"Pattern must be {_pattern_text()}.",
        f"Add one cortina id after each tanda ({len(PATTERN)} total).",
        "Use only track IDs from the provided library. Do not repeat track IDs.",
        "Orchestras can repeat only if separated by at least two full tandas.",
        "Prefer coherent orchestra/era feeling inside a tanda.",
    ]
    if user_prompt:
        lines.append(f"User direction: {user_prompt}")
    return "\n".join(lines)
