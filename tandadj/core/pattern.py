"""Fixed dance-floor pattern every generated playlist follows."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PatternSlot:
    style: str
    size: int


PATTERN: Tuple[PatternSlot, ...] = (
    PatternSlot("tango", 4),
    PatternSlot("tango", 4),
    PatternSlot("vals", 3),
    PatternSlot("tango", 4),
    PatternSlot("tango", 4),
    PatternSlot("milonga", 3),
)

PATTERN_STYLES = [slot.style for slot in PATTERN]
