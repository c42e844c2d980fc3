from __future__ import annotations

from typing import Dict

END_MESSAGES: Dict[int, str] = {
    1: "You are a genius.",
    2: "You are pretty smart.",
    3: "You are dumb.",
    4: "You are an EQ-NO-RA-MOOOSE.",
}
FALLBACK_MESSAGE = "You are impressive in your own way."


def end_message(remaining: int) -> str:
    """Picks the end-of-game phrase for a remaining peg count."""
    return END_MESSAGES.get(remaining, FALLBACK_MESSAGE)


def summary_line(remaining: int) -> str:
    return f"{remaining} remaining. {end_message(remaining)}"
