"""Pull loggable exercises out of assistant replies."""

import re

from ..models.chat import WorkoutSuggestion

_BOLD = re.compile(r"\*\*([^*]+)\*\*")
_SETS = re.compile(r"Sets?:\s*(\d+)", re.IGNORECASE)
_REPS = re.compile(r"Reps?:\s*(\d+)", re.IGNORECASE)
_WEIGHT = re.compile(r"Weight:\s*(\d+)", re.IGNORECASE)


def parse_suggestions(text: str) -> list[WorkoutSuggestion]:
    """Find ``**Name**`` blocks followed by Sets, Reps and Weight values.

    The text after each bold name, up to the next bold span, is searched
    for the three labels. Blocks missing any of them are skipped. Only the
    integer part of a weight is read, so ``135.5`` becomes 135.
    """
    suggestions = []
    sections = _BOLD.split(text)

    # split() alternates plain text and captured names: text, name, text, ...
    for i in range(1, len(sections), 2):
        name = sections[i].strip()
        details = sections[i + 1] if i + 1 < len(sections) else ""

        sets = _SETS.search(details)
        reps = _REPS.search(details)
        weight = _WEIGHT.search(details)

        if name and sets and reps and weight:
            suggestions.append(
                WorkoutSuggestion(
                    exercise=name,
                    sets=int(sets.group(1)),
                    reps=int(reps.group(1)),
                    weight=int(weight.group(1)),
                )
            )

    return suggestions
