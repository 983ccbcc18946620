"""Fence patterns and the regex rules built from them.

A pattern is a pair of start/stop markers. The markers are embedded into the
regex verbatim, so a marker such as ``"+++"`` keeps its regex meaning. Callers
that need literal semantics must pass ``re.escape``-d markers themselves.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

from fencesplit.errors import PatternError


@dataclass(frozen=True)
class Pattern:
    start: str
    stop: str

    @classmethod
    def coerce(cls, value: Pattern | Mapping[str, Any]) -> Pattern:
        """Accept a Pattern or a ``{"start": ..., "stop": ...}`` mapping."""
        if isinstance(value, Pattern):
            return value
        if not isinstance(value, Mapping):
            raise PatternError(f"Expected Pattern or mapping, got {type(value).__name__}")
        try:
            start, stop = value["start"], value["stop"]
        except KeyError as e:
            raise PatternError(f"Pattern is missing key {e.args[0]!r}") from e
        if not isinstance(start, str) or not isinstance(stop, str):
            raise PatternError("Pattern start/stop must be strings")
        return cls(start=start, stop=stop)


BACKTICK_FENCE = Pattern(start="```", stop="```")
MARKER_FENCE = Pattern(start="---START CODE---", stop="---END CODE---")

# Priority order used by parse_text
DEFAULT_PATTERNS: tuple[Pattern, ...] = (BACKTICK_FENCE, MARKER_FENCE)


def build_matcher(pattern: Pattern, capture_language: bool = True) -> re.Pattern[str]:
    """Compile the scan rule for *pattern*.

    Rule: start marker, an ASCII word-character language tag, optional whitespace,
    the shortest body (newlines included), stop marker.

    With ``capture_language`` the groups are ``(language, body)``; without it
    the tag is still consumed but only ``(body,)`` is captured.
    """
    tag = r"(\w*)" if capture_language else r"\w*"
    source = f"{pattern.start}{tag}\\s*(.*?){pattern.stop}"
    try:
        return re.compile(source, re.DOTALL | re.ASCII)
    except re.error as e:
        raise PatternError(f"Pattern {pattern!r} does not compile: {e}") from e
