"""Pick the first built-in fence style that actually segments the text."""

from __future__ import annotations

from loguru import logger

from fencesplit.segment.pattern import DEFAULT_PATTERNS
from fencesplit.segment.scanner import Segment, split_text_into_chunks


def _accepts(segments: list[Segment]) -> bool:
    """A scan counts when it split the text or turned all of it into code."""
    return len(segments) > 1 or (len(segments) == 1 and segments[0].code)


def parse_text(text: str) -> list[Segment]:
    """Segment *text* with the first pattern in DEFAULT_PATTERNS that fits.

    Candidates are tried in order and never mixed. When none fits, the last
    scan is returned, which is one plain segment holding all of *text*.
    """
    segments: list[Segment] = []
    for pattern in DEFAULT_PATTERNS:
        segments = split_text_into_chunks(text, pattern)
        if _accepts(segments):
            logger.debug(f"parse_text: accepted {pattern.start!r} fence ({len(segments)} segments)")
            return segments
    return segments
