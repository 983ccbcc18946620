"""Raw code-body extraction across several fence patterns."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from loguru import logger

from fencesplit.segment.pattern import Pattern, build_matcher


def extract_code_blocks(
    text: str,
    patterns: Iterable[Pattern | Mapping[str, Any]],
) -> list[str]:
    """Return the stripped body of every fence, grouped by pattern.

    Results are ordered by pattern first, then by position in *text*, so
    with several patterns the output is not in document order.
    """
    blocks: list[str] = []
    for raw in patterns:
        pattern = Pattern.coerce(raw)
        found = [m.group(1).strip() for m in build_matcher(pattern, capture_language=False).finditer(text)]
        if found:
            logger.debug(f"Extracted {len(found)} block(s) with {pattern.start!r}...{pattern.stop!r}")
        blocks.extend(found)
    return blocks
