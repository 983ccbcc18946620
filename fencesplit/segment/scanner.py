"""Single-pattern scan of text into plain and code segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from fencesplit.segment.pattern import Pattern, build_matcher


@dataclass(frozen=True)
class Segment:
    text: str
    code: bool
    language: str | None = None  # only set on code segments with a non-empty tag

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly form; ``language`` is omitted when absent."""
        data: dict[str, Any] = {"text": self.text, "code": self.code}
        if self.language is not None:
            data["language"] = self.language
        return data


def split_text_into_chunks(text: str, pattern: Pattern | Mapping[str, Any]) -> list[Segment]:
    """Split *text* into an ordered list of plain and code segments.

    Plain text between fences is kept untouched. Code bodies and language
    tags are stripped. Text without a complete fence comes back as a single
    plain segment, including any dangling start marker.
    """
    matcher = build_matcher(Pattern.coerce(pattern))

    segments: list[Segment] = []
    last_index = 0

    for m in matcher.finditer(text):
        if m.start() > last_index:
            segments.append(Segment(text=text[last_index:m.start()], code=False))
        language, body = m.group(1), m.group(2)
        segments.append(Segment(text=body.strip(), code=True, language=language.strip() or None))
        last_index = m.end()

    # Remainder after the last fence, or the whole text if nothing matched
    if last_index < len(text) or not segments:
        segments.append(Segment(text=text[last_index:], code=False))

    return segments
