"""
fencesplit - split free-form text into plain and fenced code segments.
"""

__version__ = "0.1.0"

from fencesplit.errors import FencesplitError, PatternError
from fencesplit.segment import (
    BACKTICK_FENCE,
    DEFAULT_PATTERNS,
    MARKER_FENCE,
    Pattern,
    Segment,
    build_matcher,
    extract_code_blocks,
    parse_text,
    split_text_into_chunks,
)

__all__ = [
    "BACKTICK_FENCE",
    "DEFAULT_PATTERNS",
    "MARKER_FENCE",
    "FencesplitError",
    "Pattern",
    "PatternError",
    "Segment",
    "build_matcher",
    "extract_code_blocks",
    "parse_text",
    "split_text_into_chunks",
]
