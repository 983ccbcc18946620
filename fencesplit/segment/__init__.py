"""Fence-delimited text segmentation."""

from fencesplit.segment.extract import extract_code_blocks
from fencesplit.segment.pattern import (
    BACKTICK_FENCE,
    DEFAULT_PATTERNS,
    MARKER_FENCE,
    Pattern,
    build_matcher,
)
from fencesplit.segment.scanner import Segment, split_text_into_chunks
from fencesplit.segment.priority import parse_text

__all__ = [
    "BACKTICK_FENCE",
    "DEFAULT_PATTERNS",
    "MARKER_FENCE",
    "Pattern",
    "Segment",
    "build_matcher",
    "extract_code_blocks",
    "parse_text",
    "split_text_into_chunks",
]
