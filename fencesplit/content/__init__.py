"""HTML cleanup helpers."""

from fencesplit.content.html import (
    Content,
    extract_clean_content,
    extract_image_urls,
    extract_links,
    normalize_whitespace,
    remove_scripts,
    remove_styles,
    remove_svgs,
    strip_html_tags,
)

__all__ = [
    "Content",
    "extract_clean_content",
    "extract_image_urls",
    "extract_links",
    "normalize_whitespace",
    "remove_scripts",
    "remove_styles",
    "remove_svgs",
    "strip_html_tags",
]
