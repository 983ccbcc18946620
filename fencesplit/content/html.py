"""Regex-based HTML cleanup run ahead of segmentation.

Every helper is a plain substitution over the raw markup; no parser is
involved, so malformed HTML is tolerated rather than repaired.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_SCRIPT = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.I)
_STYLE = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.I)
_SVG = re.compile(r"<svg\b[^<]*(?:(?!</svg>)<[^<]*)*</svg>", re.I)
_TAG = re.compile(r"<[^>]*>")

_HEADER = re.compile(r"<\s*(header|nav|\.header|#header)[^>]*>[\s\S]*?</\s*\1\s*>", re.I)
_FOOTER = re.compile(r"<\s*(footer|\.footer|#footer)[^>]*>[\s\S]*?</\s*\1\s*>", re.I)

_IMG_SRC = re.compile(r"""<img[^>]+src=(['"])(.*?)\1""", re.I)
_BG_IMAGE = re.compile(r"""background-image\s*:\s*url\(['"]?(.*?)['"]?\)""", re.I)
_LINK_HREF = re.compile(r"""<a[^>]+href=(['"])(.*?)\1""", re.I)

# URLs that are chrome, tracking or account pages rather than content
_IMG_EXCLUDE = re.compile(
    r"logo|icon|badge|seal|google|getadmiral|intentiq|userway|misc|data:image|cookie|bot|svg", re.I
)
_BG_EXCLUDE = re.compile(r"logo|icon", re.I)
_LINK_EXCLUDE = re.compile(
    r"google|getadmiral|intentiq|userway|misc|cookie|bot|track|analy|pixel|user|account", re.I
)

_NBSP = re.compile(r"&nbsp;", re.I)
_NEWLINES = re.compile(r"(?:\r?\n[\t ]*)+")
_TABS = re.compile(r"\t+")
_SPACES = re.compile(r" {2,}")


@dataclass
class Content:
    text: str
    links: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)


def remove_scripts(html: str) -> str:
    """Remove ``<script>`` elements and their contents."""
    return _SCRIPT.sub("", html)


def remove_styles(html: str) -> str:
    """Remove ``<style>`` elements and their contents."""
    return _STYLE.sub("", html)


def remove_svgs(html: str) -> str:
    """Remove ``<svg>`` elements and their contents."""
    return _SVG.sub("", html)


def strip_html_tags(html: str) -> str:
    """Replace every tag with a single space."""
    return _TAG.sub(" ", html)


def _main_content(html: str) -> str:
    """Drop the first header/nav and the first footer block, if any."""
    content = html
    for region in (_HEADER, _FOOTER):
        m = region.search(html)
        if m:
            content = content.replace(m.group(0), "", 1)
    return content


def _is_chrome(url: str) -> bool:
    return "header" in url or "footer" in url


def extract_image_urls(html: str) -> list[str]:
    """Unique content image URLs (``<img src>`` and CSS backgrounds), in order."""
    content = _main_content(html)
    urls: dict[str, None] = {}

    for m in _IMG_SRC.finditer(content):
        src = m.group(2)
        if src and not _IMG_EXCLUDE.search(src) and not _is_chrome(src):
            urls[src.strip()] = None

    for m in _BG_IMAGE.finditer(content):
        src = m.group(1)
        if src and not _BG_EXCLUDE.search(src) and not _is_chrome(src):
            urls[src.strip()] = None

    return list(urls)


def extract_links(html: str) -> list[str]:
    """Unique content link targets from ``<a href>``, in order."""
    content = _main_content(html)
    links: dict[str, None] = {}
    for m in _LINK_HREF.finditer(content):
        href = m.group(2)
        if href and not _LINK_EXCLUDE.search(href) and not _is_chrome(href):
            links[href.strip()] = None
    return list(links)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs while keeping line structure.

    Newline runs (with any indentation after them) become ``"\\n "``,
    tab runs one tab, space runs one space. ``&nbsp;`` counts as a space.
    """
    result = _NBSP.sub(" ", text)
    result = _NEWLINES.sub("\n ", result)
    result = _TABS.sub("\t", result)
    result = _SPACES.sub(" ", result)
    return result.strip()


def extract_clean_content(html: str) -> Content:
    """Strip markup from *html* and collect its content images."""
    html = remove_scripts(html)
    html = remove_styles(html)
    html = remove_svgs(html)

    images = extract_image_urls(html)
    text = strip_html_tags(html)

    return Content(text=normalize_whitespace(text), links=[], images=images)
