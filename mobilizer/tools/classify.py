from __future__ import annotations

import posixpath
from typing import Tuple

from mobilizer.tools.models import SectionKind

PATH_SEGMENTS: Tuple[Tuple[str, SectionKind], ...] = (
    ("sections/", SectionKind.SECTION),
    ("snippets/", SectionKind.SNIPPET),
    ("templates/", SectionKind.TEMPLATE),
)

# Checked in this order, so "product-card" lands on "product" first.
COMMON_SECTION_NAMES = ("header", "footer", "product", "collection", "cart", "hero")
COMMON_SNIPPET_NAMES = ("product-card", "cart-item", "icon", "loading")

MOBILE_RELEVANT_KEYWORDS = (
    "header", "navigation", "menu", "search", "cart", "product-grid",
    "collection", "filter", "hero", "banner", "slideshow", "testimonials",
    "newsletter", "footer", "contact", "blog", "article",
)


def _norm_path(filename: str) -> str:
    return (filename or "").replace("\\", "/")


def section_name(filename: str) -> str:
    """
    sections/header.liquid -> header
    """
    base = posixpath.basename(_norm_path(filename))
    stem, ext = posixpath.splitext(base)
    return stem if ext else base


def classify_file(filename: str) -> SectionKind:
    path = _norm_path(filename)
    for segment, kind in PATH_SEGMENTS:
        if segment in path:
            return kind

    basename = section_name(path).lower()
    if any(s in basename for s in COMMON_SECTION_NAMES):
        return SectionKind.SECTION
    if any(s in basename for s in COMMON_SNIPPET_NAMES):
        return SectionKind.SNIPPET

    return SectionKind.SECTION


def is_mobile_relevant(name: str) -> bool:
    lowered = (name or "").lower()
    return any(k in lowered for k in MOBILE_RELEVANT_KEYWORDS)
