from __future__ import annotations

from typing import List, Sequence, Tuple

from mobilizer.tools.models import Section

MAX_MOBILE_SECTIONS = 8

PRIORITY_ORDER: Tuple[str, ...] = (
    "header", "navigation", "menu",
    "hero", "banner", "slideshow",
    "product-grid", "products", "featured", "collection",
    "newsletter", "testimonials", "reviews",
    "footer",
)

_UNRANKED = len(PRIORITY_ORDER)


def priority_rank(name: str) -> int:
    lowered = (name or "").lower()
    for idx, keyword in enumerate(PRIORITY_ORDER):
        if keyword in lowered:
            return idx
    return _UNRANKED


def prioritize_sections(sections: Sequence[Section], limit: int = MAX_MOBILE_SECTIONS) -> List[Section]:
    """
    Stable sort by keyword rank, then keep the first `limit`.
    Equal ranks keep their input order.
    """
    ordered = sorted(sections, key=lambda s: priority_rank(s.name))
    return ordered[: max(limit, 0)]
