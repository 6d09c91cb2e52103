from __future__ import annotations

from typing import Tuple

from mobilizer.tools.models import SectionKind

# Utility sections that make no sense in a mobile app. Checked before anything else.
EXCLUDED_SECTIONS: Tuple[str, ...] = (
    "breadcrumbs", "pagination", "sidebar", "filters-desktop",
    "cookie", "popup", "modal", "announcement", "promo-bar",
    "instagram", "social-media", "blog-sidebar", "search-results",
    "account", "login", "register", "checkout", "thank-you",
)

CORE_MOBILE_SECTIONS: Tuple[str, ...] = (
    "header", "navigation", "menu", "hero", "banner", "slideshow",
    "product-grid", "products", "collection", "featured", "popular",
    "newsletter", "footer", "testimonials", "reviews", "about",
    "contact", "search", "cart",
)

CONTENT_PATTERNS: Tuple[str, ...] = (
    "main-", "featured-", "showcase-", "gallery-", "text-", "image-",
    "video-", "story-", "brand-", "service-", "benefit-",
)


def should_include_in_mobile_app(name: str, kind: SectionKind) -> bool:
    """
    Decide whether a parsed file takes part in mobile-app generation.
    Snippets and templates never do.
    """
    if kind is not SectionKind.SECTION:
        return False

    lowered = (name or "").lower()

    if any(excluded in lowered for excluded in EXCLUDED_SECTIONS):
        return False

    if any(core in lowered for core in CORE_MOBILE_SECTIONS):
        return True

    return any(pattern in lowered for pattern in CONTENT_PATTERNS)
