from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Dict, Mapping

from mobilizer.tools.models import (
    Accessibility,
    ComponentType,
    Interactions,
    MobileComponentDescriptor,
    Section,
    ThemeStyling,
)
from mobilizer.tools.props import props_schema_from_settings

# Exact section-name lookups. Anything else maps to the generic MobileSection.
COMPONENT_TYPES: Mapping[str, ComponentType] = MappingProxyType({
    "header": ComponentType.STICKY_MOBILE_HEADER,
    "product-grid": ComponentType.TOUCH_PRODUCT_GRID,
    "collection": ComponentType.SWIPEABLE_COLLECTION,
    "hero": ComponentType.MOBILE_HERO_BANNER,
    "slideshow": ComponentType.TOUCH_SLIDESHOW,
    "newsletter": ComponentType.MOBILE_NEWSLETTER_SIGNUP,
    "footer": ComponentType.COLLAPSIBLE_MOBILE_FOOTER,
    "cart": ComponentType.MOBILE_CART_DRAWER,
    "search": ComponentType.MOBILE_SEARCH_OVERLAY,
    "navigation": ComponentType.MOBILE_NAVIGATION,
    "menu": ComponentType.HAMBURGER_MENU,
})

MOBILE_NAMES: Mapping[str, str] = MappingProxyType({
    "header": "Mobile Header",
    "product-grid": "Mobile Product Grid",
    "collection": "Mobile Collection",
    "hero": "Mobile Hero Banner",
    "slideshow": "Mobile Slideshow",
    "newsletter": "Mobile Newsletter",
    "footer": "Mobile Footer",
    "cart": "Mobile Cart",
    "search": "Mobile Search",
    "navigation": "Mobile Navigation",
    "menu": "Mobile Menu",
})

ARIA_ROLES: Mapping[str, str] = MappingProxyType({
    "header": "banner",
    "navigation": "navigation",
    "menu": "menu",
    "search": "search",
    "product-grid": "grid",
    "footer": "contentinfo",
    "hero": "banner",
    "slideshow": "region",
})

ARIA_LABELS: Mapping[str, str] = MappingProxyType({
    "header": "Site header",
    "navigation": "Main navigation",
    "menu": "Navigation menu",
    "search": "Product search",
    "product-grid": "Product grid",
    "footer": "Site footer",
    "hero": "Hero banner",
    "slideshow": "Image slideshow",
})

# Applied after the extracted styling, so these always win.
MOBILE_STYLE_CONSTANTS: Mapping[str, str] = MappingProxyType({
    "touchTarget": "44px",
    "fontSize": "clamp(14px, 4vw, 18px)",
    "lineHeight": "1.5",
    "padding": "12px 16px",
    "borderRadius": "8px",
    "boxShadow": "0 2px 8px rgba(0,0,0,0.1)",
})

MOBILE_BREAKPOINTS: Mapping[str, str] = MappingProxyType({
    "mobile": "320px",
    "tablet": "768px",
    "desktop": "1024px",
})

MOBILE_SPACING: Mapping[str, str] = MappingProxyType({
    "mobile-padding": "16px",
    "mobile-margin": "8px",
    "touch-target": "44px",
})


def detect_component_type(name: str) -> ComponentType:
    return COMPONENT_TYPES.get(name, ComponentType.MOBILE_SECTION)


def mobile_display_name(name: str) -> str:
    if name in MOBILE_NAMES:
        return MOBILE_NAMES[name]
    words = re.sub(r"[-_]", " ", name)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), words) + " (Mobile)"


def mobile_styles(styling: ThemeStyling) -> Dict[str, Any]:
    styles: Dict[str, Any] = styling.to_dict()
    styles.update(MOBILE_STYLE_CONSTANTS)
    return styles


def mobile_interactions(name: str) -> Interactions:
    swipeable = draggable = pull_to_refresh = infinite_scroll = False

    if "product-grid" in name or "collection" in name:
        swipeable = True
        infinite_scroll = True

    if "slideshow" in name or "hero" in name:
        swipeable = True
        draggable = True

    if "cart" in name or "menu" in name:
        pull_to_refresh = True

    return Interactions(
        swipeable=swipeable,
        draggable=draggable,
        pull_to_refresh=pull_to_refresh,
        infinite_scroll=infinite_scroll,
    )


def accessibility_for(name: str) -> Accessibility:
    return Accessibility(
        role=ARIA_ROLES.get(name, "region"),
        label=ARIA_LABELS.get(name, f"{name} section"),
    )


def optimize_styling_for_mobile(styling: ThemeStyling) -> ThemeStyling:
    return ThemeStyling(
        colors=dict(styling.colors),
        fonts=dict(styling.fonts),
        spacing={**styling.spacing, **MOBILE_SPACING},
        breakpoints={**styling.breakpoints, **MOBILE_BREAKPOINTS},
        custom_css=styling.custom_css,
    )


def component_id(name: str, stamp: int, index: int) -> str:
    return f"{name}-{stamp}-{index}"


def map_section(section: Section, *, stamp: int, index: int) -> MobileComponentDescriptor:
    """
    Convert one included section into a mobile component descriptor.

    `stamp` and `index` only feed the id; everything else is a function of the
    section and the tables above.
    """
    return MobileComponentDescriptor(
        id=component_id(section.name, stamp, index),
        name=mobile_display_name(section.name),
        original_section=section.name,
        component_type=detect_component_type(section.name),
        props=props_schema_from_settings(section.settings),
        styles=mobile_styles(section.styling),
        interactions=mobile_interactions(section.name),
        accessibility=accessibility_for(section.name),
        styling=optimize_styling_for_mobile(section.styling),
    )
