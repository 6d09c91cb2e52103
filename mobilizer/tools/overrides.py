from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from mobilizer.tools.models import BuilderComponent, ComponentType, Section, SectionKind


class ThemeOverride(ABC):
    """
    Pre-pass strategy that may replace the whole generation output for a theme.
    """

    name = "override"

    @abstractmethod
    def matches(self, sections: Sequence[Section]) -> bool:
        ...

    @abstractmethod
    def build(self, theme_name: str) -> List[BuilderComponent]:
        ...


@dataclass(frozen=True)
class GoEyeHeaderOverride(ThemeOverride):
    """
    Themes built on the GoEye header ship a dedicated mobile header; when one
    is detected it replaces every other component. Markers are checked on
    every section-kind file, including ones the inclusion filter drops.
    """

    name = "goeye"
    name_markers: Tuple[str, ...] = ("custom-header",)
    content_markers: Tuple[str, ...] = ("goeye", "trending-section")

    def matches(self, sections: Sequence[Section]) -> bool:
        for s in sections:
            if s.kind is not SectionKind.SECTION:
                continue
            if any(m in s.name.lower() for m in self.name_markers):
                return True
            if any(m in s.raw_content for m in self.content_markers):
                return True
        return False

    def build(self, theme_name: str) -> List[BuilderComponent]:
        return [
            BuilderComponent(
                id="goeye-header-1",
                type=ComponentType.GOEYE_MOBILE_HEADER,
                props={
                    "logoUrl": "",
                    "trendingTitle": "#Trending On",
                    "trendingSubtitle": "GoEye",
                    "offerButtonText": "50% OFF",
                    "offerButtonLink": "/collections/sale",
                    "headerBackgroundColor": "#ffffff",
                    "navActiveColor": "#1E1B4B",
                    "offerButtonColor": "#FF6B6B",
                    "enableMenuDrawer": True,
                    "enableOfferButton": True,
                    "enablePulseEffect": True,
                    "enableWishlistIcon": True,
                    "enableAccountIcon": True,
                    "enableCartIcon": True,
                },
            )
        ]


DEFAULT_OVERRIDES: Tuple[ThemeOverride, ...] = (GoEyeHeaderOverride(),)


def default_components(theme_name: str) -> List[BuilderComponent]:
    """
    Starter set handed to the builder when nothing could be mapped.
    """
    return [
        BuilderComponent(
            id="header-1",
            type=ComponentType.STICKY_MOBILE_HEADER,
            props={
                "logoUrl": "",
                "trendingTitle": "#Trending On",
                "trendingSubtitle": theme_name,
                "offerButtonText": "50% OFF",
                "showMenu": True,
                "showOfferButton": True,
                "showWishlist": True,
                "showAccount": True,
                "showCart": True,
                "pulseEffect": True,
            },
        ),
        BuilderComponent(
            id="hero-1",
            type=ComponentType.HERO_SECTION,
            props={
                "heading": "Welcome to Our Store",
                "subheading": "Discover amazing products at great prices",
                "buttonText": "Shop Now",
                "buttonLink": "/collections/all",
                "image": None,
            },
        ),
        BuilderComponent(
            id="products-1",
            type=ComponentType.PRODUCT_GRID,
            props={
                "collectionId": "",
                "columns": "2",
                "showPrices": True,
                "showAddToCart": True,
            },
        ),
    ]
