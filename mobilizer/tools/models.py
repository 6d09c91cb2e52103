from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class SectionKind(str, Enum):
    SECTION = "section"
    SNIPPET = "snippet"
    TEMPLATE = "template"


class ComponentType(str, Enum):
    STICKY_MOBILE_HEADER = "StickyMobileHeader"
    TOUCH_PRODUCT_GRID = "TouchProductGrid"
    SWIPEABLE_COLLECTION = "SwipeableCollection"
    MOBILE_HERO_BANNER = "MobileHeroBanner"
    TOUCH_SLIDESHOW = "TouchSlideshow"
    MOBILE_NEWSLETTER_SIGNUP = "MobileNewsletterSignup"
    COLLAPSIBLE_MOBILE_FOOTER = "CollapsibleMobileFooter"
    MOBILE_CART_DRAWER = "MobileCartDrawer"
    MOBILE_SEARCH_OVERLAY = "MobileSearchOverlay"
    MOBILE_NAVIGATION = "MobileNavigation"
    HAMBURGER_MENU = "HamburgerMenu"
    GOEYE_MOBILE_HEADER = "GoEyeMobileHeader"
    MOBILE_SECTION = "MobileSection"
    # builder palette types, only used by the default component set
    HERO_SECTION = "HeroSection"
    PRODUCT_GRID = "ProductGrid"


@dataclass(frozen=True)
class RawThemeFile:
    filename: str
    content: str


@dataclass(frozen=True)
class SettingSchema:
    type: str
    id: str
    label: Any = ""
    default: Any = None
    options: Optional[List[Dict[str, Any]]] = None
    info: Optional[str] = None
    placeholder: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "SettingSchema":
        known = {"type", "id", "label", "default", "options", "info", "placeholder"}
        return cls(
            type=str(raw.get("type") or ""),
            id=str(raw.get("id") or ""),
            label=raw.get("label", ""),
            default=raw.get("default"),
            options=raw.get("options"),
            info=raw.get("info"),
            placeholder=raw.get("placeholder"),
            extra={k: v for k, v in raw.items() if k not in known},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type, "id": self.id, "label": self.label}
        if self.default is not None:
            out["default"] = self.default
        if self.options is not None:
            out["options"] = self.options
        if self.info is not None:
            out["info"] = self.info
        if self.placeholder is not None:
            out["placeholder"] = self.placeholder
        out.update(self.extra)
        return out


@dataclass(frozen=True)
class BlockDefinition:
    type: str
    name: str
    settings: Tuple[SettingSchema, ...] = ()
    limit: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.type,
            "name": self.name,
            "settings": [s.to_dict() for s in self.settings],
        }
        if self.limit is not None:
            out["limit"] = self.limit
        return out


@dataclass(frozen=True)
class SectionPreset:
    name: str
    settings: Optional[Dict[str, Any]] = None
    blocks: Optional[List[Dict[str, Any]]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name}
        if self.settings is not None:
            out["settings"] = self.settings
        if self.blocks is not None:
            out["blocks"] = self.blocks
        return out


@dataclass(frozen=True)
class SectionSchema:
    settings: Tuple[SettingSchema, ...] = ()
    blocks: Tuple[BlockDefinition, ...] = ()
    presets: Tuple[SectionPreset, ...] = ()


@dataclass
class ThemeStyling:
    colors: Dict[str, str] = field(default_factory=dict)
    fonts: Dict[str, str] = field(default_factory=dict)
    spacing: Dict[str, str] = field(default_factory=dict)
    breakpoints: Dict[str, str] = field(default_factory=dict)
    custom_css: Optional[str] = None

    def merged(self, other: "ThemeStyling") -> "ThemeStyling":
        """
        Later keys win. custom_css blocks are concatenated.
        """
        css = "\n".join(c for c in (self.custom_css, other.custom_css) if c)
        return ThemeStyling(
            colors={**self.colors, **other.colors},
            fonts={**self.fonts, **other.fonts},
            spacing={**self.spacing, **other.spacing},
            breakpoints={**self.breakpoints, **other.breakpoints},
            custom_css=css or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "colors": dict(self.colors),
            "fonts": dict(self.fonts),
            "spacing": dict(self.spacing),
            "breakpoints": dict(self.breakpoints),
        }
        if self.custom_css:
            out["customCSS"] = self.custom_css
        return out


@dataclass(frozen=True)
class Section:
    name: str
    kind: SectionKind
    filename: str
    raw_content: str
    styling: ThemeStyling
    mobile_relevant: bool
    settings: Tuple[SettingSchema, ...] = ()
    blocks: Tuple[BlockDefinition, ...] = ()
    presets: Tuple[SectionPreset, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.kind.value,
            "filename": self.filename,
            "settings": [s.to_dict() for s in self.settings],
            "blocks": [b.to_dict() for b in self.blocks],
            "presets": [p.to_dict() for p in self.presets],
            "styling": self.styling.to_dict(),
            "mobileOptimized": self.mobile_relevant,
        }


@dataclass(frozen=True)
class PropSchema:
    """
    Declared shape of one component prop. Not a value: see props.resolve_prop_values.
    """
    type: str
    label: Any = ""
    default: Any = None
    options: Optional[List[Dict[str, Any]]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "label": self.label, "default": self.default, "options": self.options}


@dataclass(frozen=True)
class Interactions:
    swipeable: bool = False
    draggable: bool = False
    pull_to_refresh: bool = False
    infinite_scroll: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {
            "swipeable": self.swipeable,
            "draggable": self.draggable,
            "pullToRefresh": self.pull_to_refresh,
            "infiniteScroll": self.infinite_scroll,
        }


@dataclass(frozen=True)
class Accessibility:
    role: str
    label: str
    keyboard_navigation: bool = True
    screen_reader_optimized: bool = True
    high_contrast_support: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role,
            "label": self.label,
            "keyboardNavigation": self.keyboard_navigation,
            "screenReaderOptimized": self.screen_reader_optimized,
            "highContrastSupport": self.high_contrast_support,
        }


@dataclass(frozen=True)
class BuilderComponent:
    """
    Page-builder payload: concrete prop values keyed by prop name.
    """
    id: str
    type: ComponentType
    props: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "type": self.type.value, "props": self.props}


@dataclass(frozen=True)
class MobileComponentDescriptor:
    id: str
    name: str
    original_section: str
    component_type: ComponentType
    props: Dict[str, PropSchema]
    styles: Dict[str, Any]
    interactions: Interactions
    accessibility: Accessibility
    styling: ThemeStyling
    responsive: bool = True
    touch_optimized: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "originalSection": self.original_section,
            "componentType": self.component_type.value,
            "props": {k: v.to_dict() for k, v in self.props.items()},
            "styles": self.styles,
            "interactions": self.interactions.to_dict(),
            "accessibility": self.accessibility.to_dict(),
            "styling": self.styling.to_dict(),
            "responsive": self.responsive,
            "touchOptimized": self.touch_optimized,
        }


@dataclass
class GenerationResult:
    components: List[BuilderComponent]
    strategy: str
    descriptors: List[MobileComponentDescriptor] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "components": [c.to_dict() for c in self.components],
            "descriptors": [d.to_dict() for d in self.descriptors],
        }


@dataclass
class ThemeAnalysisResult:
    sections: List[Section] = field(default_factory=list)
    snippets: List[Section] = field(default_factory=list)
    templates: List[Section] = field(default_factory=list)
    styling: ThemeStyling = field(default_factory=ThemeStyling)
    mobile_readiness: int = 0
    settings: Dict[str, Any] = field(default_factory=dict)
    theme_info: Dict[str, Any] = field(default_factory=dict)
    assets: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sections": [s.to_dict() for s in self.sections],
            "snippets": [s.to_dict() for s in self.snippets],
            "templates": [s.to_dict() for s in self.templates],
            "styling": self.styling.to_dict(),
            "mobileReadiness": self.mobile_readiness,
            "settings": self.settings,
            "themeInfo": self.theme_info,
            "assets": list(self.assets),
        }


@dataclass
class ThemeSummary:
    name: str
    version: str
    sections: List[str]
    templates: List[str]
    snippets: List[str]
    assets: List[str]
    settings: Dict[str, Any]
    colors: List[str]
    fonts: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "sections": self.sections,
            "templates": self.templates,
            "snippets": self.snippets,
            "assets": self.assets,
            "settings": self.settings,
            "colors": self.colors,
            "fonts": self.fonts,
        }
