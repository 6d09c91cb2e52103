"""Tests for mobilizer.tools.mobile_mapper and prop resolution."""

from __future__ import annotations

from conftest import make_section

from mobilizer.tools.mobile_mapper import (
    MOBILE_STYLE_CONSTANTS,
    detect_component_type,
    map_section,
    mobile_display_name,
)
from mobilizer.tools.models import ComponentType, PropSchema, Section, SectionKind, SettingSchema, ThemeStyling
from mobilizer.tools.props import props_schema_from_settings, resolve_prop_values


def _section_with_settings(name: str, settings) -> Section:
    return Section(
        name=name,
        kind=SectionKind.SECTION,
        filename=f"sections/{name}.liquid",
        raw_content="",
        styling=ThemeStyling(),
        mobile_relevant=True,
        settings=tuple(settings),
    )


class TestComponentType:
    def test_exact_name_lookup(self):
        assert detect_component_type("header") == ComponentType.STICKY_MOBILE_HEADER
        assert detect_component_type("menu") == ComponentType.HAMBURGER_MENU

    def test_unmatched_name_falls_back(self):
        assert detect_component_type("header-group") == ComponentType.MOBILE_SECTION
        assert detect_component_type("rich-text") == ComponentType.MOBILE_SECTION


class TestMapSection:
    def test_plain_header(self):
        d = map_section(make_section("header"), stamp=1700000000000, index=0)

        assert d.component_type == ComponentType.STICKY_MOBILE_HEADER
        assert d.id == "header-1700000000000-0"
        assert d.name == "Mobile Header"
        assert d.accessibility.role == "banner"
        assert d.accessibility.label == "Site header"
        assert d.props == {}
        assert d.interactions.to_dict() == {
            "swipeable": False,
            "draggable": False,
            "pullToRefresh": False,
            "infiniteScroll": False,
        }

    def test_collection_grid_interactions(self):
        d = map_section(make_section("collection-grid"), stamp=1, index=0)

        assert d.interactions.swipeable
        assert d.interactions.infinite_scroll
        assert not d.interactions.draggable

    def test_interactions_accumulate(self):
        d = map_section(make_section("hero-cart"), stamp=1, index=0)

        assert d.interactions.swipeable
        assert d.interactions.draggable
        assert d.interactions.pull_to_refresh

    def test_default_accessibility(self):
        d = map_section(make_section("image-with-text"), stamp=1, index=3)

        assert d.accessibility.role == "region"
        assert d.accessibility.label == "image-with-text section"
        assert d.accessibility.keyboard_navigation
        assert d.accessibility.screen_reader_optimized
        assert d.accessibility.high_contrast_support
        assert d.name == "Image With Text (Mobile)"

    def test_props_are_setting_metadata(self):
        section = _section_with_settings(
            "header",
            [
                SettingSchema(type="text", id="title", label="Title", default="Shop"),
                SettingSchema(type="header", id="", label="Layout"),
            ],
        )
        d = map_section(section, stamp=1, index=0)

        assert d.props == {"title": PropSchema(type="text", label="Title", default="Shop", options=None)}
        assert d.to_dict()["props"]["title"] == {"type": "text", "label": "Title", "default": "Shop", "options": None}

    def test_mobile_constants_win_over_styling(self):
        styling = ThemeStyling(colors={"--color-text": "#000"})
        d = map_section(make_section("footer", styling=styling), stamp=1, index=0)

        assert d.styles["colors"] == {"--color-text": "#000"}
        for key, value in MOBILE_STYLE_CONSTANTS.items():
            assert d.styles[key] == value

    def test_mobile_styling_adds_breakpoints_and_spacing(self):
        styling = ThemeStyling(breakpoints={"min-width: 750px": "750px"}, spacing={"--gap": "4px"})
        d = map_section(make_section("footer", styling=styling), stamp=1, index=0)

        assert d.styling.breakpoints == {
            "min-width: 750px": "750px",
            "mobile": "320px",
            "tablet": "768px",
            "desktop": "1024px",
        }
        assert d.styling.spacing["--gap"] == "4px"
        assert d.styling.spacing["touch-target"] == "44px"
        # the section's own styling is untouched
        assert "mobile" not in styling.breakpoints

    def test_mapping_is_deterministic(self):
        section = make_section("slideshow")
        assert map_section(section, stamp=5, index=1) == map_section(section, stamp=5, index=1)


class TestDisplayName:
    def test_table_and_generated(self):
        assert mobile_display_name("product-grid") == "Mobile Product Grid"
        assert mobile_display_name("featured_products") == "Featured Products (Mobile)"


class TestResolvePropValues:
    def test_defaults_and_overrides(self):
        schema = props_schema_from_settings(
            [
                SettingSchema(type="text", id="title", label="Title", default="Shop"),
                SettingSchema(type="checkbox", id="sticky", label="Sticky", default=True),
                SettingSchema(type="url", id="link", label="Link"),
            ]
        )
        values = resolve_prop_values(schema, {"sticky": False})

        assert values == {"title": "Shop", "sticky": False, "link": None}
