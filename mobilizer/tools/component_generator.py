from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Sequence

from mobilizer.tools.inclusion_policy import should_include_in_mobile_app
from mobilizer.tools.mobile_mapper import map_section
from mobilizer.tools.models import BuilderComponent, GenerationResult, Section
from mobilizer.tools.overrides import DEFAULT_OVERRIDES, ThemeOverride, default_components
from mobilizer.tools.prioritize import MAX_MOBILE_SECTIONS, prioritize_sections
from mobilizer.tools.props import resolve_prop_values

logger = logging.getLogger(__name__)

STRATEGY_MAPPED = "mapped"
STRATEGY_FALLBACK = "fallback"
STRATEGY_ERROR_FALLBACK = "error-fallback"


def _now_ms() -> int:
    return int(time.time() * 1000)


def select_sections(sections: Sequence[Section], *, max_sections: int = MAX_MOBILE_SECTIONS) -> List[Section]:
    included = [s for s in sections if should_include_in_mobile_app(s.name, s.kind)]
    selected = prioritize_sections(included, limit=max_sections)
    if len(included) > len(selected):
        logger.info("Dropped %d sections over the %d-section cap", len(included) - len(selected), max_sections)
    return selected


def _generate(
    sections: Sequence[Section],
    *,
    theme_name: str,
    max_sections: int,
    overrides: Sequence[ThemeOverride],
    clock: Callable[[], int],
) -> GenerationResult:
    for override in overrides:
        if override.matches(sections):
            logger.info("Theme override '%s' matched; skipping section mapping", override.name)
            return GenerationResult(components=override.build(theme_name), strategy=f"override:{override.name}")

    selected = select_sections(sections, max_sections=max_sections)
    stamp = clock()
    descriptors = [map_section(s, stamp=stamp, index=i) for i, s in enumerate(selected)]

    if not descriptors:
        logger.info("No sections qualified for the mobile app; using the default component set")
        return GenerationResult(components=default_components(theme_name), strategy=STRATEGY_FALLBACK)

    components = [
        BuilderComponent(id=d.id, type=d.component_type, props=resolve_prop_values(d.props))
        for d in descriptors
    ]
    return GenerationResult(components=components, strategy=STRATEGY_MAPPED, descriptors=descriptors)


def generate_mobile_components(
    sections: Sequence[Section],
    *,
    theme_name: str,
    max_sections: int = MAX_MOBILE_SECTIONS,
    overrides: Sequence[ThemeOverride] = DEFAULT_OVERRIDES,
    clock: Optional[Callable[[], int]] = None,
) -> GenerationResult:
    """
    Run filter -> prioritize -> map over parsed theme files.

    Never raises: an unexpected failure is logged and the default component
    set is returned, so the builder always receives something to show.
    """
    try:
        return _generate(
            sections,
            theme_name=theme_name,
            max_sections=max_sections,
            overrides=overrides,
            clock=clock or _now_ms,
        )
    except Exception:
        logger.exception("Mobile component generation failed for theme %s", theme_name)
        return GenerationResult(components=default_components(theme_name), strategy=STRATEGY_ERROR_FALLBACK)
