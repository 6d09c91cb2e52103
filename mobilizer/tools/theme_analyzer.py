from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Sequence

from mobilizer.tools.classify import classify_file, is_mobile_relevant, section_name
from mobilizer.tools.models import (
    RawThemeFile,
    Section,
    SectionKind,
    ThemeAnalysisResult,
    ThemeStyling,
    ThemeSummary,
)
from mobilizer.tools.schema_extract import extract_schema
from mobilizer.tools.styling_extract import extract_styling

logger = logging.getLogger(__name__)

LIQUID_EXT = ".liquid"
STYLE_ONLY_EXTS = (".css", ".js")
SETTINGS_DATA = "config/settings_data.json"
SETTINGS_SCHEMA = "config/settings_schema.json"

ESSENTIAL_MOBILE_SECTIONS = ("header", "navigation", "product-grid", "cart")
TOUCH_MARKERS = ("touch", "mobile")

MAX_SUMMARY_COLORS = 5
MAX_SUMMARY_FONTS = 3


def parse_theme_file(filename: str, content: str) -> Section:
    """
    Build a Section record from one theme file. Bad schema JSON leaves the
    section with an empty schema.
    """
    schema = extract_schema(filename, content)
    name = section_name(filename)
    return Section(
        name=name,
        kind=classify_file(filename),
        filename=filename,
        raw_content=content,
        styling=extract_styling(content),
        mobile_relevant=is_mobile_relevant(name),
        settings=schema.settings if schema else (),
        blocks=schema.blocks if schema else (),
        presets=schema.presets if schema else (),
    )


def _is_liquid(filename: str) -> bool:
    return filename.lower().endswith(LIQUID_EXT)


def _is_style_only(filename: str) -> bool:
    return filename.lower().endswith(STYLE_ONLY_EXTS)


def _load_json(filename: str, content: str) -> Optional[Any]:
    try:
        return json.loads(content)
    except ValueError as e:
        logger.warning("Could not decode %s: %s", filename, e)
        return None


def _theme_info(settings_schema: Any) -> Dict[str, Any]:
    if not isinstance(settings_schema, list):
        return {}
    for entry in settings_schema:
        if isinstance(entry, dict) and entry.get("name") == "theme_info":
            return {k: v for k, v in entry.items() if k != "name"}
    return {}


def _current_settings(settings_data: Any) -> Dict[str, Any]:
    if not isinstance(settings_data, dict):
        return {}
    current = settings_data.get("current")
    if isinstance(current, dict):
        return current
    return settings_data


def compute_mobile_readiness(sections: Sequence[Section], styling: ThemeStyling) -> int:
    score = 0.0

    if sections:
        relevant = sum(1 for s in sections if s.mobile_relevant)
        score += (relevant / len(sections)) * 40

    if styling.breakpoints:
        score += 20

    if any(m in s.raw_content for s in sections for m in TOUCH_MARKERS):
        score += 20

    if all(any(essential in s.name for s in sections) for essential in ESSENTIAL_MOBILE_SECTIONS):
        score += 20

    # half-up rounding
    return max(0, min(int(math.floor(score + 0.5)), 100))


def analyze_theme(files: Iterable[RawThemeFile]) -> ThemeAnalysisResult:
    """
    Aggregate analysis over every file of one theme.

    Files are processed in filename order so the styling merge does not depend
    on the order the archive listed them in.
    """
    result = ThemeAnalysisResult()
    styling = ThemeStyling()

    for f in sorted(files, key=lambda f: f.filename):
        name = f.filename.replace("\\", "/")

        if "assets/" in name:
            result.assets.append(name)

        if name.endswith(SETTINGS_DATA):
            result.settings = _current_settings(_load_json(name, f.content))
            continue
        if name.endswith(SETTINGS_SCHEMA):
            result.theme_info = _theme_info(_load_json(name, f.content))
            continue

        if _is_style_only(name):
            styling = styling.merged(extract_styling(f.content))
            continue

        if not _is_liquid(name):
            logger.debug("Skipping non-theme file %s", name)
            continue

        section = parse_theme_file(name, f.content)
        if section.kind is SectionKind.SECTION:
            result.sections.append(section)
        elif section.kind is SectionKind.SNIPPET:
            result.snippets.append(section)
        else:
            result.templates.append(section)

        styling = styling.merged(section.styling)

    result.styling = styling
    result.mobile_readiness = compute_mobile_readiness(result.sections, styling)

    logger.info(
        "Analyzed theme: %d sections, %d snippets, %d templates, readiness %d",
        len(result.sections),
        len(result.snippets),
        len(result.templates),
        result.mobile_readiness,
    )
    return result


def summarize_analysis(
    analysis: ThemeAnalysisResult,
    *,
    theme_name: str,
    asset_entries: Optional[List[str]] = None,
) -> ThemeSummary:
    """
    Display-oriented projection of an analysis for the import UI.
    """
    info = analysis.theme_info
    assets = asset_entries if asset_entries is not None else analysis.assets
    return ThemeSummary(
        name=str(info.get("theme_name") or theme_name),
        version=str(info.get("theme_version") or "unknown"),
        sections=[f"{s.name}{LIQUID_EXT}" for s in analysis.sections],
        templates=[f"{t.name}{LIQUID_EXT}" for t in analysis.templates],
        snippets=[f"{s.name}{LIQUID_EXT}" for s in analysis.snippets],
        assets=[a for a in assets if "assets/" in a],
        settings=analysis.settings,
        colors=list(analysis.styling.colors.values())[:MAX_SUMMARY_COLORS],
        fonts=list(analysis.styling.fonts.values())[:MAX_SUMMARY_FONTS],
    )
