from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from mobilizer.backend_client import BackendError, BuilderBackendClient
from mobilizer.config import MobilizerConfig
from mobilizer.tools.artifacts_fs import RunArtifacts
from mobilizer.tools.component_generator import generate_mobile_components, select_sections
from mobilizer.tools.models import GenerationResult, ThemeAnalysisResult, ThemeSummary
from mobilizer.tools.overrides import DEFAULT_OVERRIDES, GoEyeHeaderOverride
from mobilizer.tools.theme_analyzer import analyze_theme, summarize_analysis
from mobilizer.tools.theme_zip import ThemeArchive

logger = logging.getLogger(__name__)

PENDING = "pending"
PROCESSING = "processing"
COMPLETED = "completed"
ERROR = "error"


@dataclass
class ConversionStep:
    id: str
    name: str
    description: str
    status: str = PENDING

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "description": self.description, "status": self.status}


def default_steps() -> List[ConversionStep]:
    return [
        ConversionStep("extract", "Extract Theme Files", "Extracting and analyzing theme structure"),
        ConversionStep("parse", "Parse Components", "Converting Liquid templates to mobile components"),
        ConversionStep("design", "Adapt Design", "Optimizing layout for mobile screens"),
        ConversionStep("settings", "Import Settings", "Converting theme settings to mobile app configuration"),
        ConversionStep("generate", "Generate Mobile App", "Creating mobile app structure and components"),
    ]


@dataclass
class ImportResult:
    theme_name: str
    analysis: ThemeAnalysisResult
    summary: ThemeSummary
    generation: GenerationResult
    steps: List[ConversionStep]
    saved_id: Optional[str] = None
    saved_to_backend: bool = False
    save_response: Dict[str, Any] = field(default_factory=dict)


def app_name_for(theme_name: str) -> str:
    return f"{theme_name} Mobile App"


def _save(
    client: Optional[BuilderBackendClient],
    artifacts: Optional[RunArtifacts],
    archive: ThemeArchive,
    generation: GenerationResult,
) -> Tuple[Optional[str], bool, Dict[str, Any]]:
    components = [c.to_dict() for c in generation.components]
    payload = {
        "name": app_name_for(archive.name),
        "components": components,
        "designType": "imported-theme",
        "originalTheme": f"{archive.name}.zip",
    }

    if client is not None:
        try:
            response = client.save_theme(payload)
        except BackendError as e:
            logger.warning("Could not save theme to backend, keeping a local copy: %s", e)
        else:
            saved = response.get("app") or response
            saved_id = saved.get("id") if isinstance(saved, dict) else None
            return (str(saved_id) if saved_id is not None else None), True, response

    demo_id = f"demo-{int(time.time() * 1000)}"
    if artifacts is not None:
        artifacts.write_json(f"{demo_id}.json", {"name": payload["name"], "data": components})
    return demo_id, False, {}


def run_import(
    archive: ThemeArchive,
    config: MobilizerConfig,
    *,
    client: Optional[BuilderBackendClient] = None,
    artifacts: Optional[RunArtifacts] = None,
) -> ImportResult:
    """
    Drive one theme upload through analysis, mapping and save.

    Steps are marked as they run; a failing step is marked `error` and the
    exception propagates.
    """
    steps = default_steps()
    overrides = DEFAULT_OVERRIDES if config.goeye_override else tuple(
        o for o in DEFAULT_OVERRIDES if not isinstance(o, GoEyeHeaderOverride)
    )

    analysis: Optional[ThemeAnalysisResult] = None
    summary: Optional[ThemeSummary] = None
    generation: Optional[GenerationResult] = None
    saved_id: Optional[str] = None
    saved_to_backend = False
    save_response: Dict[str, Any] = {}

    current: Optional[ConversionStep] = None
    try:
        for step in steps:
            current = step
            step.status = PROCESSING
            logger.info("Step %s: %s", step.id, step.description)

            if step.id == "extract":
                analysis = analyze_theme(archive.files)
                summary = summarize_analysis(analysis, theme_name=archive.name, asset_entries=archive.asset_entries)
            elif step.id == "parse":
                logger.info(
                    "%d of %d sections qualify for the mobile app",
                    len(select_sections(analysis.sections, max_sections=config.max_sections)),
                    len(analysis.sections),
                )
            elif step.id == "design":
                logger.info(
                    "Theme styling: %d colors, %d fonts, %d breakpoints",
                    len(analysis.styling.colors),
                    len(analysis.styling.fonts),
                    len(analysis.styling.breakpoints),
                )
            elif step.id == "settings":
                logger.info("Imported %d theme settings", len(analysis.settings))
            elif step.id == "generate":
                all_files = analysis.sections + analysis.snippets + analysis.templates
                generation = generate_mobile_components(
                    all_files,
                    theme_name=archive.name,
                    max_sections=config.max_sections,
                    overrides=overrides,
                )
                saved_id, saved_to_backend, save_response = _save(client, artifacts, archive, generation)

            step.status = COMPLETED
    except Exception:
        if current is not None:
            current.status = ERROR
        raise

    return ImportResult(
        theme_name=archive.name,
        analysis=analysis,
        summary=summary,
        generation=generation,
        steps=steps,
        saved_id=saved_id,
        saved_to_backend=saved_to_backend,
        save_response=save_response,
    )
