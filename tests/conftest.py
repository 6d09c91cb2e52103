from __future__ import annotations

import json
import zipfile
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from mobilizer.tools.models import Section, SectionKind, ThemeStyling


def liquid_with_schema(schema: Dict, body: str = "<div></div>") -> str:
    return f"{body}\n{{% schema %}}\n{json.dumps(schema)}\n{{% endschema %}}\n"


def make_section(
    name: str,
    *,
    kind: SectionKind = SectionKind.SECTION,
    content: str = "",
    styling: Optional[ThemeStyling] = None,
    mobile_relevant: bool = False,
) -> Section:
    return Section(
        name=name,
        kind=kind,
        filename=f"sections/{name}.liquid",
        raw_content=content,
        styling=styling or ThemeStyling(),
        mobile_relevant=mobile_relevant,
    )


@pytest.fixture
def make_zip(tmp_path: Path):
    def _make(files: Dict[str, str | bytes], name: str = "dawn.zip") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as zf:
            for rel, content in files.items():
                zf.writestr(rel, content)
        return path

    return _make


@pytest.fixture
def sample_theme_files() -> Dict[str, str]:
    header = liquid_with_schema(
        {
            "name": "Header",
            "settings": [
                {"type": "text", "id": "title", "label": "Title", "default": "Shop"},
                {"type": "color", "id": "background", "label": "Background", "default": "#ffffff"},
            ],
        },
        body='<header style="--color-header: #111;">{{ settings.color_primary }}</header>',
    )
    grid = liquid_with_schema(
        {"name": "Product grid", "settings": [{"type": "range", "id": "columns", "label": "Columns", "default": 2}]},
        body="<div class='grid touch-scroll'></div>",
    )
    return {
        "sections/header.liquid": header,
        "sections/product-grid.liquid": grid,
        "sections/cookie-banner.liquid": "<div>cookies</div>",
        "snippets/price.liquid": "<span>{{ price }}</span>",
        "templates/index.liquid": "{% section 'header' %}",
        "assets/base.css": ":root { --font-body: Assistant; }\n@media screen and (min-width: 750px) { }",
        "config/settings_data.json": json.dumps({"current": {"color_primary": "#123456"}}),
        "config/settings_schema.json": json.dumps(
            [{"name": "theme_info", "theme_name": "Dawn", "theme_version": "15.0.0"}]
        ),
    }


def section_names(sections: List[Section]) -> List[str]:
    return [s.name for s in sections]
