from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from mobilizer.tools.models import BlockDefinition, SectionPreset, SectionSchema, SettingSchema

logger = logging.getLogger(__name__)

# First block only. Accepts the whitespace-control forms {%- schema -%}.
SCHEMA_RE = re.compile(r"{%-?\s*schema\s*-?%}(.*?){%-?\s*endschema\s*-?%}", re.DOTALL)


def _settings(raw: Any) -> Tuple[SettingSchema, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(SettingSchema.from_dict(s) for s in raw if isinstance(s, dict))


def _blocks(raw: Any) -> Tuple[BlockDefinition, ...]:
    if not isinstance(raw, list):
        return ()
    out: List[BlockDefinition] = []
    for b in raw:
        if not isinstance(b, dict):
            continue
        limit = b.get("limit")
        out.append(
            BlockDefinition(
                type=str(b.get("type") or ""),
                name=str(b.get("name") or ""),
                settings=_settings(b.get("settings")),
                limit=limit if isinstance(limit, int) else None,
            )
        )
    return tuple(out)


def _presets(raw: Any) -> Tuple[SectionPreset, ...]:
    if not isinstance(raw, list):
        return ()
    out: List[SectionPreset] = []
    for p in raw:
        if not isinstance(p, dict):
            continue
        settings = p.get("settings")
        blocks = p.get("blocks")
        out.append(
            SectionPreset(
                name=str(p.get("name") or ""),
                settings=settings if isinstance(settings, dict) else None,
                blocks=blocks if isinstance(blocks, list) else None,
            )
        )
    return tuple(out)


def find_schema_payload(content: str) -> Optional[str]:
    m = SCHEMA_RE.search(content or "")
    if not m:
        return None
    payload = m.group(1).strip()
    if payload.startswith("-"):
        payload = payload[1:].lstrip()
    return payload


def extract_schema(filename: str, content: str) -> Optional[SectionSchema]:
    """
    Parse the {% schema %} JSON block of a theme file.

    Returns None when there is no schema block or the JSON is malformed; the
    caller keeps the file with an empty schema in both cases.
    """
    payload = find_schema_payload(content)
    if payload is None:
        logger.debug("No schema block in %s", filename)
        return None

    try:
        data: Dict[str, Any] = json.loads(payload)
    except ValueError as e:
        logger.warning("Malformed schema JSON in %s: %s", filename, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Schema in %s is not a JSON object (got %s)", filename, type(data).__name__)
        return None

    return SectionSchema(
        settings=_settings(data.get("settings")),
        blocks=_blocks(data.get("blocks")),
        presets=_presets(data.get("presets")),
    )
