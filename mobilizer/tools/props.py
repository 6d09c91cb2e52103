from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from mobilizer.tools.models import PropSchema, SettingSchema


def props_schema_from_settings(settings: Sequence[SettingSchema]) -> Dict[str, PropSchema]:
    # Settings without an id (Shopify "header"/"paragraph" entries) carry no prop.
    props: Dict[str, PropSchema] = {}
    for setting in settings:
        if not setting.id:
            continue
        props[setting.id] = PropSchema(
            type=setting.type,
            label=setting.label,
            default=setting.default,
            options=setting.options,
        )
    return props


def resolve_prop_values(
    schema: Mapping[str, PropSchema],
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Turn a props schema into concrete values: an override when one is given,
    else the declared default.
    """
    overrides = overrides or {}
    return {name: overrides.get(name, prop.default) for name, prop in schema.items()}
