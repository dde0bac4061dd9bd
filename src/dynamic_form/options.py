"""
Options resolver — static options, or options keyed by another field's value.
"""

from collections.abc import Mapping
from typing import Any

from dynamic_form.models.field import FieldDefinition, FieldOption


def resolve_options(field: FieldDefinition, values: Mapping[str, Any]) -> list[FieldOption]:
    source = field.options_source
    if source is None:
        return list(field.options or [])

    controlling = values.get(source.field) if isinstance(values, Mapping) else None
    if not isinstance(controlling, str):
        return []
    return list(source.mapping.get(controlling, []))
