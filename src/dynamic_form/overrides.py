"""
Dynamic property resolver — conditional overrides of field attributes.
"""

from collections.abc import Mapping
from typing import Any, Optional

from dynamic_form.evaluator import evaluate_all
from dynamic_form.models.field import FieldDefinition


def resolve_overrides(
    field: FieldDefinition,
    values: Mapping[str, Any],
    variants: Optional[Mapping[str, str]] = None,
) -> dict[str, Any]:
    """Collect overrides from rules whose conditions all hold.

    Rules are applied in list order; a later applicable rule for the same
    property replaces an earlier one.
    """
    overrides: dict[str, Any] = {}
    for rule in field.dynamic_props or []:
        if evaluate_all(rule.conditions, values, variants):
            overrides[rule.property] = rule.value
    return overrides
