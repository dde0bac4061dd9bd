"""
Field visibility & state projection.

project(fields, values, controls) is a pure function of its three inputs:
the visible fields, in input order, each with its effective attributes.
Hidden fields are omitted; their stored values are left alone.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Sequence

from dynamic_form.evaluator import evaluate_all
from dynamic_form.models.controls import FormControls
from dynamic_form.models.field import FieldDefinition, FieldVariant
from dynamic_form.models.projection import EffectiveAttributes, ProjectedField
from dynamic_form.options import resolve_options
from dynamic_form.overrides import resolve_overrides

logger = logging.getLogger(__name__)

# Variants affected by the bulk "disable all inputs" control.
INPUT_LIKE_VARIANTS = frozenset({
    FieldVariant.INPUT,
    FieldVariant.TEXTAREA,
    FieldVariant.PASSWORD,
    FieldVariant.PHONE,
    FieldVariant.SELECT,
    FieldVariant.COMBOBOX,
    FieldVariant.MULTI_SELECT,
    FieldVariant.DATE_PICKER,
    FieldVariant.DATETIME_PICKER,
    FieldVariant.SMART_DATETIME_INPUT,
    FieldVariant.TAGS_INPUT,
    FieldVariant.LOCATION_INPUT,
    FieldVariant.CREDIT_CARD,
})


def is_input_like(variant: FieldVariant) -> bool:
    return variant in INPUT_LIKE_VARIANTS


def variant_index(fields: Sequence[FieldDefinition]) -> dict[str, str]:
    """Field name -> declared variant name, for variant-aware evaluation."""
    return {f.name: f.variant.value for f in fields}


def is_visible(
    field: FieldDefinition,
    values: Mapping[str, Any],
    controls: FormControls,
    variants: Optional[Mapping[str, str]] = None,
) -> bool:
    if not controls.is_variant_visible(field.variant.value):
        return False
    return evaluate_all(field.conditions, values, variants)


def effective_attributes(
    field: FieldDefinition,
    values: Mapping[str, Any],
    controls: FormControls,
    variants: Optional[Mapping[str, str]] = None,
) -> EffectiveAttributes:
    overrides = resolve_overrides(field, values, variants)
    if "required" in overrides:
        required = overrides["required"]
    else:
        required = controls.all_required or field.required

    disabled = True if controls.inputs_disabled and is_input_like(field.variant) else field.disabled

    return EffectiveAttributes(
        required=required,
        disabled=disabled,
        options=resolve_options(field, values),
    )


def project(
    fields: Sequence[FieldDefinition],
    values: Mapping[str, Any],
    controls: Optional[FormControls] = None,
) -> list[ProjectedField]:
    controls = controls or FormControls()
    variants = variant_index(fields)

    projected = [
        ProjectedField(field=f, effective=effective_attributes(f, values, controls, variants))
        for f in fields
        if is_visible(f, values, controls, variants)
    ]
    logger.debug("Projected %d of %d fields as visible", len(projected), len(fields))
    return projected
