"""
Condition evaluator — pure, total evaluation of predicate trees.

evaluate() never raises: unknown fields read as absent, unknown operators and
unexpected comparison failures evaluate to False.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Sequence

from dynamic_form.models.condition import AndCondition, Condition, Operator, OrCondition, SimpleCondition
from dynamic_form.models.field import FieldVariant

logger = logging.getLogger(__name__)

_MISSING = object()

CHECKBOX_GROUP = FieldVariant.CHECKBOX_GROUP.value
MULTI_SELECT = FieldVariant.MULTI_SELECT.value
TOGGLES = {FieldVariant.CHECKBOX.value, FieldVariant.SWITCH.value}


def is_empty(value: Any) -> bool:
    return value is _MISSING or value is None or value == ""


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that never treats a boolean as a number, at any nesting depth."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if left is _MISSING:
        return right is None
    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    if isinstance(left, Mapping) or isinstance(right, Mapping):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
            return False
        if left.keys() != right.keys():
            return False
        return all(strict_equals(left[k], right[k]) for k in left)
    if isinstance(left, (list, tuple)) or isinstance(right, (list, tuple)):
        if not (isinstance(left, (list, tuple)) and isinstance(right, (list, tuple))):
            return False
        return len(left) == len(right) and all(strict_equals(a, b) for a, b in zip(left, right))
    return type(left) is type(right) and left == right


def _lookup_checked(current: Any, key: Any) -> bool:
    if not isinstance(current, Mapping):
        return False
    try:
        return current.get(key) is True
    except TypeError:
        # Unhashable key
        return False


def is_checked(current: Any, key: Any, variant: Optional[str] = None) -> bool:
    """Checked state of a field value.

    The declared variant picks the lookup: checkbox groups look up `key` in
    their {option: bool} mapping, toggles test their own boolean, multi
    selects test membership. Without a variant the value's shape decides.
    """
    if variant == CHECKBOX_GROUP:
        return _lookup_checked(current, key)
    if variant in TOGGLES:
        return current is True
    if variant == MULTI_SELECT:
        return isinstance(current, (list, tuple)) and key in current
    if variant is not None:
        return False

    if isinstance(current, Mapping):
        return _lookup_checked(current, key)
    if isinstance(current, bool):
        return current
    if isinstance(current, (list, tuple)):
        return key in current
    return False


def _evaluate_simple(
    condition: SimpleCondition,
    values: Mapping[str, Any],
    variants: Optional[Mapping[str, str]],
) -> bool:
    current = values.get(condition.field, _MISSING)
    op = condition.operator

    if op == Operator.EQUALS.value:
        return strict_equals(current, condition.value)
    if op == Operator.NOT_EQUALS.value:
        return not strict_equals(current, condition.value)
    if op in (Operator.IS_CHECKED.value, Operator.IS_NOT_CHECKED.value):
        variant = variants.get(condition.field) if variants else None
        checked = is_checked(current, condition.value, variant)
        return checked if op == Operator.IS_CHECKED.value else not checked
    if op == Operator.IS_EMPTY.value:
        return is_empty(current)
    if op == Operator.IS_NOT_EMPTY.value:
        return not is_empty(current)

    logger.debug("Unknown operator %r on field %r, evaluating to False", op, condition.field)
    return False


def evaluate(
    condition: Condition,
    values: Mapping[str, Any],
    variants: Optional[Mapping[str, str]] = None,
) -> bool:
    """Evaluate one condition tree against the current form values.

    `variants` maps field name to declared variant name; pass it so that
    isChecked/isNotChecked follow the field's declared kind.
    """
    if values is None:
        values = {}
    if isinstance(condition, AndCondition):
        return all(evaluate(child, values, variants) for child in condition.children)
    if isinstance(condition, OrCondition):
        return any(evaluate(child, values, variants) for child in condition.children)
    if not isinstance(condition, SimpleCondition):
        return False
    try:
        return _evaluate_simple(condition, values, variants)
    except Exception as e:
        logger.warning("Condition on field %r failed to evaluate (%s); treating as False", condition.field, e)
        return False


def evaluate_all(
    conditions: Optional[Sequence[Condition]],
    values: Mapping[str, Any],
    variants: Optional[Mapping[str, str]] = None,
) -> bool:
    """Implicit AND over a top-level conditions list. None means always satisfied."""
    if conditions is None:
        return True
    return all(evaluate(c, values, variants) for c in conditions)
