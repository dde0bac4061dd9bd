"""
dynamic-form — declarative, rule-driven forms for Python.

Conditional visibility, dynamic `required` overrides and dependent option
lists, evaluated from a JSON field list against the current answers.
"""

from dynamic_form.config import dump_form_config, load_form_config, parse_form_config, validate_fields
from dynamic_form.errors import ConfigLoadError, DynamicFormError, UnknownFieldError
from dynamic_form.evaluator import evaluate, evaluate_all
from dynamic_form.models.condition import AndCondition, Condition, Operator, OrCondition, SimpleCondition
from dynamic_form.models.controls import FormControls
from dynamic_form.models.field import (
    DynamicPropRule,
    FieldDefinition,
    FieldOption,
    FieldVariant,
    OptionsSource,
    ValidationRule,
)
from dynamic_form.models.projection import EffectiveAttributes, ProjectedField
from dynamic_form.options import resolve_options
from dynamic_form.overrides import resolve_overrides
from dynamic_form.projection import INPUT_LIKE_VARIANTS, is_input_like, project
from dynamic_form.store import FieldEdit, FormStateStore

__version__ = "0.1.0"
__all__ = [
    "AndCondition",
    "Condition",
    "ConfigLoadError",
    "DynamicFormError",
    "DynamicPropRule",
    "EffectiveAttributes",
    "FieldDefinition",
    "FieldEdit",
    "FieldOption",
    "FieldVariant",
    "FormControls",
    "FormStateStore",
    "INPUT_LIKE_VARIANTS",
    "Operator",
    "OptionsSource",
    "OrCondition",
    "ProjectedField",
    "SimpleCondition",
    "UnknownFieldError",
    "ValidationRule",
    "dump_form_config",
    "evaluate",
    "evaluate_all",
    "is_input_like",
    "load_form_config",
    "parse_form_config",
    "project",
    "resolve_options",
    "resolve_overrides",
    "validate_fields",
]
