"""
Form state store — owns the current values of one form session.

set_value() is the only way values change, and every change is followed by a
fresh projection before the store reports state again.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Iterable, NamedTuple, Optional, Sequence

from dynamic_form.config import validate_fields
from dynamic_form.errors import UnknownFieldError
from dynamic_form.evaluator import is_checked, is_empty, strict_equals
from dynamic_form.models.controls import FormControls
from dynamic_form.models.field import FieldDefinition, FieldVariant
from dynamic_form.models.projection import ProjectedField
from dynamic_form.projection import project

logger = logging.getLogger(__name__)


class FieldEdit(NamedTuple):
    name: str
    value: Any


class FormStateStore:
    def __init__(
        self,
        fields: Optional[Sequence[FieldDefinition]] = None,
        controls: Optional[FormControls] = None,
    ):
        self._fields: list[FieldDefinition] = []
        self._by_name: dict[str, FieldDefinition] = {}
        self._values: dict[str, Any] = {}
        self._controls = controls or FormControls()
        self._projection: list[ProjectedField] = []
        self._revision = 0
        if fields is not None:
            self.initialize(fields)

    @property
    def fields(self) -> list[FieldDefinition]:
        return list(self._fields)

    @property
    def controls(self) -> FormControls:
        return self._controls

    @property
    def values(self) -> dict[str, Any]:
        """Snapshot of the current values; mutating it does not affect the store."""
        return copy.deepcopy(self._values)

    @property
    def projection(self) -> list[ProjectedField]:
        return list(self._projection)

    @property
    def revision(self) -> int:
        """Incremented on every edit that actually changed a value or control."""
        return self._revision

    def get_value(self, name: str) -> Any:
        if name not in self._by_name:
            raise UnknownFieldError(name)
        return copy.deepcopy(self._values[name])

    def initialize(self, fields: Sequence[FieldDefinition]) -> list[ProjectedField]:
        """Start a new session: seed every field with its declared default."""
        validate_fields(fields)
        self._fields = list(fields)
        self._by_name = {f.name: f for f in self._fields}
        self._values = {f.name: f.default_value() for f in self._fields}
        self._revision = 0
        logger.debug("Initialized form session with %d fields", len(self._fields))
        return self._reproject()

    def set_value(self, name: str, value: Any) -> list[ProjectedField]:
        if name not in self._by_name:
            raise UnknownFieldError(name)
        if name in self._values and strict_equals(self._values[name], value):
            return self.projection

        self._values[name] = copy.deepcopy(value)
        self._revision += 1
        logger.debug("Set %r (revision %d)", name, self._revision)
        return self._reproject()

    def apply(self, edits: Iterable[FieldEdit]) -> list[ProjectedField]:
        """Apply edits in the order received, re-projecting after each one."""
        for name, value in edits:
            self.set_value(name, value)
        return self.projection

    def set_controls(self, controls: FormControls) -> list[ProjectedField]:
        if controls == self._controls:
            return self.projection
        self._controls = controls
        self._revision += 1
        return self._reproject()

    def missing_required(self) -> list[str]:
        """Visible, effectively required fields that have no answer yet."""
        return [
            pf.name
            for pf in self._projection
            if pf.effective.required and not _has_answer(pf.field, self._values.get(pf.name))
        ]

    def _reproject(self) -> list[ProjectedField]:
        self._projection = project(self._fields, self._values, self._controls)
        return self.projection


def _has_answer(field: FieldDefinition, value: Any) -> bool:
    if field.is_toggle:
        return is_checked(value, None, field.variant.value)
    if field.variant == FieldVariant.CHECKBOX_GROUP:
        return isinstance(value, Mapping) and any(v is True for v in value.values())
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return not is_empty(value)
