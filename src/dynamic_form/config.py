"""
Form configuration loading — the trust boundary for field lists.

Malformed configurations raise ConfigLoadError and never reach a session.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from dynamic_form.errors import ConfigLoadError
from dynamic_form.models.condition import AndCondition, Condition, OrCondition, SimpleCondition
from dynamic_form.models.field import FieldDefinition

logger = logging.getLogger(__name__)

_FIELD_LIST = TypeAdapter(list[FieldDefinition])


def _referenced_fields(conditions: Iterable[Condition]) -> Iterable[str]:
    for c in conditions:
        if isinstance(c, SimpleCondition):
            yield c.field
        elif isinstance(c, (AndCondition, OrCondition)):
            yield from _referenced_fields(c.children)


def referenced_fields(field: FieldDefinition) -> set[str]:
    """Every field name this field's rules read."""
    names = set(_referenced_fields(field.conditions or []))
    for rule in field.dynamic_props or []:
        names.update(_referenced_fields(rule.conditions))
    if field.options_source is not None:
        names.add(field.options_source.field)
    return names


def validate_fields(fields: Sequence[FieldDefinition]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for f in fields:
        if f.name in seen:
            duplicates.append(f.name)
        seen.add(f.name)
    if duplicates:
        raise ConfigLoadError(
            f"Duplicate field names: {', '.join(sorted(set(duplicates)))}",
            details={"duplicates": sorted(set(duplicates))},
        )

    for f in fields:
        if f.options_source is not None and f.options_source.field == f.name:
            raise ConfigLoadError(
                f"Field {f.name!r} takes its options from itself",
                details={"field": f.name},
            )
        unknown = referenced_fields(f) - seen
        if unknown:
            # Unknown references read as empty at evaluation time.
            logger.debug("Field %r references unknown fields: %s", f.name, sorted(unknown))


def parse_form_config(data: Union[str, bytes, list[Any]]) -> list[FieldDefinition]:
    """Parse a field list from JSON text or already-decoded data."""
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(f"Form configuration is not valid JSON: {e}")
    if not isinstance(data, list):
        raise ConfigLoadError("Form configuration must be a list of field definitions")

    try:
        fields = _FIELD_LIST.validate_python(data)
    except ValidationError as e:
        raise ConfigLoadError(
            f"Invalid form configuration ({e.error_count()} errors)",
            details={"errors": e.errors(include_url=False)},
        )

    validate_fields(fields)
    logger.debug("Loaded %d field definitions", len(fields))
    return fields


def load_form_config(path: Union[str, Path]) -> list[FieldDefinition]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read form configuration {path}: {e}")
    return parse_form_config(text)


def dump_form_config(fields: Sequence[FieldDefinition], indent: int = 2) -> str:
    """Serialize fields back to the interchange format."""
    return _FIELD_LIST.dump_json(list(fields), by_alias=True, exclude_none=True, indent=indent).decode("utf-8")
