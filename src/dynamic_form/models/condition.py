"""
Condition model — boolean predicate trees over field values.

Wire shapes:
  {"field": "event_type", "operator": "equals", "value": "conference"}
  {"AND": [<condition>, ...]}
  {"OR": [<condition>, ...]}
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class Operator(str, Enum):
    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    IS_CHECKED = "isChecked"
    IS_NOT_CHECKED = "isNotChecked"
    IS_NOT_EMPTY = "isNotEmpty"
    IS_EMPTY = "isEmpty"


class SimpleCondition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str = Field(min_length=1)
    # Kept as a plain string: unknown operators must load and evaluate to False.
    operator: str
    value: Optional[Any] = None


class AndCondition(BaseModel):
    """All children must hold. No children: vacuously true."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    children: tuple[Condition, ...] = Field(default_factory=tuple, alias="AND")


class OrCondition(BaseModel):
    """At least one child must hold. No children: vacuously false."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    children: tuple[Condition, ...] = Field(default_factory=tuple, alias="OR")


def _condition_tag(raw: Any) -> str:
    if isinstance(raw, dict):
        if "AND" in raw:
            return "and"
        if "OR" in raw:
            return "or"
        return "simple"
    if isinstance(raw, AndCondition):
        return "and"
    if isinstance(raw, OrCondition):
        return "or"
    return "simple"


Condition = Annotated[
    Union[
        Annotated[SimpleCondition, Tag("simple")],
        Annotated[AndCondition, Tag("and")],
        Annotated[OrCondition, Tag("or")],
    ],
    Discriminator(_condition_tag),
]

AndCondition.model_rebuild()
OrCondition.model_rebuild()


def dump_condition(condition: Condition) -> dict[str, Any]:
    """Serialize a condition back to its wire shape."""
    return condition.model_dump(by_alias=True, exclude_none=True)
