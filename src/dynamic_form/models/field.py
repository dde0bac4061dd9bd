"""
Field definition models — one record per form field in the interchange format.

Key names are kept verbatim (camelCase) on the wire; attributes are snake_case.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from dynamic_form.models.condition import Condition


class FieldVariant(str, Enum):
    """Closed set of widget kinds. A new widget needs a new member here."""
    INPUT = "Input"
    TEXTAREA = "Textarea"
    PASSWORD = "Password"
    PHONE = "Phone"
    SELECT = "Select"
    COMBOBOX = "Combobox"
    MULTI_SELECT = "Multi Select"
    DATE_PICKER = "Date Picker"
    DATETIME_PICKER = "Datetime Picker"
    SMART_DATETIME_INPUT = "Smart Datetime Input"
    TAGS_INPUT = "Tags Input"
    LOCATION_INPUT = "Location Input"
    CREDIT_CARD = "Credit Card"
    CHECKBOX = "Checkbox"
    SWITCH = "Switch"
    RADIO_GROUP = "RadioGroup"
    CHECKBOX_GROUP = "CheckboxGroup"
    FILE_INPUT = "File Input"
    RATING = "Rating"
    SLIDER = "Slider"
    SIGNATURE_INPUT = "Signature Input"


TOGGLE_VARIANTS = frozenset({FieldVariant.CHECKBOX, FieldVariant.SWITCH})


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FieldOption(_WireModel):
    label: str
    value: str
    disabled: Optional[bool] = None


class DynamicPropRule(_WireModel):
    """When every condition holds, force `property` to `value` on the owning field."""
    property: Literal["required"]
    value: StrictBool
    conditions: tuple[Condition, ...] = Field(default_factory=tuple)


class OptionsSource(_WireModel):
    """Options looked up from another field's current value (one hop only)."""
    field: str = Field(min_length=1)
    mapping: dict[str, tuple[FieldOption, ...]] = Field(default_factory=dict)


class ValidationRule(_WireModel):
    type: Literal["unique"]
    message: str


class FieldDefinition(_WireModel):
    variant: FieldVariant
    name: str = Field(min_length=1)
    label: str = ""
    description: str = ""
    placeholder: str = ""
    required: bool = False
    disabled: bool = False
    row_index: int = Field(default=0, alias="rowIndex")
    type: str = ""
    value: Optional[Any] = None
    checked: Optional[bool] = None
    options: Optional[tuple[FieldOption, ...]] = None
    direction: Optional[Literal["horizontal", "vertical"]] = None
    has_other_option: Optional[bool] = Field(default=None, alias="hasOtherOption")

    conditions: Optional[tuple[Condition, ...]] = None
    dynamic_props: Optional[tuple[DynamicPropRule, ...]] = Field(default=None, alias="dynamicProps")
    options_source: Optional[OptionsSource] = Field(default=None, alias="optionsSource")
    is_complex: Optional[bool] = Field(default=None, alias="isComplex")
    validation_rules: Optional[tuple[ValidationRule, ...]] = Field(default=None, alias="validationRules")

    @property
    def is_toggle(self) -> bool:
        return self.variant in TOGGLE_VARIANTS

    def default_value(self) -> Any:
        """Initial value for a fresh session."""
        if self.is_toggle:
            return bool(self.checked)
        if self.variant == FieldVariant.CHECKBOX_GROUP:
            return {}
        return self.value if self.value is not None else ""
