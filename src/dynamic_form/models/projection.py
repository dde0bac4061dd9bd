"""
Projection results handed to the view collaborator.
"""

from pydantic import BaseModel, ConfigDict

from dynamic_form.models.field import FieldDefinition, FieldOption


class EffectiveAttributes(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: bool
    disabled: bool
    options: list[FieldOption] = []


class ProjectedField(BaseModel):
    """A visible field paired with its effective attributes."""
    model_config = ConfigDict(frozen=True)

    field: FieldDefinition
    effective: EffectiveAttributes

    @property
    def name(self) -> str:
        return self.field.name
