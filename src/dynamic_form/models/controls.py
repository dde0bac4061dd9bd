"""
Global bulk controls — passed explicitly into projection, never ambient.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FormControls(BaseModel):
    model_config = ConfigDict(frozen=True)

    all_required: bool = False
    inputs_disabled: bool = False
    # Variant name -> shown. Variants missing here are shown.
    variant_visibility: dict[str, bool] = Field(default_factory=dict)

    def is_variant_visible(self, variant: str) -> bool:
        return self.variant_visibility.get(variant, True)

    def with_variant(self, variant: str, visible: bool) -> FormControls:
        return self.model_copy(update={"variant_visibility": {**self.variant_visibility, variant: visible}})

    def toggle_variant(self, variant: str) -> FormControls:
        return self.with_variant(variant, not self.is_variant_visible(variant))
