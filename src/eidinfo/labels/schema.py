"""
eidinfo Label Pack Schemas

Pydantic models for validating address label packs (YAML/JSON).

A label pack bundles the three templates passed to
EidInfo.get_place_full(). Packs are supplied by the caller; the library
ships none and never picks one on its own.

Schema versioning:
- schema_version field tracks breaking changes
- Only the major version has to match
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ..formatting import PLACEHOLDER


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Label Pack Schema
# =============================================================================

class LabelPackSchema(BaseModel):
    """Schema for an address label pack."""
    schema_version: str = Field(SCHEMA_VERSION, description="Pack schema version")
    name: Optional[str] = Field(None, description="Pack name, e.g. 'sr-Latn'")
    entrance: Optional[str] = Field(None, description="Entrance template, e.g. 'ulaz %s'")
    floor: Optional[str] = Field(None, description="Floor template, e.g. '%s. sprat'")
    apartment: Optional[str] = Field(None, description="Apartment template, e.g. 'br. %s'")

    @field_validator("entrance", "floor", "apartment")
    @classmethod
    def validate_template(cls, v: Optional[str]) -> Optional[str]:
        """Templates must carry the placeholder when they are given at all."""
        if v and PLACEHOLDER not in v:
            raise ValueError(f"template must contain '{PLACEHOLDER}', got {v!r}")
        return v

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_label_pack(data: dict[str, Any]) -> LabelPackSchema:
    """
    Validate a label pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return LabelPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check if a label pack's schema version is compatible."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
