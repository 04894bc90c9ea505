"""
eidinfo Models

Domain models for data read from a Serbian eID card:

    from eidinfo.models import (
        # Taxonomy
        Tag,
        # Records
        EidInfo, EidInfoBuilder,
        # Validators
        always_valid, always_invalid, is_personal_number,
    )
"""
from __future__ import annotations

# =============================================================================
# Validators
# =============================================================================
from .validators import (
    PERSONAL_NUMBER_PATTERN,
    Validator,
    always_invalid,
    always_valid,
    is_personal_number,
)

# =============================================================================
# Taxonomy
# =============================================================================
from .tags import Tag

# =============================================================================
# Records
# =============================================================================
from .record import (
    EidInfo,
    EidInfoBuilder,
    validate_entry,
)

__all__ = [
    # Validators
    "PERSONAL_NUMBER_PATTERN",
    "Validator",
    "always_invalid",
    "always_valid",
    "is_personal_number",
    # Taxonomy
    "Tag",
    # Records
    "EidInfo",
    "EidInfoBuilder",
    "validate_entry",
]
