"""
eidinfo - Serbian eID Record Model

Holds and reformats personal and residence data read from a Serbian
electronic identity card. The card decoder feeds (tag, value) pairs into
a builder; presentation code reads the resulting immutable record.

Card communication and byte-level decoding are out of scope: values
arrive here already decoded to strings.

Quick Start:
    from eidinfo import EidInfo, Tag, AddressLabels

    info = (
        EidInfo.builder()
        .add_value(Tag.GIVEN_NAME, "Petar")
        .add_value(Tag.SURNAME, "Petrović")
        .add_value(Tag.STREET, "Main street")
        .add_value(Tag.HOUSE_NUMBER, "11")
        .add_value(Tag.STATE, "SRB")
        .build()
    )

    info.get_name_full()
    info.get_place_full_with(AddressLabels.serbian_latin())

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    # Taxonomy
    Tag,
    # Records
    EidInfo,
    EidInfoBuilder,
    # Validators
    always_invalid,
    always_valid,
    is_personal_number,
)

# =============================================================================
# Formatting
# =============================================================================
from .formatting import (
    AddressLabels,
    sanitize_format,
)

# =============================================================================
# Label Packs
# =============================================================================
from .labels import (
    load_label_pack,
    load_label_pack_from_string,
)

# =============================================================================
# Configuration
# =============================================================================
from .config import configure_logging

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    EidInfoError,
    ValidationError,
    DuplicateFieldError,
    BuilderConsumedError,
    UnknownTagError,
    LabelPackLoadError,
    LabelPackValidationError,
    LabelPackVersionMismatch,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "__version__",
    # Taxonomy
    "Tag",
    # Records
    "EidInfo",
    "EidInfoBuilder",
    # Validators
    "always_invalid",
    "always_valid",
    "is_personal_number",
    # Formatting
    "AddressLabels",
    "sanitize_format",
    # Label packs
    "load_label_pack",
    "load_label_pack_from_string",
    # Configuration
    "configure_logging",
    # Exceptions
    "EidInfoError",
    "ValidationError",
    "DuplicateFieldError",
    "BuilderConsumedError",
    "UnknownTagError",
    "LabelPackLoadError",
    "LabelPackValidationError",
    "LabelPackVersionMismatch",
]
