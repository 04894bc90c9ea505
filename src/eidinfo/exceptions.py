"""
eidinfo Exception Hierarchy

Domain-specific errors for building and formatting eID records.
Every failure carries a deterministic, actionable error code.

Error Codes:
- EID_VALUE_INVALID: Value rejected by its tag's validator
- EID_DUPLICATE_FIELD: Same tag supplied twice to one builder
- EID_BUILDER_CONSUMED: Builder used again after build()
- EID_UNKNOWN_TAG: Wire code does not name any tag
- EID_LABELS_LOAD_ERROR: Label pack file could not be read or parsed
- EID_LABELS_INVALID: Label pack failed schema validation
- EID_LABELS_VERSION_MISMATCH: Label pack schema version is incompatible
- EID_INTERNAL_ERROR: Unexpected internal error (catch-all)

Builder errors (EID_VALUE_INVALID, EID_DUPLICATE_FIELD) also derive from
ValueError, so callers treating them as invalid-argument errors keep working.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

__all__ = [
    'EidInfoError',
    'ValidationError',
    'DuplicateFieldError',
    'BuilderConsumedError',
    'UnknownTagError',
    'LabelPackLoadError',
    'LabelPackValidationError',
    'LabelPackVersionMismatch',
]


class EidInfoError(Exception):
    """
    Base exception for all eidinfo errors.

    Attributes:
        code: Machine-readable error code (EID_*)
        message: Human-readable error description
        details: Additional context about the error

    Error details may contain raw card values. They exist for diagnostics;
    do not ship them to production logs.
    """

    code: str = "EID_INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for logging/API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize error to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r})"
        )


# =============================================================================
# Builder Errors
# =============================================================================

class ValidationError(EidInfoError, ValueError):
    """
    A value failed its tag's validator.

    Also raised for the ignored sentinel tag (its validator rejects
    everything) and for values that are not strings. The caller should
    skip the field or distrust the whole record, never coerce the value.
    """

    code: str = "EID_VALUE_INVALID"


class DuplicateFieldError(EidInfoError, ValueError):
    """
    A tag was supplied twice.

    Each card field tag appears once in a card response, so this points at
    a decoder bug. The value added first is kept.
    """

    code: str = "EID_DUPLICATE_FIELD"


class BuilderConsumedError(EidInfoError):
    """Builder used after build() already produced a record."""

    code: str = "EID_BUILDER_CONSUMED"


# =============================================================================
# Taxonomy Errors
# =============================================================================

class UnknownTagError(EidInfoError, LookupError):
    """Wire code does not correspond to any known tag."""

    code: str = "EID_UNKNOWN_TAG"


# =============================================================================
# Label Pack Errors
# =============================================================================

class LabelPackLoadError(EidInfoError):
    """Failed to read or parse a label pack."""

    code: str = "EID_LABELS_LOAD_ERROR"


class LabelPackValidationError(EidInfoError):
    """Label pack schema validation failed."""

    code: str = "EID_LABELS_INVALID"


class LabelPackVersionMismatch(EidInfoError):
    """Label pack schema version doesn't match the supported version."""

    code: str = "EID_LABELS_VERSION_MISMATCH"
