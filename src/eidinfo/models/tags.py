"""
eidinfo Tags

The closed set of fields read from a Serbian eID card.

Each tag carries:
- code: numeric wire tag reported by the card decoder (stable, never reused)
- label: display name used by generic dumps (not localized)
- validator: predicate the raw value must satisfy before it is stored

Organized by the card file the field comes from.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from ..exceptions import UnknownTagError
from .validators import Validator, always_invalid, always_valid, is_personal_number


class Tag(Enum):
    """eID information codes."""

    # Dummy tag for ignored input; never stored in a record
    NULL = (0, "Ignored", always_invalid)

    # =========================================================================
    # Document
    # =========================================================================

    DOC_REG_NO = (101, "Document reg. number")
    ISSUING_DATE = (102, "Issuing date")             # e.g. 01.01.2011
    EXPIRY_DATE = (103, "Expiry date")
    ISSUING_AUTHORITY = (104, "Issuing authority")   # e.g. "Ministry of the Interior"
    DOCUMENT_TYPE = (105, "Document type")
    DOCUMENT_SERIAL_NUMBER = (106, "Document serial number")
    CHIP_SERIAL_NUMBER = (107, "Chip serial number")

    # =========================================================================
    # Person
    # =========================================================================

    # Mostly unique, but the allocation scheme has been known to repeat
    # numbers, and some issued numbers carry a wrong checksum digit.
    PERSONAL_NUMBER = (201, "Personal number", is_personal_number)
    SURNAME = (202, "Surname")
    GIVEN_NAME = (203, "Given name")
    # The parent's given name, used as a middle name to tell apart
    # similarly named persons.
    PARENT_GIVEN_NAME = (204, "Parent given name")
    SEX = (205, "Gender")
    NATIONALITY_FULL = (206, "Nationality")

    # =========================================================================
    # Birth
    # =========================================================================

    PLACE_OF_BIRTH = (301, "Place of birth")           # e.g. "Belgrade"
    COMMUNITY_OF_BIRTH = (302, "Community of birth")   # e.g. "Savski Venac"
    STATE_OF_BIRTH = (303, "State of birth")
    STATE_OF_BIRTH_CODE = (304, "State of birth code")
    DATE_OF_BIRTH = (305, "Date of birth")

    # =========================================================================
    # Residence
    # =========================================================================

    STATE = (401, "State")
    COMMUNITY = (402, "Community")
    PLACE = (403, "Place")
    STREET = (404, "Street name")
    HOUSE_NUMBER = (405, "House number")
    HOUSE_LETTER = (406, "House letter")
    ENTRANCE = (407, "Entrance label")
    FLOOR = (408, "Floor number")
    APARTMENT_NUMBER = (409, "Apartment number")
    ADDRESS_DATE = (410, "Address date")
    ADDRESS_LABEL = (411, "Address label")

    def __new__(cls, code: int, label: str, validator: Validator = always_valid) -> "Tag":
        obj = object.__new__(cls)
        obj._value_ = code
        obj.code = code
        obj.label = label
        obj.validator = validator
        return obj

    def validate(self, value: Any) -> bool:
        """
        Run this tag's validator on a raw value.

        Returns:
            True if the value is valid for this tag, False otherwise
        """
        return self.validator(value)

    @classmethod
    def from_code(cls, code: int) -> Tag:
        """
        Resolve a wire code reported by the card decoder.

        Raises:
            UnknownTagError: If code is not an int or no tag carries it
        """
        if isinstance(code, bool) or not isinstance(code, int):
            raise UnknownTagError(
                message=f"Tag code must be an int, got {type(code).__name__}",
                details={"code": repr(code)},
            )
        try:
            return cls(code)
        except ValueError:
            raise UnknownTagError(
                message=f"Unknown tag code: {code!r}",
                details={"code": code},
            ) from None

    @classmethod
    def data_tags(cls) -> tuple[Tag, ...]:
        """All tags that can hold a value (everything except NULL)."""
        return tuple(tag for tag in cls if tag is not cls.NULL)

    def __str__(self) -> str:
        return self.label
