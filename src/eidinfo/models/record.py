"""
eidinfo Record Models

Models for holding and reformatting data read from an eID card.

Key components:
- EidInfo: Immutable record mapping tags to raw string values
- EidInfoBuilder: Single-use accumulator that validates values as they
  arrive from the card decoder and produces an EidInfo

Presence rule: a tag is present only if it is set AND its value is
non-empty. Decoders may store an empty string for a field that was
transmitted without content; formatting treats that exactly like a
missing field.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Tuple

from ..exceptions import BuilderConsumedError, DuplicateFieldError, ValidationError
from ..formatting import AddressLabels, display_state, render
from .tags import Tag

logger = logging.getLogger(__name__)


# =============================================================================
# Entry Validation
# =============================================================================

def validate_entry(tag: Any, value: Any) -> None:
    """
    Check that a (tag, value) pair may be stored in a record.

    Raises:
        ValidationError: If tag is not a storable Tag, value is not a
            string, or the tag's validator rejects the value
    """
    if not isinstance(tag, Tag):
        raise ValidationError(
            message=f"Not a tag: {tag!r}",
            details={"tag": repr(tag)},
        )
    if tag is Tag.NULL:
        raise ValidationError(
            message=f"Tag '{tag}' cannot hold a value",
            details={"tag": tag.name, "value": value},
        )
    if not isinstance(value, str):
        raise ValidationError(
            message=f"Value for tag '{tag}' must be a string, got {type(value).__name__}",
            details={"tag": tag.name, "value": repr(value)},
        )
    if not tag.validate(value):
        raise ValidationError(
            message=f"Value '{value}' not valid for tag '{tag}'",
            details={"tag": tag.name, "value": value},
        )


# =============================================================================
# EidInfo
# =============================================================================

@dataclass(frozen=True, repr=False)
class EidInfo:
    """
    Immutable set of values read from one eID card.

    Build instances with EidInfoBuilder (see EidInfo.builder()). Direct
    construction from entries is allowed and enforces the same rules:
    every value valid for its tag, no tag twice, never Tag.NULL.

    Attributes:
        entries: (tag, value) pairs in the order they were added
    """
    entries: Tuple[Tuple[Tag, str], ...] = ()
    _fields: Mapping[Tag, str] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.entries, (tuple, list)):
            raise ValidationError(
                message=f"Entries must be a sequence of (tag, value) pairs, got {type(self.entries).__name__}",
                details={"entries": repr(self.entries)},
            )

        fields: dict[Tag, str] = {}
        for entry in self.entries:
            if not isinstance(entry, (tuple, list)) or len(entry) != 2:
                raise ValidationError(
                    message=f"Entry must be a (tag, value) pair, got {entry!r}",
                    details={"entry": repr(entry)},
                )
            tag, value = entry
            validate_entry(tag, value)
            if tag in fields:
                raise DuplicateFieldError(
                    message=f"Tag '{tag}' supplied more than once",
                    details={"tag": tag.name, "value": value, "existing": fields[tag]},
                )
            fields[tag] = value

        object.__setattr__(self, "entries", tuple(fields.items()))
        object.__setattr__(self, "_fields", MappingProxyType(fields))

    def __reduce__(self):
        # mappingproxy cannot be pickled; rebuild from entries
        return (self.__class__, (self.entries,))

    @classmethod
    def builder(cls) -> EidInfoBuilder:
        """Start a new builder."""
        return EidInfoBuilder()

    # -------------------------------------------------------------------------
    # Generic access
    # -------------------------------------------------------------------------

    def get(self, tag: Tag) -> Optional[str]:
        """Returns the value associated with the supplied tag, or None."""
        return self._fields.get(tag)

    def has(self, tag: Tag) -> bool:
        """Returns True if a non-empty value is associated with the tag."""
        return bool(self._fields.get(tag))

    def present_tags(self) -> tuple[Tag, ...]:
        """Tags holding a non-empty value, in insertion order."""
        return tuple(tag for tag, value in self.entries if value)

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary keyed by tag name."""
        return {tag.name: value for tag, value in self.entries}

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Tuple[Tag, str]]:
        return iter(self.entries)

    def __contains__(self, tag: object) -> bool:
        return tag in self._fields

    # -------------------------------------------------------------------------
    # Composite formatting
    # -------------------------------------------------------------------------

    def _append(
        self,
        out: list[str],
        tag: Tag,
        separator: str = "",
        template: Optional[str] = None,
    ) -> None:
        """Append tag value, prefixed by separator, if the tag is present."""
        if not self.has(tag):
            return
        value = self._fields[tag]
        out.append(separator)
        out.append(render(template, value) if template else value)

    def get_name_full(self) -> str:
        """
        Get given name, parent given name and surname as a single string.

        The three slots are always emitted in that order; a missing name
        leaves its slot empty, so the spacing is kept as is.
        """
        return "{} {} {}".format(
            self.get(Tag.GIVEN_NAME) or "",
            self.get(Tag.PARENT_GIVEN_NAME) or "",
            self.get(Tag.SURNAME) or "",
        )

    def get_place_full(
        self,
        entrance_format: Optional[str] = None,
        floor_format: Optional[str] = None,
        apartment_format: Optional[str] = None,
    ) -> str:
        """
        Get place of residence as a multiline string.

        Format parameters decorate the entrance, floor and apartment
        values. Each must contain a "%s" placeholder; None, empty, or
        placeholder-free formats render the bare value. For example
        floor_format "%s. sprat" renders floor 5 as "5. sprat".

        Recommended values for Serbian are "ulaz %s", "%s. sprat" and
        "br. %s" (see AddressLabels.serbian_latin()).

        Args:
            entrance_format: Format for the entrance label, or None
            floor_format: Format for the floor number, or None
            apartment_format: Format for the apartment number, or None

        Returns:
            Street line, place line and state line joined by newlines
        """
        labels = AddressLabels(
            entrance=entrance_format,
            floor=floor_format,
            apartment=apartment_format,
        ).sanitized()

        out: list[str] = []

        # Main street, Main street 11, Main street 11A
        self._append(out, Tag.STREET)
        self._append(out, Tag.HOUSE_NUMBER, " ")
        self._append(out, Tag.HOUSE_LETTER)

        # "ulaz %s" gives "Main street 11A ulaz 2"
        self._append(out, Tag.ENTRANCE, " ", labels.entrance)

        # "%s. sprat" gives "Main street 11A ulaz 2, 5. sprat"
        self._append(out, Tag.FLOOR, ", ", labels.floor)

        if self.has(Tag.APARTMENT_NUMBER):
            if self.has(Tag.ENTRANCE) or self.has(Tag.FLOOR):
                # "br. %s" gives "Main street 11A ulaz 2, 5. sprat, br. 4"
                self._append(out, Tag.APARTMENT_NUMBER, ", ", labels.apartment)
            else:
                # short form: Main street 11A/4
                self._append(out, Tag.APARTMENT_NUMBER, "/")

        self._append(out, Tag.PLACE, "\n")
        self._append(out, Tag.COMMUNITY, ", ")

        out.append("\n")
        out.append(display_state(self.get(Tag.STATE)))

        return "".join(out)

    def get_place_full_with(self, labels: AddressLabels) -> str:
        """Get place of residence using templates bundled in AddressLabels."""
        return self.get_place_full(labels.entrance, labels.floor, labels.apartment)

    def get_place_of_birth_full(self) -> str:
        """
        Get full place of birth as a multiline string.

        Community and state of birth are included only if present.
        """
        out: list[str] = []

        self._append(out, Tag.PLACE_OF_BIRTH)
        self._append(out, Tag.COMMUNITY_OF_BIRTH, ", ")
        self._append(out, Tag.STATE_OF_BIRTH, "\n")

        return "".join(out)

    # -------------------------------------------------------------------------
    # Typed accessors
    # -------------------------------------------------------------------------

    @property
    def doc_reg_no(self) -> Optional[str]:
        return self.get(Tag.DOC_REG_NO)

    @property
    def issuing_date(self) -> Optional[str]:
        return self.get(Tag.ISSUING_DATE)

    @property
    def expiry_date(self) -> Optional[str]:
        return self.get(Tag.EXPIRY_DATE)

    @property
    def issuing_authority(self) -> Optional[str]:
        return self.get(Tag.ISSUING_AUTHORITY)

    @property
    def document_type(self) -> Optional[str]:
        return self.get(Tag.DOCUMENT_TYPE)

    @property
    def document_serial_number(self) -> Optional[str]:
        return self.get(Tag.DOCUMENT_SERIAL_NUMBER)

    @property
    def chip_serial_number(self) -> Optional[str]:
        return self.get(Tag.CHIP_SERIAL_NUMBER)

    @property
    def personal_number(self) -> Optional[str]:
        return self.get(Tag.PERSONAL_NUMBER)

    @property
    def surname(self) -> Optional[str]:
        return self.get(Tag.SURNAME)

    @property
    def given_name(self) -> Optional[str]:
        return self.get(Tag.GIVEN_NAME)

    @property
    def parent_given_name(self) -> Optional[str]:
        return self.get(Tag.PARENT_GIVEN_NAME)

    @property
    def sex(self) -> Optional[str]:
        return self.get(Tag.SEX)

    @property
    def nationality_full(self) -> Optional[str]:
        return self.get(Tag.NATIONALITY_FULL)

    @property
    def place_of_birth(self) -> Optional[str]:
        return self.get(Tag.PLACE_OF_BIRTH)

    @property
    def community_of_birth(self) -> Optional[str]:
        return self.get(Tag.COMMUNITY_OF_BIRTH)

    @property
    def state_of_birth(self) -> Optional[str]:
        return self.get(Tag.STATE_OF_BIRTH)

    @property
    def state_of_birth_code(self) -> Optional[str]:
        return self.get(Tag.STATE_OF_BIRTH_CODE)

    @property
    def date_of_birth(self) -> Optional[str]:
        return self.get(Tag.DATE_OF_BIRTH)

    @property
    def state(self) -> Optional[str]:
        return self.get(Tag.STATE)

    @property
    def community(self) -> Optional[str]:
        return self.get(Tag.COMMUNITY)

    @property
    def place(self) -> Optional[str]:
        return self.get(Tag.PLACE)

    @property
    def street(self) -> Optional[str]:
        return self.get(Tag.STREET)

    @property
    def house_number(self) -> Optional[str]:
        return self.get(Tag.HOUSE_NUMBER)

    @property
    def house_letter(self) -> Optional[str]:
        return self.get(Tag.HOUSE_LETTER)

    @property
    def entrance(self) -> Optional[str]:
        return self.get(Tag.ENTRANCE)

    @property
    def floor(self) -> Optional[str]:
        return self.get(Tag.FLOOR)

    @property
    def apartment_number(self) -> Optional[str]:
        return self.get(Tag.APARTMENT_NUMBER)

    @property
    def address_date(self) -> Optional[str]:
        return self.get(Tag.ADDRESS_DATE)

    @property
    def address_label(self) -> Optional[str]:
        return self.get(Tag.ADDRESS_LABEL)

    # -------------------------------------------------------------------------
    # Debug output
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return "".join(
            f"{tag}: {value}" for tag, value in self.entries if value
        )

    def __repr__(self) -> str:
        # Tag names only; values are personal data.
        names = ", ".join(tag.name for tag, _ in self.entries)
        return f"EidInfo(tags=[{names}])"


# =============================================================================
# EidInfoBuilder
# =============================================================================

class EidInfoBuilder:
    """
    Builds an instance of EidInfo.

    Not thread-safe: one builder belongs to one decoding sequence.
    A builder is single-use; after build() every call raises
    BuilderConsumedError.

    Usage:
        info = (
            EidInfo.builder()
            .add_value(Tag.SURNAME, "Petrović")
            .add_value(Tag.GIVEN_NAME, "Petar")
            .build()
        )
    """

    def __init__(self) -> None:
        self._fields: dict[Tag, str] = {}
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderConsumedError(
                message="Builder already produced a record; start a new builder",
            )

    def add_value(self, tag: Tag, value: str) -> EidInfoBuilder:
        """
        Add a value to the builder.

        A failed call leaves the builder unchanged.

        Returns:
            This builder, for chaining

        Raises:
            ValidationError: If the value fails validation for the tag
            DuplicateFieldError: If the tag was already added
            BuilderConsumedError: If build() was already called
        """
        self._ensure_open()

        try:
            validate_entry(tag, value)
        except ValidationError:
            logger.warning(
                f"Rejected value for tag {getattr(tag, 'name', tag)}",
                extra={"tag": getattr(tag, "name", repr(tag))},
            )
            raise

        if tag in self._fields:
            logger.warning(f"Duplicate tag {tag.name}", extra={"tag": tag.name})
            raise DuplicateFieldError(
                message=f"Tag '{tag}' already added",
                details={"tag": tag.name, "value": value, "existing": self._fields[tag]},
            )

        self._fields[tag] = value
        logger.debug(f"Accepted tag {tag.name}", extra={"tag": tag.name})
        return self

    def build(self) -> EidInfo:
        """
        Produce an immutable record of everything added so far.

        Raises:
            BuilderConsumedError: If build() was already called
        """
        self._ensure_open()
        self._built = True
        return EidInfo(entries=tuple(self._fields.items()))

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, tag: object) -> bool:
        return tag in self._fields
