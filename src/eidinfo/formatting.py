"""
eidinfo Formatting Helpers

Template handling shared by the composite formatters on EidInfo.

Templates are caller-supplied strings with a "%s" placeholder for the
field value, e.g. "ulaz %s" or "%s. sprat". Rendering is plain
substitution and never raises, whatever the template contains.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = [
    'PLACEHOLDER',
    'STATE_CODE_SERBIA',
    'STATE_NAME_SERBIA',
    'AddressLabels',
    'sanitize_format',
    'render',
    'display_state',
]

PLACEHOLDER = "%s"

STATE_CODE_SERBIA = "SRB"
STATE_NAME_SERBIA = "REPUBLIKA SRBIJA"


def sanitize_format(template: Optional[str]) -> str:
    """
    Require at least one placeholder in a template.

    None, empty, or placeholder-free templates are replaced with a bare
    placeholder, which renders the raw value with no decoration.
    """
    if template and PLACEHOLDER in template:
        return template
    return PLACEHOLDER


def render(template: str, value: str) -> str:
    """Substitute value for every placeholder in template."""
    return template.replace(PLACEHOLDER, value)


def display_state(raw_state: Optional[str]) -> str:
    """
    Display string for the residence state.

    Only the Serbian code is spelled out, as it is by far the most common
    value; every other code is shown as read from the card.
    """
    if raw_state is None:
        return ""
    if raw_state == STATE_CODE_SERBIA:
        return STATE_NAME_SERBIA
    return raw_state


@dataclass(frozen=True)
class AddressLabels:
    """
    Templates for the labelled parts of a residence address.

    Attributes:
        entrance: Template for the entrance label, e.g. "ulaz %s"
        floor: Template for the floor number, e.g. "%s. sprat"
        apartment: Template for the apartment number, e.g. "br. %s"
        name: Optional pack name, informational only
    """
    entrance: Optional[str] = None
    floor: Optional[str] = None
    apartment: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def serbian_latin(cls) -> AddressLabels:
        """Recommended templates for Serbian (Latin script)."""
        return cls(
            entrance="ulaz %s",
            floor="%s. sprat",
            apartment="br. %s",
            name="sr-Latn",
        )

    def sanitized(self) -> AddressLabels:
        """Copy with each template sanitized independently."""
        return AddressLabels(
            entrance=sanitize_format(self.entrance),
            floor=sanitize_format(self.floor),
            apartment=sanitize_format(self.apartment),
            name=self.name,
        )
