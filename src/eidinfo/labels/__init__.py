"""
eidinfo Label Packs

Schema validation and loading for address label packs.

A label pack is a small YAML or JSON file holding the templates used to
decorate entrance, floor and apartment values in a residence address:

    schema_version: "1.0.0"
    name: sr-Latn
    entrance: "ulaz %s"
    floor: "%s. sprat"
    apartment: "br. %s"

Usage:
    from eidinfo.labels import load_label_pack

    labels = load_label_pack("path/to/sr-latn.yaml")
    print(info.get_place_full_with(labels))
"""
from __future__ import annotations

from .loader import (
    load_label_pack,
    load_label_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    LabelPackSchema,
    check_schema_version,
    validate_label_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "load_label_pack",
    "load_label_pack_from_string",
    # Validation
    "validate_label_pack",
    "check_schema_version",
    # Schemas
    "LabelPackSchema",
]
