"""
eidinfo Label Pack Loader

Loads and validates address label packs from YAML or JSON files and
converts them to AddressLabels.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..exceptions import LabelPackLoadError, LabelPackValidationError, LabelPackVersionMismatch
from ..formatting import AddressLabels
from .schema import SCHEMA_VERSION, LabelPackSchema, check_schema_version, validate_label_pack

logger = logging.getLogger(__name__)


def _convert_label_pack(schema: LabelPackSchema) -> AddressLabels:
    """Convert LabelPackSchema to AddressLabels."""
    return AddressLabels(
        entrance=schema.entrance,
        floor=schema.floor,
        apartment=schema.apartment,
        name=schema.name,
    )


def _parse(data: Any, source: str) -> AddressLabels:
    """Version-check, validate and convert raw pack data."""
    if not isinstance(data, dict):
        raise LabelPackLoadError(
            message=f"Label pack must be a mapping, got {type(data).__name__}",
            details={"source": source},
        )

    if not check_schema_version(data):
        pack_version = data.get("schema_version", "unknown")
        raise LabelPackVersionMismatch(
            message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
            details={
                "source": source,
                "pack_version": pack_version,
                "expected_version": SCHEMA_VERSION,
            },
        )

    try:
        schema = validate_label_pack(data)
    except ValidationError as e:
        raise LabelPackValidationError(
            message=f"Label pack validation failed: {e.error_count()} errors",
            details={"errors": e.errors(), "source": source},
        ) from e

    labels = _convert_label_pack(schema)
    logger.debug(f"Loaded label pack {labels.name or '<unnamed>'} from {source}")
    return labels


def _load_file(path: Path) -> Any:
    """Load data from YAML or JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in {".yaml", ".yml"}:
            return yaml.safe_load(f)
        elif path.suffix.lower() == ".json":
            return json.load(f)
        else:
            # Try YAML first, then JSON
            content = f.read()
            try:
                return yaml.safe_load(content)
            except yaml.YAMLError:
                return json.loads(content)


def load_label_pack(path: Union[str, Path]) -> AddressLabels:
    """
    Load a label pack from a file.

    Args:
        path: Path to YAML or JSON file

    Returns:
        AddressLabels ready for EidInfo.get_place_full_with()

    Raises:
        LabelPackLoadError: If the file cannot be read or parsed
        LabelPackValidationError: If validation fails
        LabelPackVersionMismatch: If schema version incompatible
    """
    path = Path(path)

    try:
        data = _load_file(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise LabelPackLoadError(
            message=f"Failed to load label pack: {e}",
            details={"path": str(path), "error": str(e)},
        ) from e

    return _parse(data, str(path))


def load_label_pack_from_string(content: str, format: str = "yaml") -> AddressLabels:
    """
    Load a label pack from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"

    Raises:
        LabelPackLoadError: If the content cannot be parsed
        LabelPackValidationError: If validation fails
        LabelPackVersionMismatch: If schema version incompatible
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (ValueError, yaml.YAMLError) as e:
        raise LabelPackLoadError(
            message=f"Failed to parse label pack: {e}",
            details={"format": format, "error": str(e)},
        ) from e

    return _parse(data, "<string>")
