"""
Record Validation Utilities

Validates finished crop variant records, e.g. records assembled by hand or
read back from a larger configuration before they are merged into a
collection.

Two levels:
- basic checks (always): the same invariants CropVariant.get() enforces
- strict mode: additionally validates the record body with jsonschema
  against crop_variant.schema.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import jsonschema

from ..errors import MissingFieldError, ShapeError, UnknownKeyError
from ..models.area import AREA_KEYS, is_complete_area
from ..utils.arrays import missing_keys

RECORD_FIELDS: tuple[str, ...] = (
    "title",
    "cropArea",
    "focusArea",
    "coverAreas",
    "allowedAspectRatios",
    "selectedRatio",
)

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def validate_variant_record(data: Mapping[str, Any], *, strict: bool = False) -> str:
    """
    Validate a single-entry crop variant record ``{name: body}``.

    Args:
        data: Record as produced by CropVariant.get()
        strict: If True, also validate the body with jsonschema

    Returns:
        The variant name (the record's only key)

    Raises:
        ShapeError: If the record or one of its areas is malformed
        MissingFieldError: If title, cropArea or allowedAspectRatios is empty
        UnknownKeyError: If selectedRatio is not an allowed aspect ratio
    """
    if not isinstance(data, Mapping) or len(data) != 1:
        raise ShapeError(
            "Crop variant record must be a mapping with exactly one variant name",
            code=1700000001,
        )
    name, body = next(iter(data.items()))
    validate_variant_body(name, body, strict=strict)
    return name


def validate_variant_body(name: str, body: Any, *, strict: bool = False) -> None:
    """
    Validate the body of a crop variant record.

    Args:
        name: Variant name (used in error messages)
        body: Record body with the six record fields
        strict: If True, also validate with jsonschema

    Raises:
        See validate_variant_record()
    """
    if not isinstance(body, Mapping):
        raise ShapeError(
            f'Crop variant "{name}" must be a mapping',
            variant=name,
            code=1700000002,
        )

    missing = missing_keys(RECORD_FIELDS, body)
    if missing:
        raise ShapeError(
            f'Crop variant "{name}" is missing fields: {missing}',
            variant=name,
            code=1700000003,
        )

    if not body["title"]:
        raise MissingFieldError(
            f'Title for cropVariant "{name}" not set.',
            variant=name,
            path="title",
            code=1520731261,
        )
    if not body["cropArea"]:
        raise MissingFieldError(
            f'cropArea for cropVariant "{name}" not set.',
            variant=name,
            path="cropArea",
            code=1520731402,
        )
    _validate_area(name, body["cropArea"], "cropArea", code=1520732819)

    if body["focusArea"] is not None:
        _validate_area(name, body["focusArea"], "focusArea", code=1520892162)

    cover_areas = body["coverAreas"]
    if cover_areas is not None:
        if not isinstance(cover_areas, list):
            raise ShapeError(
                f'coverAreas for cropVariant "{name}" must be a list',
                variant=name,
                path="coverAreas",
                code=1700000004,
            )
        for i, cover_area in enumerate(cover_areas):
            _validate_area(name, cover_area, f"coverAreas[{i}]", code=1520733632)

    ratios = body["allowedAspectRatios"]
    if not ratios:
        raise MissingFieldError(
            f'No allowedAspectRatios set for cropVariant "{name}".',
            variant=name,
            path="allowedAspectRatios",
            code=1520962836,
        )

    if not isinstance(ratios, Mapping):
        raise ShapeError(
            f'allowedAspectRatios for cropVariant "{name}" must be a mapping',
            variant=name,
            path="allowedAspectRatios",
            code=1700000006,
        )

    selected = body["selectedRatio"]
    if not isinstance(selected, str):
        raise ShapeError(
            f'selectedRatio for cropVariant "{name}" must be a string',
            variant=name,
            path="selectedRatio",
            code=1700000007,
        )
    if selected and selected not in ratios:
        raise UnknownKeyError(
            f'selectedRatio "{selected}" of cropVariant "{name}" is not an allowed aspect ratio.',
            variant=name,
            path="selectedRatio",
            code=1520891907,
        )

    if strict:
        schema = _load_schema("crop_variant")
        try:
            jsonschema.validate(dict(body), schema)
        except jsonschema.ValidationError as e:
            raise ShapeError(
                f'Schema validation failed for cropVariant "{name}": {e.message}',
                variant=name,
                path=".".join(str(p) for p in e.absolute_path),
                code=1700000005,
            ) from e


def _validate_area(name: str, area: Any, path: str, *, code: int) -> None:
    """Validate that an area mapping has all required keys."""
    if not isinstance(area, Mapping) or not is_complete_area(area):
        missing = missing_keys(AREA_KEYS, area) if isinstance(area, Mapping) else list(AREA_KEYS)
        raise ShapeError(
            f'{path} for cropVariant "{name}" does not have all necessary keys set '
            f"(missing: {missing}).",
            variant=name,
            path=path,
            code=code,
        )
