"""
Crop Variants Core Package

Shared models, errors and validation used by the builder and the collection.
"""

from .errors import (
    CropVariantError,
    DuplicateKeyError,
    MissingFieldError,
    ShapeError,
    UnknownKeyError,
)
from .models import AREA_KEYS, Area, is_complete_area
from .schemas import validate_variant_record

__all__ = [
    "AREA_KEYS",
    "Area",
    "is_complete_area",
    "CropVariantError",
    "DuplicateKeyError",
    "MissingFieldError",
    "ShapeError",
    "UnknownKeyError",
    "validate_variant_record",
]
