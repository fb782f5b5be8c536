"""
Module: core.errors

Purpose:
    Error taxonomy for crop variant building and validation. Every error is
    a caller-input error: nothing here is transient or retryable.

Key Classes:
    - CropVariantError: Base class (a ValueError)
    - MissingFieldError: Required field empty at finalize time
    - ShapeError: Area mapping missing required keys / schema violation
    - DuplicateKeyError: Aspect ratio key or variant name collision
    - UnknownKeyError: Reference to an aspect ratio key that does not exist

Used By:
    - builder.crop_variant
    - builder.collection
    - core.schemas.validator
    - defaults
"""

from __future__ import annotations


class CropVariantError(ValueError):
    """
    Base class for crop variant configuration errors.

    Attributes:
        variant: Name of the crop variant the error belongs to ("" if unknown)
        path: Field path that failed, e.g. "focusArea" or "coverAreas[1]"
        code: Stable numeric identifier of the failing check
    """

    def __init__(self, message: str, *, variant: str = "", path: str = "", code: int = 0):
        super().__init__(message)
        self.variant = variant
        self.path = path
        self.code = code


class MissingFieldError(CropVariantError):
    """Raised when a required field (title, cropArea, allowedAspectRatios) is empty."""


class ShapeError(CropVariantError):
    """Raised when an area mapping does not have all required keys."""


class DuplicateKeyError(CropVariantError):
    """Raised when an aspect ratio key (or variant name) is added twice."""


class UnknownKeyError(CropVariantError):
    """Raised when removing or selecting an aspect ratio key that was never added."""
