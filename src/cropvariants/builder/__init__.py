"""
Module: builder

Purpose:
    Fluent building of crop variant records and merging them into one
    image field configuration.

Key Classes:
    - CropVariant: Builder for a single crop variant
    - CropVariantCollection: Name-unique collection of finished records

Dependencies:
    - cropvariants.core: Errors, area model, record validation
    - cropvariants.localization: Default title lookup
"""

from .crop_variant import CropVariant
from .collection import CropVariantCollection

__all__ = [
    "CropVariant",
    "CropVariantCollection",
]
