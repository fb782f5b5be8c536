"""
Core Models Package

Typed helpers for the rectangle-shaped values of a crop variant.
"""

from .area import AREA_KEYS, Area, area_mapping, is_complete_area

__all__ = [
    "AREA_KEYS",
    "Area",
    "area_mapping",
    "is_complete_area",
]
