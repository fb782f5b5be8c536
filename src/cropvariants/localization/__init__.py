"""
Module: localization

Purpose:
    Label lookup for crop variant titles. The builder only depends on the
    Localizer protocol; which catalogs back it is up to the caller.

Key Classes:
    - Localizer: Protocol (lookup(key) -> str)
    - NullLocalizer, MappingLocalizer: In-memory implementations
    - JsonCatalogLocalizer: JSON catalogs on disk with language fallback

Used By:
    - builder.crop_variant: default title resolution
"""

from .localizer import (
    DEFAULT_BASENAME,
    DEFAULT_NAMESPACE,
    Localizer,
    MappingLocalizer,
    NullLocalizer,
    label_key,
    label_reference,
    parse_label_reference,
)
from .catalog import JsonCatalogLocalizer

__all__ = [
    "DEFAULT_BASENAME",
    "DEFAULT_NAMESPACE",
    "Localizer",
    "MappingLocalizer",
    "NullLocalizer",
    "JsonCatalogLocalizer",
    "label_key",
    "label_reference",
    "parse_label_reference",
]
