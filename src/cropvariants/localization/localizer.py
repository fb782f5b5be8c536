"""
Module: localization.localizer

Purpose:
    Localizer protocol consumed by the crop variant builder, plus the two
    in-memory implementations and the label reference convention.

Key Classes:
    - Localizer: Protocol with lookup(key) -> str ("" means not found)
    - NullLocalizer: Never finds anything
    - MappingLocalizer: Dict-backed lookup

Key Functions:
    - label_reference(): Build "<namespace>:<basename>:crop_variants.<name>.label"
    - parse_label_reference(): Split a reference into its three parts
"""

from __future__ import annotations

import html
from typing import Mapping, Optional, Protocol, runtime_checkable

LABEL_PREFIX = "crop_variants."
LABEL_SUFFIX = ".label"

# Namespace/basename of this library's own label catalog
DEFAULT_NAMESPACE = "cropvariants"
DEFAULT_BASENAME = "locallang"


@runtime_checkable
class Localizer(Protocol):
    """Translates label references. Returns "" for unknown keys, never raises."""

    def lookup(self, key: str) -> str:
        ...


class NullLocalizer:
    """Localizer without any translations."""

    def lookup(self, key: str) -> str:
        return ""


class MappingLocalizer:
    """
    Localizer backed by a plain mapping of label reference -> text.

    Example:
        >>> loc = MappingLocalizer({"site:labels:crop_variants.hero.label": "Hero"})
        >>> loc.lookup("site:labels:crop_variants.hero.label")
        'Hero'
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._entries = dict(entries or {})

    def lookup(self, key: str) -> str:
        return self._entries.get(key, "") or ""


def label_key(name: str) -> str:
    """Catalog key for a variant name, e.g. ``crop_variants.teaser.label``."""
    return f"{LABEL_PREFIX}{html.escape(name).strip()}{LABEL_SUFFIX}"


def label_reference(namespace: str, basename: str, name: str) -> str:
    """
    Build the label reference for a variant name.

    Args:
        namespace: Catalog namespace (e.g. the providing package)
        basename: Catalog file basename within the namespace
        name: Crop variant name (HTML-escaped and trimmed)

    Returns:
        Reference like "cropvariants:locallang:crop_variants.teaser.label"
    """
    return f"{namespace}:{basename}:{label_key(name)}"


def parse_label_reference(reference: str) -> Optional[tuple[str, str, str]]:
    """
    Split a label reference into (namespace, basename, key).

    Returns:
        Tuple of the three parts, or None if ``reference`` is not a reference
    """
    parts = reference.split(":", 2)
    if len(parts) != 3 or not all(parts):
        return None
    return parts[0], parts[1], parts[2]
