"""Mapping key helpers."""

from __future__ import annotations

from typing import Any, Iterable, Mapping


def keys_exist(keys: Iterable[str], data: Mapping[str, Any] | None) -> bool:
    """
    Check that every key in ``keys`` is present in ``data``.

    Only presence is checked; values (including None) are not inspected.

    Args:
        keys: Keys that must exist
        data: Mapping to check (None is treated as empty)

    Returns:
        True if all keys are present
    """
    if not data:
        return False
    return all(key in data for key in keys)


def missing_keys(keys: Iterable[str], data: Mapping[str, Any] | None) -> list[str]:
    """Return the keys from ``keys`` that ``data`` lacks, in order."""
    data = data or {}
    return [key for key in keys if key not in data]
