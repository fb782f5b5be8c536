"""
Module: builder.collection

Purpose:
    Merges sibling crop variant records into the single mapping an image
    field configuration expects (``{name: body, ...}``).

Key Classes:
    - CropVariantCollection: Ordered, name-unique set of crop variant records

Used By:
    - Callers configuring several crop variants for one image field
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterator, List, Mapping, Union

from ..core.errors import DuplicateKeyError, MissingFieldError, UnknownKeyError
from ..core.schemas.validator import validate_variant_record
from .crop_variant import CropVariant

logger = logging.getLogger(__name__)

VariantLike = Union[CropVariant, Mapping[str, Any]]


class CropVariantCollection:
    """
    Collection of finished crop variant records.

    Builders are finalized with get() when added, so later builder mutation
    does not affect the collection. Ready-made records are validated first.

    Example:
        >>> collection = CropVariantCollection()
        >>> collection.add(desktop).add(mobile)  # doctest: +SKIP
        >>> collection.get()  # doctest: +SKIP
        {'desktop': {...}, 'mobile': {...}}
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._variants: Dict[str, Dict[str, Any]] = {}

    def add(self, variant: VariantLike) -> CropVariantCollection:
        """
        Add a crop variant builder or a single-entry record.

        Raises:
            DuplicateKeyError: If a variant with the same name was added before
            CropVariantError: If the builder or record is invalid
        """
        if isinstance(variant, CropVariant):
            record = variant.get()
        else:
            validate_variant_record(variant, strict=self.strict)
            record = copy.deepcopy(dict(variant))

        name, body = next(iter(record.items()))
        if name in self._variants:
            raise DuplicateKeyError(
                f'cropVariant "{name}" already exists in the collection.',
                variant=name,
                code=1700000020,
            )
        self._variants[name] = body
        logger.debug(f"Added cropVariant {name} ({len(self._variants)} total)")
        return self

    def remove(self, name: str) -> CropVariantCollection:
        """
        Remove a crop variant by name.

        Raises:
            UnknownKeyError: If no variant with that name exists
        """
        if name not in self._variants:
            raise UnknownKeyError(
                f'cropVariant "{name}" can\'t be removed, it is not in the collection.',
                variant=name,
                code=1700000021,
            )
        del self._variants[name]
        return self

    def names(self) -> List[str]:
        """Variant names in insertion order."""
        return list(self._variants)

    def get(self) -> Dict[str, Dict[str, Any]]:
        """
        Return all records merged into one mapping (an independent copy).

        Raises:
            MissingFieldError: If the collection is empty
        """
        if not self._variants:
            raise MissingFieldError(
                "No cropVariants in the collection.",
                code=1700000022,
            )
        return copy.deepcopy(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._variants))
