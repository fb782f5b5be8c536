"""
Module: area

Purpose:
    Provides the Area dataclass - a rectangular region of an image used for
    crop, focus and cover areas of a crop variant. The builder itself stores
    plain mappings; Area is the typed way to produce one.

Key Functions:
    - Area.full(): Area covering the whole image
    - Area.to_dict(): Serialize to the mapping form the builder stores
    - Area.from_dict(data): Deserialize from a mapping
    - is_complete_area(data): Check a mapping has all required keys

Dependencies:
    - dataclasses (std)
    - core.utils.arrays

Used By:
    - builder.crop_variant
    - core.schemas.validator
    - defaults
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from ..errors import ShapeError
from ..utils.arrays import keys_exist

AREA_KEYS: tuple[str, ...] = ("x", "y", "width", "height")

Coordinate = Union[int, float, str]


@dataclass(frozen=True, slots=True)
class Area:
    """
    Rectangular image region.

    Coordinates are opaque: relative fractions (0.0 - 1.0), pixel counts
    or percentage strings are all accepted and passed through unchanged.
    No range checks are performed.

    Attributes:
        x: Left edge
        y: Top edge
        width: Width of the region
        height: Height of the region

    Example:
        >>> Area(0.1, 0.1, 0.8, 0.8).to_dict()
        {'x': 0.1, 'y': 0.1, 'width': 0.8, 'height': 0.8}
    """

    x: Coordinate
    y: Coordinate
    width: Coordinate
    height: Coordinate

    @classmethod
    def full(cls) -> Area:
        """Area covering the full image in relative coordinates."""
        return cls(x=0.0, y=0.0, width=1.0, height=1.0)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the mapping form used in crop variant records.

        Returns:
            Dict with x, y, width, height (in that order)
        """
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Area:
        """
        Deserialize from a mapping.

        Args:
            data: Mapping with x, y, width, height

        Returns:
            Area instance

        Raises:
            KeyError: If a required key is missing
        """
        return cls(x=data["x"], y=data["y"], width=data["width"], height=data["height"])


def is_complete_area(data: Mapping[str, Any] | None) -> bool:
    """True if ``data`` contains all of x, y, width and height."""
    return keys_exist(AREA_KEYS, data)


def area_mapping(
    area: Area | Mapping[str, Any] | None,
    *,
    variant: str = "",
    path: str = "",
) -> dict[str, Any]:
    """
    Normalize an Area or mapping into a fresh plain dict.

    None becomes an empty dict. Mappings are shallow-copied so later caller
    mutation does not leak into the builder.

    Raises:
        ShapeError: If ``area`` is neither an Area nor a mapping
    """
    if area is None:
        return {}
    if isinstance(area, Area):
        return area.to_dict()
    if not isinstance(area, Mapping):
        raise ShapeError(
            f'{path or "area"} for cropVariant "{variant}" must be a mapping, '
            f"got {type(area).__name__}",
            variant=variant,
            path=path,
            code=1700000008,
        )
    return dict(area)
