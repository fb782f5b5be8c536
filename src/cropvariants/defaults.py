"""Default crop area and aspect ratio presets.

The preset values follow the usual editor conventions: ``value`` is
width / height, and the free ratio uses the key "NaN" with value 0.0.
"""

from __future__ import annotations

from typing import Any, Dict

from .core.errors import UnknownKeyError
from .core.models.area import Area

ASPECT_RATIO_PRESETS: Dict[str, Dict[str, Any]] = {
    "NaN": {"title": "Free", "value": 0.0},
    "21:9": {"title": "21:9", "value": 21 / 9},
    "16:9": {"title": "16:9", "value": 16 / 9},
    "4:3": {"title": "4:3", "value": 4 / 3},
    "3:2": {"title": "3:2", "value": 3 / 2},
    "1:1": {"title": "1:1", "value": 1.0},
    "2:3": {"title": "2:3", "value": 2 / 3},
    "3:4": {"title": "3:4", "value": 3 / 4},
    "9:16": {"title": "9:16", "value": 9 / 16},
}


def default_crop_area() -> Dict[str, Any]:
    """Crop area covering the full image (a new dict on every call)."""
    return Area.full().to_dict()


def aspect_ratios(*keys: str) -> Dict[str, Dict[str, Any]]:
    """
    Select aspect ratio presets by key, in the given order.

    Args:
        *keys: Preset keys like "16:9" (surrounding whitespace ignored)

    Returns:
        Mapping suitable for CropVariant.add_allowed_aspect_ratios()

    Raises:
        UnknownKeyError: If a key is not a known preset
    """
    selected: Dict[str, Dict[str, Any]] = {}
    for key in keys:
        key = key.strip()
        if key not in ASPECT_RATIO_PRESETS:
            raise UnknownKeyError(
                f'Aspect ratio preset "{key}" does not exist. '
                f"Known presets: {', '.join(ASPECT_RATIO_PRESETS)}",
                path="allowedAspectRatios",
                code=1700000010,
            )
        selected[key] = dict(ASPECT_RATIO_PRESETS[key])
    return selected
