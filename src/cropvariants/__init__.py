"""Top-level package for the crop variants builder.

Provides subpackages:
- cropvariants.builder – CropVariant builder and CropVariantCollection
- cropvariants.core – errors, area model and record validation
- cropvariants.localization – label lookup for default titles
"""

from .builder import CropVariant, CropVariantCollection
from .config import BuilderSettings, SettingsError, load_settings
from .core import (
    Area,
    CropVariantError,
    DuplicateKeyError,
    MissingFieldError,
    ShapeError,
    UnknownKeyError,
)
from .defaults import aspect_ratios, default_crop_area


def _get_version() -> str:
    """Get version from importlib.metadata (installed) or pyproject.toml (dev)."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    try:
        return pkg_version("cropvariants")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"


__version__ = _get_version()
__copyright__ = "Copyright 2026 The cropvariants authors. Licensed under the MIT License"
__all__: list[str] = [
    "__version__",
    "Area",
    "BuilderSettings",
    "CropVariant",
    "CropVariantCollection",
    "CropVariantError",
    "DuplicateKeyError",
    "MissingFieldError",
    "SettingsError",
    "ShapeError",
    "UnknownKeyError",
    "aspect_ratios",
    "default_crop_area",
    "load_settings",
]
