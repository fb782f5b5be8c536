"""
Module: builder.crop_variant

Purpose:
    Fluent builder for a single crop variant record. Collects title, crop
    area, focus area, cover areas and allowed aspect ratios, validates the
    result and emits a plain ``{name: {...}}`` mapping.

Key Classes:
    - CropVariant: The builder

Dependencies:
    - core.errors: Error taxonomy
    - core.models.area: Area normalization and completeness checks
    - localization: Default title lookup
    - config: Secondary label catalog settings
    - defaults: Default crop area

Used By:
    - builder.collection
    - Callers assembling image field configuration

Example:
    >>> from cropvariants.defaults import aspect_ratios
    >>> record = (
    ...     CropVariant.create("teaser_crop")
    ...     .add_allowed_aspect_ratios(aspect_ratios("16:9", "NaN"))
    ...     .set_selected_ratio("16:9")
    ...     .get()
    ... )
    >>> record["teaser_crop"]["title"]
    'teaser crop'
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from ..config import BuilderSettings
from ..core.errors import DuplicateKeyError, MissingFieldError, ShapeError, UnknownKeyError
from ..core.models.area import AREA_KEYS, Area, area_mapping, is_complete_area
from ..core.utils.arrays import missing_keys
from ..defaults import default_crop_area
from ..localization import (
    DEFAULT_BASENAME,
    DEFAULT_NAMESPACE,
    Localizer,
    NullLocalizer,
    label_reference,
    parse_label_reference,
)

logger = logging.getLogger(__name__)

AreaLike = Union[Area, Mapping[str, Any]]
CropAreaProvider = Callable[[], Mapping[str, Any]]


class CropVariant:
    """
    Builder for one crop variant.

    All setters return the builder so calls can be chained. Focus area shape
    and aspect ratio keys are checked immediately; everything else is checked
    by get().

    Attributes:
        name: Variant name (the key of the emitted record), read-only
        title: Current title (label reference or plain text)
    """

    def __init__(
        self,
        name: str,
        *,
        localizer: Optional[Localizer] = None,
        settings: Optional[BuilderSettings] = None,
        default_crop_area: CropAreaProvider = default_crop_area,
    ) -> None:
        self._name = name
        self._localizer: Localizer = localizer if localizer is not None else NullLocalizer()
        self._settings = settings if settings is not None else BuilderSettings()

        self.title: str = ""
        self._crop_area: Dict[str, Any] = {}
        self._focus_area: Dict[str, Any] = {}
        self._cover_areas: List[Any] = []
        self._allowed_aspect_ratios: Dict[str, Any] = {}
        self._selected_ratio: str = ""

        self._set_default_title()
        self._crop_area = area_mapping(default_crop_area(), variant=name, path="cropArea")

    @classmethod
    def create(
        cls,
        name: str,
        *,
        localizer: Optional[Localizer] = None,
        settings: Optional[BuilderSettings] = None,
        default_crop_area: CropAreaProvider = default_crop_area,
    ) -> CropVariant:
        """
        Create a builder for the crop variant ``name``.

        Resolves the default title and sets the default crop area.

        Args:
            name: Variant name
            localizer: Label lookup for the default title (none by default)
            settings: Secondary label catalog settings
            default_crop_area: Zero-argument provider of the initial crop area

        Returns:
            New CropVariant builder
        """
        return cls(name, localizer=localizer, settings=settings, default_crop_area=default_crop_area)

    @property
    def name(self) -> str:
        return self._name

    # ─────────────────────────────────────────────────────────────────────────
    # Setters
    # ─────────────────────────────────────────────────────────────────────────

    def set_title(self, title: str) -> CropVariant:
        """Set the title (surrounding whitespace removed)."""
        self.title = title.strip()
        return self

    def set_crop_area(self, crop_area: Optional[AreaLike]) -> CropVariant:
        """
        Replace the crop area. Missing keys are checked by get().

        Raises:
            ShapeError: If the area is neither an Area nor a mapping
        """
        self._crop_area = area_mapping(crop_area, variant=self._name, path="cropArea")
        return self

    def set_focus_area(self, focus_area: Optional[AreaLike]) -> CropVariant:
        """
        Set the focus area. An empty mapping (or None) clears it.

        Raises:
            ShapeError: If the area is non-empty and lacks one of x, y, width, height,
                or is neither an Area nor a mapping
        """
        focus_area = area_mapping(focus_area, variant=self._name, path="focusArea")
        if focus_area and not is_complete_area(focus_area):
            raise ShapeError(
                f'focusArea for cropVariant "{self._name}" does not have all necessary keys set '
                f"(missing: {missing_keys(AREA_KEYS, focus_area)}).",
                variant=self._name,
                path="focusArea",
                code=1520894420,
            )
        self._focus_area = focus_area
        return self

    def add_cover_areas(self, cover_areas: Iterable[AreaLike]) -> CropVariant:
        """Append cover areas in order. Shapes are checked by get()."""
        for cover_area in cover_areas:
            if isinstance(cover_area, (Area, Mapping)):
                cover_area = area_mapping(cover_area)
            self._cover_areas.append(cover_area)
        return self

    def add_allowed_aspect_ratios(self, ratios: Mapping[str, Any]) -> CropVariant:
        """
        Add allowed aspect ratios, merging them into the ones already set.

        The call is all-or-nothing: if any key already exists, nothing is added.

        Args:
            ratios: Mapping of ratio key (e.g. "16:9") to descriptor

        Raises:
            DuplicateKeyError: If a key is already an allowed aspect ratio
        """
        for key in ratios:
            if key in self._allowed_aspect_ratios:
                raise DuplicateKeyError(
                    f'allowedAspectRatio "{key}" already exists in cropVariant "{self._name}". '
                    f"Remove it with remove_allowed_aspect_ratio() before adding a new one with the same name.",
                    variant=self._name,
                    path=f"allowedAspectRatios.{key}",
                    code=1520891285,
                )
        for key, ratio in ratios.items():
            self._allowed_aspect_ratios[key] = copy.deepcopy(ratio)
        return self

    def remove_allowed_aspect_ratio(self, ratio: str) -> CropVariant:
        """
        Remove an allowed aspect ratio.

        Raises:
            UnknownKeyError: If the (trimmed) key is not an allowed aspect ratio
        """
        key = ratio.strip()
        if key not in self._allowed_aspect_ratios:
            raise UnknownKeyError(
                f'Aspect ratio "{key}" for cropVariant "{self._name}" can\'t be removed. '
                f"It isn't defined in allowedAspectRatios for this cropVariant.",
                variant=self._name,
                path=f"allowedAspectRatios.{key}",
                code=1520854115,
            )
        del self._allowed_aspect_ratios[key]
        return self

    def set_selected_ratio(self, ratio: str) -> CropVariant:
        """
        Pre-select one of the allowed aspect ratios (stored trimmed).

        Raises:
            UnknownKeyError: If the (trimmed) key is not an allowed aspect ratio
        """
        key = ratio.strip()
        if key not in self._allowed_aspect_ratios:
            raise UnknownKeyError(
                f'selectedRatio "{key}" does not exist in allowedAspectRatios '
                f'of cropVariant "{self._name}".',
                variant=self._name,
                path="selectedRatio",
                code=1520891907,
            )
        self._selected_ratio = key
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Output
    # ─────────────────────────────────────────────────────────────────────────

    def get(self) -> Dict[str, Dict[str, Any]]:
        """
        Validate and return the crop variant record.

        Checks run in a fixed order; the first failing one raises.

        Returns:
            ``{name: {title, cropArea, focusArea, coverAreas,
            allowedAspectRatios, selectedRatio}}`` as an independent copy.
            focusArea and coverAreas are None when unset.

        Raises:
            MissingFieldError: Title, crop area or aspect ratios empty
            ShapeError: Crop, focus or cover area lacks required keys
        """
        if not self.title:
            raise MissingFieldError(
                f'Title for cropVariant "{self._name}" not set.',
                variant=self._name,
                path="title",
                code=1520731261,
            )
        if not self._crop_area:
            raise MissingFieldError(
                f'cropArea for cropVariant "{self._name}" not set.',
                variant=self._name,
                path="cropArea",
                code=1520731402,
            )
        if not is_complete_area(self._crop_area):
            raise ShapeError(
                f'cropArea for cropVariant "{self._name}" does not have all necessary keys set '
                f"(missing: {missing_keys(AREA_KEYS, self._crop_area)}).",
                variant=self._name,
                path="cropArea",
                code=1520732819,
            )
        if self._focus_area and not is_complete_area(self._focus_area):
            raise ShapeError(
                f'focusArea for cropVariant "{self._name}" does not have all necessary keys set.',
                variant=self._name,
                path="focusArea",
                code=1520892162,
            )
        for i, cover_area in enumerate(self._cover_areas):
            if not isinstance(cover_area, Mapping) or not is_complete_area(cover_area):
                raise ShapeError(
                    f'coverAreas for cropVariant "{self._name}" are not configured correctly: '
                    f"coverAreas[{i}] does not have all necessary keys set.",
                    variant=self._name,
                    path=f"coverAreas[{i}]",
                    code=1520733632,
                )
        if not self._allowed_aspect_ratios:
            raise MissingFieldError(
                f'No allowedAspectRatios set for cropVariant "{self._name}". '
                f"Add them with add_allowed_aspect_ratios().",
                variant=self._name,
                path="allowedAspectRatios",
                code=1520962836,
            )

        logger.debug(
            f"Built cropVariant {self._name} with {len(self._allowed_aspect_ratios)} aspect ratio(s)"
        )
        return {
            self._name: copy.deepcopy({
                "title": self.title,
                "cropArea": self._crop_area,
                "focusArea": self._focus_area or None,
                "coverAreas": self._cover_areas or None,
                "allowedAspectRatios": self._allowed_aspect_ratios,
                "selectedRatio": self._selected_ratio,
            })
        }

    def resolved_title(self) -> str:
        """
        Title as display text.

        Label references are translated with the builder's localizer; plain
        titles (or references without a translation) are returned unchanged.
        """
        if parse_label_reference(self.title) is None:
            return self.title
        return self._localizer.lookup(self.title) or self.title

    # ─────────────────────────────────────────────────────────────────────────
    # Default title
    # ─────────────────────────────────────────────────────────────────────────

    def _set_default_title(self) -> None:
        """
        Set the title from label catalogs, falling back to the name.

        a) label reference, if the name has no space and a translation exists
        b) name with underscores replaced by spaces
        """
        if self._name == "":
            return
        title = ""
        if " " not in self._name:
            title = self._default_localization_attempt(self._name)
        if title == "":
            title = self._name.replace("_", " ")
            logger.debug(f"cropVariant {self._name}: title falls back to name")
        else:
            logger.debug(f"cropVariant {self._name}: title from label {title}")
        self.title = title

    def _default_localization_attempt(self, name: str) -> str:
        """
        Look up ``crop_variants.<name>.label``.

        1. in this library's catalog
        2. in the configured provider catalog (wins if found)

        Returns:
            The label reference that has a translation, or "" if none does
        """
        result = ""
        default_reference = label_reference(DEFAULT_NAMESPACE, DEFAULT_BASENAME, name)
        if self._localizer.lookup(default_reference):
            result = default_reference

        if self._settings.has_configuration_provider:
            provider_reference = label_reference(
                self._settings.configuration_provider_namespace,
                self._settings.configuration_provider_basename,
                name,
            )
            if self._localizer.lookup(provider_reference):
                result = provider_reference
        return result

    def __repr__(self) -> str:
        return f"CropVariant({self._name!r}, title={self.title!r})"
