"""
Module: config

Purpose:
    External configuration consumed by the crop variant builder: which
    secondary label catalog (namespace + basename) to consult when resolving
    default titles.

Key Classes:
    - BuilderSettings: Immutable settings, validated on construction
    - SettingsError: Settings file unreadable or malformed

Key Functions:
    - load_settings(path): Read BuilderSettings from a JSON file

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - builder.crop_variant: secondary title lookup
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# Accepted spellings per field (snake_case first)
_FIELD_ALIASES = {
    "configuration_provider_namespace": (
        "configuration_provider_namespace",
        "configurationProviderExtensionNamespace",
    ),
    "configuration_provider_basename": (
        "configuration_provider_basename",
        "configurationProviderFileBasename",
    ),
}


class SettingsError(RuntimeError):
    """Raised when a settings file cannot be read."""


@dataclass(frozen=True)
class BuilderSettings:
    """
    Builder settings (immutable).

    Attributes:
        configuration_provider_namespace: Namespace of the secondary label
            catalog (usually the package providing the crop variants)
        configuration_provider_basename: Basename of the catalog file in that
            namespace

    Both must be non-empty for the secondary lookup to happen.

    Example:
        >>> settings = BuilderSettings("site_package", "locallang_be")
        >>> settings.has_configuration_provider
        True
    """

    configuration_provider_namespace: str = ""
    configuration_provider_basename: str = ""

    def __post_init__(self) -> None:
        """Normalize and validate on construction."""
        namespace = (self.configuration_provider_namespace or "").strip()
        basename = (self.configuration_provider_basename or "").strip()
        for field_name, value in (
            ("configuration_provider_namespace", namespace),
            ("configuration_provider_basename", basename),
        ):
            if "/" in value or "\\" in value or value in (".", ".."):
                raise ValueError(f"{field_name} must be a plain name: {value!r}")
        if ":" in namespace or ":" in basename:
            raise ValueError(f"namespace and basename must not contain ':': {namespace!r}, {basename!r}")
        object.__setattr__(self, "configuration_provider_namespace", namespace)
        object.__setattr__(self, "configuration_provider_basename", basename)

    @property
    def has_configuration_provider(self) -> bool:
        """True if the secondary label catalog is configured."""
        return bool(self.configuration_provider_namespace and self.configuration_provider_basename)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> BuilderSettings:
        """
        Build settings from a mapping.

        Accepts snake_case keys as well as the camelCase keys used by
        extension configuration (configurationProviderExtensionNamespace,
        configurationProviderFileBasename). Unknown keys are ignored.
        """
        values: dict[str, str] = {}
        for field_name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if alias in data and data[alias] is not None:
                    values[field_name] = str(data[alias])
                    break
        return cls(**values)


def load_settings(path: Path) -> BuilderSettings:
    """
    Load BuilderSettings from a JSON file.

    Args:
        path: JSON file containing an object with the settings keys

    Returns:
        BuilderSettings

    Raises:
        SettingsError: If the file cannot be read or is not a JSON object
        ValueError: If a value is invalid
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SettingsError(f"Cannot read settings {path}: {e}") from e

    if not isinstance(data, dict):
        raise SettingsError(f"Settings must be a JSON object: {path}")

    settings = BuilderSettings.from_mapping(data)
    logger.debug(
        f"Loaded settings from {path.name}: "
        f"{settings.configuration_provider_namespace}:{settings.configuration_provider_basename}"
    )
    return settings
