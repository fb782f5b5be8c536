"""
JSON label catalogs.

Catalog layout below a root directory::

    <root>/<namespace>/<basename>.json             default language
    <root>/<namespace>/<language>.<basename>.json  e.g. de.locallang.json

Each catalog is a flat JSON object mapping catalog keys
(``crop_variants.<name>.label``) to translated text. Keys missing from a
language catalog fall back to the default catalog.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from .localizer import parse_label_reference

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "default"


def _is_plain_name(value: str) -> bool:
    """True if ``value`` can be used as a single path component below the root."""
    return bool(value) and "/" not in value and "\\" not in value and value not in (".", "..")


class JsonCatalogLocalizer:
    """Localizer reading label references from JSON catalogs on disk."""

    def __init__(self, root: Path, language: str = DEFAULT_LANGUAGE) -> None:
        self.root = Path(root)
        self.language = (language or DEFAULT_LANGUAGE).strip()
        if not _is_plain_name(self.language):
            raise ValueError(f"language must be a plain name: {self.language!r}")
        self._catalogs: Dict[Path, Dict[str, str]] = {}

    def lookup(self, key: str) -> str:
        parsed = parse_label_reference(key)
        if parsed is None:
            logger.debug(f"Not a label reference: {key!r}")
            return ""
        namespace, basename, label = parsed
        if not (_is_plain_name(namespace) and _is_plain_name(basename)):
            logger.debug(f"Catalog outside root rejected: {key!r}")
            return ""

        if self.language != DEFAULT_LANGUAGE:
            text = self._load(self._catalog_path(namespace, basename, self.language)).get(label, "")
            if text:
                return text
        text = self._load(self._catalog_path(namespace, basename, None)).get(label, "")
        if not text:
            logger.debug(f"No translation for {key} ({self.language})")
        return text

    def _catalog_path(self, namespace: str, basename: str, language: Optional[str]) -> Path:
        filename = f"{basename}.json" if language is None else f"{language}.{basename}.json"
        return self.root / namespace / filename

    def _load(self, path: Path) -> Dict[str, str]:
        """Load and cache one catalog. Missing or malformed catalogs are empty."""
        if path in self._catalogs:
            return self._catalogs[path]

        catalog: Dict[str, str] = {}
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
                logger.warning("Failed to load label catalog %s: %s", path, exc)
            else:
                if isinstance(data, dict):
                    catalog = {str(k): v for k, v in data.items() if isinstance(v, str)}
                else:
                    logger.warning("Label catalog %s is not a JSON object", path)
        else:
            logger.debug(f"Label catalog not found: {path}")

        self._catalogs[path] = catalog
        return catalog
