"""
Schemas Package

JSON schema definition and validation of finished crop variant records.
"""

from .validator import (
    validate_variant_record,
    validate_variant_body,
    RECORD_FIELDS,
)

__all__ = [
    "validate_variant_record",
    "validate_variant_body",
    "RECORD_FIELDS",
]
