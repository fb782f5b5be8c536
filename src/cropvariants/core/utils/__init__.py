"""
Utilities Package

Small helpers shared by the builder and the validator.
"""

from .arrays import keys_exist, missing_keys

__all__ = [
    "keys_exist",
    "missing_keys",
]
