"""Value model for HAL resources.

Explicitly tagged Scalar, List and Map values plus the constant normalizer
that turns scalars into XML text.
"""

from .constants import normalize
from .values import (
    EMBEDDED_KEY,
    EMPTY_MAP,
    LINKS_KEY,
    RESERVED_KEYS,
    ListValue,
    MapValue,
    Scalar,
    Value,
    is_value,
    to_value,
)

__all__ = [
    "EMBEDDED_KEY",
    "EMPTY_MAP",
    "LINKS_KEY",
    "RESERVED_KEYS",
    "ListValue",
    "MapValue",
    "Scalar",
    "Value",
    "is_value",
    "normalize",
    "to_value",
]
