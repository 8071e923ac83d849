"""Exception types raised while rendering HAL resources.

Any of these aborts the whole render: callers receive the exception and never
a partially built document.
"""

from typing import Any


class HalRenderError(Exception):
    """Base exception for all rendering failures."""


class InvalidValueError(HalRenderError):
    """A value is not a Scalar, List or Map where one is required.

    Also raised for structural irregularities such as a ``_links`` section
    that is not a Map, or a List nested directly inside another List.
    """

    def __init__(self, key: str, value: Any, reason: str = "") -> None:
        self.key = key
        self.value = value
        message = f"Invalid value for '{key}': {type(value).__name__}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidNameError(HalRenderError):
    """A property, relation or attribute name is not a legal XML name."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"'{key}' is not a valid XML name")


class ResourceDepthError(HalRenderError):
    """Resource or property nesting exceeds the configured depth limit."""

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"Nesting depth {depth} exceeds limit of {limit}; "
            "is the resource graph cyclic?"
        )
