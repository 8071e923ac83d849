"""Shared utilities for HAL XML rendering.

This module provides the configuration object, exception hierarchy and
logging helpers used across the model, tree and API layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    RendererConfig,
)
from .errors import (
    HalRenderError,
    InvalidNameError,
    InvalidValueError,
    ResourceDepthError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "RendererConfig",
    "HalRenderError",
    "InvalidNameError",
    "InvalidValueError",
    "ResourceDepthError",
    "CorrelationLogger",
    "get_logger",
]
