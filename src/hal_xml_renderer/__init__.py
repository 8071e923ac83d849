"""HAL XML Renderer.

Renders HAL hypermedia resources (properties, ``_links`` and ``_embedded``
sub-resources) into XML documents.

Progressive API Disclosure:
- Level 1: Simple function - render()
- Level 2: Configured renderer - XmlRenderer with RendererConfig
- Level 3: Tree building - ResourceTreeBuilder with a custom NodeFactory
"""

__version__ = "0.1.0"
__author__ = "HAL XML Renderer Team"

# Level 1 and 2: rendering entry points
from .api import Renderer, XmlRenderer, render

# Value model for typed resource construction
from .model import ListValue, MapValue, Scalar, normalize, to_value

# Configuration and errors
from .shared import (
    ConfigError,
    ConfigValidationError,
    HalRenderError,
    InvalidNameError,
    InvalidValueError,
    RendererConfig,
    ResourceDepthError,
)

# Level 3: tree building
from .tree import LxmlNodeFactory, NodeFactory, ResourceTreeBuilder

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple rendering function
    "render",

    # Level 2: Renderer classes
    "Renderer",
    "XmlRenderer",
    "RendererConfig",

    # Value model
    "ListValue",
    "MapValue",
    "Scalar",
    "normalize",
    "to_value",

    # Errors
    "ConfigError",
    "ConfigValidationError",
    "HalRenderError",
    "InvalidNameError",
    "InvalidValueError",
    "ResourceDepthError",

    # Level 3: Tree building
    "LxmlNodeFactory",
    "NodeFactory",
    "ResourceTreeBuilder",
]
