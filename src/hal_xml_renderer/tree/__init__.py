"""Element tree building for HAL resources.

This module provides the node factory abstraction, link and self-link
handling, and the recursive resource tree builder.
"""

from .builder import RESOURCE_TAG, ResourceTreeBuilder
from .links import LINK_TAG, LinkNodeBuilder, SelfLinkInjector
from .nodes import XML_DECLARATION, LxmlNodeFactory, NodeFactory

__all__ = [
    "LINK_TAG",
    "RESOURCE_TAG",
    "XML_DECLARATION",
    "LinkNodeBuilder",
    "LxmlNodeFactory",
    "NodeFactory",
    "ResourceTreeBuilder",
    "SelfLinkInjector",
]
