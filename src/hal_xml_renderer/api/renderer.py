"""Renderer API for turning HAL resources into XML documents.

Provides the abstract :class:`Renderer` interface, the :class:`XmlRenderer`
implementation and a module-level :func:`render` shortcut.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Optional

from hal_xml_renderer.model import MapValue, Value, to_value
from hal_xml_renderer.shared import (
    HalRenderError,
    InvalidValueError,
    RendererConfig,
    get_logger,
)
from hal_xml_renderer.tree import LxmlNodeFactory, NodeFactory, ResourceTreeBuilder

MS_PER_SECOND = 1000


class Renderer(ABC):
    """Interface for resource renderers."""

    @abstractmethod
    def render(self, resource: Any) -> str:
        """Render ``resource`` to its textual representation."""


class XmlRenderer(Renderer):
    """Renders HAL resources as XML documents.

    The root element is always ``resource``. A single ``self`` link with an
    ``href`` is collapsed into ``rel``/``href`` attributes on the resource
    element; other links become ``link`` children and embedded resources
    become nested ``resource`` elements.

    Examples:
        >>> renderer = XmlRenderer()
        >>> print(renderer.render({
        ...     "name": "Alice",
        ...     "_links": {"self": {"href": "/u/1"}},
        ... }))
        <?xml version="1.0" encoding="UTF-8"?>
        <resource rel="self" href="/u/1">
          <name>Alice</name>
        </resource>
    """

    def __init__(
        self,
        config: Optional[RendererConfig] = None,
        correlation_id: Optional[str] = None,
        node_factory: Callable[[], NodeFactory] = LxmlNodeFactory
    ) -> None:
        """Initialize the renderer.

        Args:
            config: Renderer configuration (defaults apply if omitted)
            correlation_id: Optional correlation ID for log tracking
            node_factory: Callable creating a fresh node factory per render
        """
        self.config = config or RendererConfig()
        self.correlation_id = correlation_id
        self.node_factory = node_factory
        self.logger = get_logger(__name__, correlation_id, "xml_renderer")

    def render(self, resource: Any) -> str:
        """Render a resource to an XML document.

        Args:
            resource: A :class:`MapValue`, a plain mapping, or an object
                exposing ``to_dict()``

        Returns:
            The document text without a trailing newline

        Raises:
            InvalidValueError: If the resource holds a value that is not a
                Scalar, List or Map, or is structurally malformed
            InvalidNameError: If a key is not a legal XML name
            ResourceDepthError: If nesting exceeds ``config.max_depth``
        """
        start_time = time.time()
        self.logger.info(
            "Starting render",
            extra={"input_type": type(resource).__name__}
        )

        try:
            value = self._coerce(resource)
            factory = self.node_factory()
            builder = ResourceTreeBuilder(factory, self.config, self.correlation_id)
            root = builder.build(value, self.config.root_relation)
            document = factory.serialize(
                root,
                pretty_print=self.config.pretty_print,
                xml_declaration=self.config.xml_declaration,
            )
        except HalRenderError as e:
            self.logger.error(
                "Render failed",
                extra={
                    "error_type": type(e).__name__,
                    "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
                },
                exc_info=False,
            )
            raise

        output = document.rstrip()
        self.logger.debug(
            "Render complete",
            extra={
                "output_length": len(output),
                "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
            }
        )
        return output

    def _coerce(self, resource: Any) -> Value:
        """Convert supported inputs into a resource map."""
        if not isinstance(resource, (MapValue, Mapping)) and callable(
            getattr(resource, "to_dict", None)
        ):
            resource = resource.to_dict()

        value = to_value(resource, "resource")
        if not isinstance(value, MapValue):
            raise InvalidValueError("resource", resource, "resources must be maps")
        return value


def render(
    resource: Any,
    config: Optional[RendererConfig] = None,
    correlation_id: Optional[str] = None
) -> str:
    """Render a HAL resource to an XML document.

    This is the simple entry point; use :class:`XmlRenderer` directly to reuse
    one configuration across many renders.

    Args:
        resource: A :class:`MapValue`, a plain mapping, or an object exposing
            ``to_dict()``
        config: Optional renderer configuration
        correlation_id: Optional correlation ID for log tracking

    Returns:
        The document text without a trailing newline

    Examples:
        >>> render({"active": True}, RendererConfig.compact())
        '<resource><active>true</active></resource>'
    """
    return XmlRenderer(config, correlation_id).render(resource)
