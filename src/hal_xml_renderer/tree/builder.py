"""Recursive tree building for HAL resources.

This module turns a resource value into a ``resource`` element: the self link
is collapsed onto the element when possible, remaining links become ``link``
children, embedded resources are built recursively, and every other property
is rendered by a generic element-tree rule.
"""

from typing import Any, Iterable, List, Optional, Tuple

from hal_xml_renderer.model import (
    EMBEDDED_KEY,
    EMPTY_MAP,
    LINKS_KEY,
    RESERVED_KEYS,
    ListValue,
    MapValue,
    Scalar,
    normalize,
)
from hal_xml_renderer.shared import (
    InvalidValueError,
    RendererConfig,
    ResourceDepthError,
    get_logger,
)
from hal_xml_renderer.tree.links import LinkNodeBuilder, SelfLinkInjector
from hal_xml_renderer.tree.nodes import NodeFactory

RESOURCE_TAG = "resource"
ROOT_RELATION = "self"


class ResourceTreeBuilder:
    """Builds ``resource`` elements from resource values.

    The builder holds no per-resource state; all nodes are created through
    the injected :class:`NodeFactory`, so one builder renders one document.
    """

    def __init__(
        self,
        factory: NodeFactory,
        config: Optional[RendererConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the tree builder.

        Args:
            factory: Node factory used to create every element
            config: Renderer configuration (defaults apply if omitted)
            correlation_id: Optional correlation ID for log tracking
        """
        self.factory = factory
        self.config = config or RendererConfig()
        self.logger = get_logger(__name__, correlation_id, "tree_builder")
        self.link_builder = LinkNodeBuilder(factory)
        self.self_link_injector = SelfLinkInjector(correlation_id)

    def build(self, resource: Any, relation: str = ROOT_RELATION, depth: int = 0) -> Any:
        """Build the element for one resource and everything beneath it.

        Args:
            resource: Resource map with optional ``_links``/``_embedded``
            relation: Relation this resource is rendered under
            depth: Current nesting depth

        Returns:
            The ``resource`` element

        Raises:
            InvalidValueError: If any value in the resource is malformed
            ResourceDepthError: If nesting exceeds ``config.max_depth``
        """
        self._check_depth(depth)
        if not isinstance(resource, MapValue):
            raise InvalidValueError(relation, resource, "resources must be maps")

        self.logger.debug(
            "Building resource node",
            extra={"relation": relation, "depth": depth}
        )

        links = self._section(resource, LINKS_KEY)
        embedded = self._section(resource, EMBEDDED_KEY)

        node = self.factory.create_element(RESOURCE_TAG)

        links, inline_attributes = self.self_link_injector.inject(relation, links)
        for name, value in inline_attributes or ():
            self.factory.set_attribute(node, name, value)

        # Remaining links, including multiple or href-less self links
        for rel, link_data in links.items():
            for link in self._members(rel, link_data):
                self.factory.append_child(node, self.link_builder.build(rel, link))

        for rel, child_data in embedded.items():
            for child in self._members(rel, child_data):
                self.factory.append_child(node, self.build(child, rel, depth + 1))

        self._build_properties(node, resource.items_except(*RESERVED_KEYS), depth)
        return node

    def _section(self, resource: MapValue, key: str) -> MapValue:
        """Get a reserved section, treating an absent one as empty."""
        section = resource.get(key)
        if section is None:
            return EMPTY_MAP
        if not isinstance(section, MapValue):
            raise InvalidValueError(key, section, "reserved sections must be maps")
        return section

    def _members(self, relation: str, data: Any) -> Tuple[Any, ...]:
        """Expand a relation's value into the individual links or resources."""
        if isinstance(data, MapValue):
            return (data,)
        if isinstance(data, ListValue):
            return data.items
        raise InvalidValueError(relation, data, "relations must map to a map or a list")

    def _build_properties(
        self, node: Any, entries: Iterable[Tuple[str, Any]], depth: int
    ) -> None:
        for key, value in entries:
            for element in self._property_elements(key, value, depth + 1):
                self.factory.append_child(node, element)

    def _property_elements(self, key: str, value: Any, depth: int) -> List[Any]:
        """Render a property; lists yield one sibling element per item."""
        if not isinstance(value, ListValue):
            return [self._property_element(key, value, depth)]

        elements = []
        for item in value:
            if isinstance(item, ListValue):
                raise InvalidValueError(key, item, "lists of lists are not supported")
            elements.append(self._property_element(key, item, depth))
        return elements

    def _property_element(self, key: str, value: Any, depth: int) -> Any:
        self._check_depth(depth)

        if isinstance(value, Scalar):
            return self.factory.create_element(key, normalize(value))

        if isinstance(value, MapValue):
            element = self.factory.create_element(key)
            self._build_properties(element, value.items(), depth)
            return element

        raise InvalidValueError(
            key, value, "expected a Scalar, ListValue or MapValue"
        )

    def _check_depth(self, depth: int) -> None:
        if depth > self.config.max_depth:
            raise ResourceDepthError(depth, self.config.max_depth)
