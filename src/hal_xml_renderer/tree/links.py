"""Link rendering and self-link collapsing for HAL resources."""

from typing import Any, List, Optional, Tuple

from hal_xml_renderer.model import ListValue, MapValue, Scalar, normalize
from hal_xml_renderer.shared import InvalidValueError, get_logger
from hal_xml_renderer.tree.nodes import NodeFactory

LINK_TAG = "link"
SELF_RELATION = "self"
HREF_ATTRIBUTE = "href"
REL_ATTRIBUTE = "rel"

Attributes = List[Tuple[str, str]]


def attribute_text(name: str, value: Any) -> str:
    """Normalize a link attribute value, which must be a Scalar."""
    if not isinstance(value, Scalar):
        raise InvalidValueError(name, value, "link attributes must be scalars")
    return normalize(value)


class LinkNodeBuilder:
    """Renders one relation and link pair into a ``link`` element."""

    def __init__(self, factory: NodeFactory) -> None:
        self.factory = factory

    def build(self, relation: str, link: Any) -> Any:
        """Build a ``link`` element.

        ``rel`` is always the first attribute, followed by the link's own
        attributes in declared order.

        Args:
            relation: Relation name the link is listed under
            link: Map of attribute name to Scalar

        Returns:
            The new element

        Raises:
            InvalidValueError: If ``link`` is not a Map or holds a
                non-scalar attribute
        """
        if not isinstance(link, MapValue):
            raise InvalidValueError(relation, link, "links must be maps")

        node = self.factory.create_element(LINK_TAG)
        self.factory.set_attribute(node, REL_ATTRIBUTE, relation)
        for name, value in link.items():
            self.factory.set_attribute(node, name, attribute_text(name, value))
        return node


class SelfLinkInjector:
    """Collapses a single unambiguous ``self`` link into resource attributes.

    A resource whose ``_links`` hold exactly one ``self`` link with an
    ``href`` is rendered with ``rel``, ``href`` and the link's remaining
    attributes on its own element instead of a nested ``link`` element.
    Zero or several self links, or a self link without ``href``, are left
    for ordinary link rendering so nothing is dropped.
    """

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        self.logger = get_logger(__name__, correlation_id, "self_link")

    def inject(
        self, relation: str, links: MapValue
    ) -> Tuple[MapValue, Optional[Attributes]]:
        """Attempt to collapse the ``self`` link.

        Args:
            relation: Relation the owning resource is rendered under; used
                as the ``rel`` attribute in place of ``self``
            links: The resource's ``_links`` section

        Returns:
            Tuple of the links left for ordinary rendering and the inline
            attributes, or ``None`` when no collapsing happened
        """
        self_link = links.get(SELF_RELATION)
        if self_link is None:
            return links, None

        if isinstance(self_link, ListValue):
            if len(self_link) != 1:
                return links, None
            self_link = self_link[0]

        if not isinstance(self_link, MapValue):
            return links, None

        href = self_link.get(HREF_ATTRIBUTE)
        if href is None or (isinstance(href, Scalar) and href.value is None):
            self.logger.debug(
                "Self link has no href, rendering as link element",
                extra={"relation": relation}
            )
            return links, None

        attributes: Attributes = [
            (REL_ATTRIBUTE, relation),
            (HREF_ATTRIBUTE, attribute_text(HREF_ATTRIBUTE, href)),
        ]
        for name, value in self_link.items_except(HREF_ATTRIBUTE):
            attributes.append((name, attribute_text(name, value)))

        return links.without(SELF_RELATION), attributes
