"""Node factories used by the tree builders to create XML elements.

The builders never touch the XML library directly; they receive a
:class:`NodeFactory` and call its create/set/append/serialize operations.
Each render uses its own factory instance.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from lxml import etree

from hal_xml_renderer.shared.errors import InvalidNameError, InvalidValueError

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# lxml reads "{uri}local" as a namespaced name
CLARK_PREFIX = "{"


class NodeFactory(ABC):
    """Abstract element-building capability."""

    @abstractmethod
    def create_element(self, name: str, text: Optional[str] = None) -> Any:
        """Create a detached element, optionally with text content."""

    @abstractmethod
    def set_attribute(self, node: Any, name: str, value: str) -> None:
        """Set an attribute, keeping declaration order."""

    @abstractmethod
    def append_child(self, parent: Any, child: Any) -> None:
        """Append ``child`` as the last child of ``parent``."""

    @abstractmethod
    def serialize(
        self,
        root: Any,
        pretty_print: bool = True,
        xml_declaration: bool = True
    ) -> str:
        """Serialize the tree under ``root`` to text."""


class LxmlNodeFactory(NodeFactory):
    """Node factory backed by ``lxml.etree``."""

    @staticmethod
    def _check_name(name: str) -> None:
        if name.startswith(CLARK_PREFIX):
            raise InvalidNameError(name)

    def create_element(self, name: str, text: Optional[str] = None) -> etree._Element:
        self._check_name(name)
        try:
            element = etree.Element(name)
        except ValueError as e:
            raise InvalidNameError(name) from e

        if text is not None:
            try:
                element.text = text
            except ValueError as e:
                raise InvalidValueError(name, text, "not XML compatible") from e
        return element

    def set_attribute(self, node: etree._Element, name: str, value: str) -> None:
        self._check_name(name)
        try:
            node.set(name, value)
        except ValueError as e:
            # lxml reports bad names and bad values with the same exception type
            if "attribute name" in str(e).lower():
                raise InvalidNameError(name) from e
            raise InvalidValueError(name, value, "not XML compatible") from e

    def append_child(self, parent: etree._Element, child: etree._Element) -> None:
        parent.append(child)

    def serialize(
        self,
        root: etree._Element,
        pretty_print: bool = True,
        xml_declaration: bool = True
    ) -> str:
        """Serialize to text.

        The declaration is written by hand so that it uses double quotes and
        an upper-case encoding name regardless of the lxml version.
        """
        body = etree.tostring(root, encoding="unicode", pretty_print=pretty_print)
        if not xml_declaration:
            return body
        return f"{XML_DECLARATION}\n{body}"
