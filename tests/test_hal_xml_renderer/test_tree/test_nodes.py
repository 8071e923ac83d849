"""Tests for the lxml-backed node factory."""

import pytest

from hal_xml_renderer.shared import InvalidNameError, InvalidValueError
from hal_xml_renderer.tree import XML_DECLARATION, LxmlNodeFactory


@pytest.fixture
def factory():
    return LxmlNodeFactory()


class TestLxmlNodeFactory:
    """Test element creation and serialization."""

    def test_create_element_with_text(self, factory):
        element = factory.create_element("name", "Alice")

        assert element.tag == "name"
        assert element.text == "Alice"

    def test_invalid_tag_name(self, factory):
        with pytest.raises(InvalidNameError) as exc_info:
            factory.create_element("first name")

        assert exc_info.value.key == "first name"

    def test_incompatible_text(self, factory):
        with pytest.raises(InvalidValueError, match="not XML compatible"):
            factory.create_element("note", "bad\x00byte")

    def test_invalid_attribute_name(self, factory):
        element = factory.create_element("link")

        with pytest.raises(InvalidNameError):
            factory.set_attribute(element, "bad name", "x")

    def test_namespaced_tag_name_rejected(self, factory):
        with pytest.raises(InvalidNameError) as exc_info:
            factory.create_element("{urn:x}name", "a")

        assert exc_info.value.key == "{urn:x}name"

    def test_namespaced_attribute_name_rejected(self, factory):
        element = factory.create_element("link")

        with pytest.raises(InvalidNameError):
            factory.set_attribute(element, "{urn:x}title", "x")

        assert dict(element.attrib) == {}

    def test_attributes_keep_declaration_order(self, factory):
        element = factory.create_element("link")
        factory.set_attribute(element, "rel", "next")
        factory.set_attribute(element, "href", "/page/2")
        factory.set_attribute(element, "title", "Next")

        assert list(element.attrib.keys()) == ["rel", "href", "title"]

    def test_serialize_with_declaration(self, factory):
        root = factory.create_element("resource")
        factory.append_child(root, factory.create_element("name", "Alice"))

        output = factory.serialize(root)

        assert output.startswith(XML_DECLARATION + "\n")
        assert "<resource>\n  <name>Alice</name>\n</resource>" in output

    def test_serialize_compact(self, factory):
        root = factory.create_element("resource")
        factory.append_child(root, factory.create_element("name", "Alice"))

        output = factory.serialize(root, pretty_print=False, xml_declaration=False)

        assert output == "<resource><name>Alice</name></resource>"

    def test_empty_text_is_not_self_closing(self, factory):
        root = factory.create_element("deleted", "")

        output = factory.serialize(root, pretty_print=False, xml_declaration=False)

        assert output == "<deleted></deleted>"
