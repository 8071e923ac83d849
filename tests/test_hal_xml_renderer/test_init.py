"""Test module for hal_xml_renderer package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import hal_xml_renderer

    # Assert
    assert hal_xml_renderer is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import hal_xml_renderer

    # Assert
    assert isinstance(hal_xml_renderer.__version__, str)
    assert hal_xml_renderer.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    import hal_xml_renderer

    assert hal_xml_renderer.__author__ == "HAL XML Renderer Team"


def test_package_exports_render_api() -> None:
    """Test that the top-level API is exported."""
    import hal_xml_renderer

    for name in ("render", "XmlRenderer", "RendererConfig", "MapValue", "InvalidValueError"):
        assert name in hal_xml_renderer.__all__
        assert hasattr(hal_xml_renderer, name)


def test_top_level_render() -> None:
    """Test rendering through the package root."""
    from hal_xml_renderer import render

    output = render({"name": "Alice"})

    assert output.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<name>Alice</name>" in output
