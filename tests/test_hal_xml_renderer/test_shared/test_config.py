"""Tests for renderer configuration."""

import json

import pytest

from hal_xml_renderer.shared.config import (
    ConfigError,
    ConfigValidationError,
    RendererConfig,
)


class TestRendererConfig:
    """Test suite for RendererConfig."""

    def test_default_configuration(self):
        """Test default configuration values."""
        config = RendererConfig()

        assert config.pretty_print is True
        assert config.xml_declaration is True
        assert config.max_depth == 128
        assert config.root_relation == "self"
        assert config.name is None
        assert config.description is None

    def test_configuration_is_immutable(self):
        """Test that configuration cannot be modified in place."""
        config = RendererConfig()

        with pytest.raises(AttributeError):
            config.max_depth = 10

    def test_max_depth_validation(self):
        """Test max_depth validation failures."""
        with pytest.raises(ConfigValidationError, match="max_depth must be > 0"):
            RendererConfig(max_depth=0)

        with pytest.raises(ConfigValidationError, match="max_depth must be > 0"):
            RendererConfig(max_depth=-5)

    def test_validation_error_details(self):
        """Test that validation errors carry field information."""
        with pytest.raises(ConfigValidationError) as exc_info:
            RendererConfig(max_depth=0)

        assert exc_info.value.field_name == "max_depth"
        assert exc_info.value.suggestions
        assert isinstance(exc_info.value, ConfigError)

    def test_root_relation_validation(self):
        """Test that an empty root relation is rejected."""
        with pytest.raises(ConfigValidationError, match="root_relation cannot be empty"):
            RendererConfig(root_relation="")


class TestConfigOverride:
    """Test configuration overrides."""

    def test_override_creates_new_instance(self):
        """Test that override leaves the original untouched."""
        config = RendererConfig()
        compact = config.override(pretty_print=False)

        assert compact.pretty_print is False
        assert config.pretty_print is True
        assert compact is not config

    def test_override_validates(self):
        """Test that overrides are validated."""
        with pytest.raises(ConfigValidationError):
            RendererConfig().override(max_depth=0)

    def test_override_unknown_field(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ConfigValidationError, match="Unknown configuration fields"):
            RendererConfig().override(indent=4)


class TestConfigSerialization:
    """Test dictionary and JSON conversion."""

    def test_to_dict(self):
        """Test conversion to dictionary."""
        data = RendererConfig(max_depth=10).to_dict()

        assert data["max_depth"] == 10
        assert data["pretty_print"] is True
        assert data["root_relation"] == "self"

    def test_json_round_trip(self):
        """Test configuration survives JSON serialization."""
        config = RendererConfig.compact()
        restored = RendererConfig.from_json(config.to_json())

        assert restored == config

    def test_from_dict_ignores_unknown_keys(self):
        """Test that unknown keys in stored configuration are ignored."""
        config = RendererConfig.from_dict({"max_depth": 5, "colour": "blue"})

        assert config.max_depth == 5

    def test_from_json_requires_object(self):
        """Test that non-object JSON is rejected."""
        with pytest.raises(ConfigValidationError, match="must be an object"):
            RendererConfig.from_json(json.dumps([1, 2]))


class TestConfigPresets:
    """Test preset factory methods."""

    def test_default_preset(self):
        config = RendererConfig.default()
        assert config.name == "default"
        assert config.pretty_print is True

    def test_compact_preset(self):
        config = RendererConfig.compact()
        assert config.pretty_print is False
        assert config.xml_declaration is False
        assert config.name == "compact"

    def test_strict_preset(self):
        config = RendererConfig.strict()
        assert config.max_depth == 32
        assert config.max_depth < RendererConfig().max_depth
