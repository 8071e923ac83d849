"""Configuration for HAL XML rendering.

Provides an immutable configuration object controlling serialization layout,
the depth limit and the root relation, with JSON round-tripping and presets.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class RendererConfig:
    """Configuration for rendering resources to XML.

    Thread-safe due to frozen dataclass implementation; a single instance can
    be shared by any number of renderers.
    """

    # Serialization settings
    pretty_print: bool = True
    xml_declaration: bool = True

    # Tree building settings
    max_depth: int = 128
    root_relation: str = "self"

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate renderer configuration."""
        if not isinstance(self.max_depth, int) or self.max_depth <= 0:
            raise ConfigValidationError(
                "max_depth must be > 0",
                field_name="max_depth",
                suggestions=["Use the default of 128 for ordinary resources"],
            )
        if not self.root_relation:
            raise ConfigValidationError(
                "root_relation cannot be empty", field_name="root_relation"
            )

    def override(self, **kwargs: Any) -> "RendererConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = RendererConfig()
            >>> config.override(pretty_print=False).pretty_print
            False
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {unknown}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RendererConfig":
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_json(cls, json_str: str) -> "RendererConfig":
        """Create configuration from JSON string."""
        data = json.loads(json_str)
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def default(cls) -> "RendererConfig":
        """Human-readable output with an XML declaration."""
        return cls(name="default")

    @classmethod
    def compact(cls) -> "RendererConfig":
        """Single-line output without an XML declaration, for embedding."""
        return cls(
            pretty_print=False,
            xml_declaration=False,
            name="compact",
            description="Unindented fragment output",
        )

    @classmethod
    def strict(cls) -> "RendererConfig":
        """Shallow nesting limit for untrusted resource graphs."""
        return cls(
            max_depth=32,
            name="strict",
            description="Rejects deeply nested resources early",
        )
