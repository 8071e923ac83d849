#!/usr/bin/env python3
"""
Quick Start Guide for the HAL XML Renderer.

Renders a small order collection, first from plain Python data and then from
explicitly typed values, and shows how rendering errors are reported.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hal_xml_renderer import (
    InvalidValueError,
    ListValue,
    MapValue,
    RendererConfig,
    Scalar,
    XmlRenderer,
    render,
)


def plain_data_example():
    """Render a resource built from dicts and lists."""
    print("\n📄 Step 1: Rendering plain Python data")
    print("-" * 30)

    orders = {
        "currentlyProcessing": 14,
        "shippedToday": 20,
        "_links": {
            "self": {"href": "/orders"},
            "next": {"href": "/orders?page=2"},
            "find": {"href": "/orders{?id}", "templated": True},
        },
        "_embedded": {
            "order": [
                {
                    "total": 30.00,
                    "currency": "USD",
                    "status": "shipped",
                    "_links": {"self": {"href": "/orders/123"}},
                },
                {
                    "total": 20.00,
                    "currency": "USD",
                    "status": "processing",
                    "_links": {"self": {"href": "/orders/124"}},
                },
            ],
        },
    }

    print(render(orders))


def typed_values_example():
    """Render a resource built from explicitly tagged values."""
    print("\n🏷️  Step 2: Rendering typed values")
    print("-" * 30)

    resource = MapValue({
        "name": Scalar("Alice"),
        "scores": ListValue((Scalar(3), Scalar(5))),
        "ranking": MapValue({"first": Scalar("gold")}),
    })

    renderer = XmlRenderer(RendererConfig.compact())
    print(renderer.render(resource))


def error_example():
    """Show how unsupported values abort the render."""
    print("\n⚠️  Step 3: Error reporting")
    print("-" * 30)

    try:
        render({"name": "Alice", "callback": print})
    except InvalidValueError as e:
        print(f"❌ Render failed for key '{e.key}': {e}")


if __name__ == "__main__":
    print("🚀 QUICK START - HAL XML Renderer")
    print("=" * 45)
    plain_data_example()
    typed_values_example()
    error_example()
