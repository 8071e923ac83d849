"""Public rendering API for HAL XML rendering."""

from .renderer import Renderer, XmlRenderer, render

__all__ = [
    "Renderer",
    "XmlRenderer",
    "render",
]
