"""Renderers for marklet ASTs."""

from marklet.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
