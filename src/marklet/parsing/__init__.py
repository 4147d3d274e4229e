"""Parsing subsystem for the marklet parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream peek/consume
- `InlineParsingMixin`: Inline runs (text, code spans, links, soft breaks)
- `BlockParsingMixin`: Top-level dispatch and leaf blocks
- `ContainerParsingMixin`: Indent-tracked lists and block quotes

Example:
    >>> class Parser(
    ...     TokenNavigationMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ...     ContainerParsingMixin,
    ... ):
    ...     pass

"""

from marklet.parsing.blocks import BlockParsingMixin
from marklet.parsing.containers import ContainerParsingMixin
from marklet.parsing.inline import InlineParsingMixin
from marklet.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "BlockParsingMixin",
    "ContainerParsingMixin",
    "InlineParsingMixin",
    "TokenNavigationMixin",
]
