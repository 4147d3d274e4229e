"""Typed AST nodes for marklet.

All AST nodes are frozen dataclasses with slots for:
- Immutability: the parser builds each node once, the renderer only reads it
- Pattern matching: match statements dispatch on node class
- Memory efficiency: __slots__ keeps the tree small

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Root
│   ├── Header
│   ├── Paragraph
│   ├── CodeBlock
│   ├── BlockQuote
│   ├── List
│   ├── ListItem
│   └── Hr
└── Inline (inline elements)
    ├── Text
    ├── Code
    ├── Link
    └── Image

Children are tuples: every node owns its children exactly once and the tree
has no shared or cyclic references.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A run of text.

    Markdown: plain, *italic*, **bold** or ***both***
    HTML: text, <i>text</i>, <b>text</b>, <b><i>text</i></b>

    """

    text: str
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code.

    Markdown: `code` or `code`lang
    HTML: <code class='lang'>code</code>

    """

    lang: str
    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](href)
    HTML: <a href='href'>text</a>

    """

    text: str
    href: str


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](src)
    HTML: <img alt='alt' src='src'/>

    """

    alt: str
    src: str


# PEP 695 type alias for inline elements
Inline: TypeAlias = Text | Code | Link | Image


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Header(Node):
    """ATX or setext header.

    Markdown: # Title or Title\\n=====
    HTML: <h1>Title</h1>

    """

    size: int
    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Consecutive lines are joined with a single space Text node.

    """

    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block. ``code`` is kept verbatim, including its final newline."""

    lang: str
    code: str


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Children are inline nodes (each rendered in its own <p>) or nested
    BlockQuote nodes.

    """

    children: tuple[Inline | BlockQuote, ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item: inline content, optionally followed by nested lists."""

    children: tuple[Inline | List, ...] = ()


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item or 1. item
    HTML: <ul>/<ol> with <li> children

    """

    ordered: bool = False
    children: tuple[ListItem, ...] = ()


@dataclass(frozen=True, slots=True)
class Hr(Node):
    """Horizontal rule.

    Markdown: *** or ---
    HTML: <hr>

    """


Block: TypeAlias = Header | Paragraph | CodeBlock | BlockQuote | List | ListItem | Hr


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Root document node.

    Contains all top-level blocks. A line holding only an image contributes a
    top-level Image node.

    """

    children: tuple[Block | Inline, ...] = ()
