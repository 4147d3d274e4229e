"""
marklet: a small Markdown-dialect to HTML compiler.

A three-stage pipeline: the Lexer turns text into a flat token list, the
Parser builds a typed AST from it, and the HtmlRenderer emits an HTML
fragment. Zero runtime dependencies, no I/O, no state across calls.

Quick Start:
    >>> from marklet import compile
    >>> compile("# Hello **World**")
    '<h1>Hello <b>World</b></h1>'

    >>> # Or run the stages one at a time
    >>> from marklet import parse, render, tokenize
    >>> root = parse(tokenize("- a\\n  - b"))
    >>> render(root)
    '<ul><li>a<ul><li>b</li></ul></li></ul>'

Output is trusted as-is: nothing in the document is escaped.
"""

from collections.abc import Sequence

from marklet.config import (
    CompileConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from marklet.errors import (
    CompileError,
    MarkletError,
    RenderError,
    TokenizeError,
    UnexpectedTokenError,
    UnknownNodeError,
    UnparsableInlineRunError,
)
from marklet.lexer import Lexer
from marklet.nodes import (
    Block,
    BlockQuote,
    Code,
    CodeBlock,
    Header,
    Hr,
    Image,
    Inline,
    Link,
    List,
    ListItem,
    Paragraph,
    Root,
    Text,
)
from marklet.parser import Parser
from marklet.renderers.html import HtmlRenderer
from marklet.serialization import from_dict, from_json, to_dict, to_json
from marklet.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(markdown: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize Markdown source into a flat token list.

    Args:
        markdown: Markdown source text
        source_file: Optional source file path for error messages

    Raises:
        TokenizeError: A list marker line contains an unrecognized character.
    """
    return Lexer(markdown, source_file).tokenize()


def parse(tokens: Sequence[Token], *, source_file: str | None = None) -> Root:
    """Build the AST from a token sequence.

    Raises:
        UnexpectedTokenError: The token sequence is malformed.
        UnparsableInlineRunError: No parse rule accepts a token.
    """
    return Parser(tokens, source_file).parse()


def render(root: Root) -> str:
    """Render an AST to HTML.

    Raises:
        UnknownNodeError: A node kind has no HTML template.
    """
    return HtmlRenderer().render(root)


def compile(markdown: str, *, source_file: str | None = None) -> str:
    """Compile Markdown source into an HTML fragment.

    Either the whole document converts or an error is raised; there is no
    partial output.

    Args:
        markdown: Markdown source text
        source_file: Optional source file path for error messages

    Returns:
        HTML string

    Raises:
        MarkletError: Any tokenize, parse or render failure.

    Example:
        >>> compile("[t](h)")
        "<p><a href='h'>t</a></p>"
    """
    tokens = tokenize(markdown, source_file=source_file)
    root = parse(tokens, source_file=source_file)
    return render(root)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "compile",
    "tokenize",
    "parse",
    "render",
    # Block nodes
    "Block",
    "BlockQuote",
    "CodeBlock",
    "Header",
    "Hr",
    "List",
    "ListItem",
    "Paragraph",
    "Root",
    # Inline nodes
    "Inline",
    "Code",
    "Image",
    "Link",
    "Text",
    # Pipeline components
    "Lexer",
    "Parser",
    "HtmlRenderer",
    # Tokens
    "Token",
    "TokenType",
    # Errors
    "MarkletError",
    "CompileError",
    "TokenizeError",
    "UnexpectedTokenError",
    "UnparsableInlineRunError",
    "RenderError",
    "UnknownNodeError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "CompileConfig",
    "get_compile_config",
    "set_compile_config",
    "reset_compile_config",
    "compile_config_context",
]
