"""Exception classes for marklet.

Every error is fatal: it propagates straight out of ``compile()`` and no
partial HTML is produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marklet.nodes import Node
    from marklet.tokens import TokenType


class MarkletError(Exception):
    """Base exception for all marklet errors.

    Subclass this for specific error categories.
    """

    pass


class CompileError(MarkletError):
    """Error while turning source text into an AST.

    Raised by the lexer and parser when the input cannot be handled.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize compile error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source_file: Path or label of the source document (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class TokenizeError(CompileError):
    """An unrecognized character was found while scanning a list marker."""


class UnexpectedTokenError(CompileError):
    """The parser expected one token kind and found another (or none).

    Attributes:
        expected: The token kind the parser tried to consume
        found: The kind actually present, or None if the stream was exhausted
    """

    def __init__(
        self,
        expected: TokenType,
        found: TokenType | None,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.expected = expected
        self.found = found
        if found is None:
            message = f"Expected to find token type {expected.name} but did not find a token"
        else:
            message = f"Expected to find token type {expected.name} but found {found.name}"
        super().__init__(message, lineno=lineno, source_file=source_file)


class UnparsableInlineRunError(CompileError):
    """No parse rule matched the next token."""


class RenderError(MarkletError):
    """Error during HTML rendering.

    Raised when the renderer encounters an invalid AST node.
    """

    pass


class UnknownNodeError(RenderError):
    """The renderer has no template for a node kind."""

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Invalid node: {node!r}")


__all__ = [
    "CompileError",
    "MarkletError",
    "RenderError",
    "TokenizeError",
    "UnexpectedTokenError",
    "UnknownNodeError",
    "UnparsableInlineRunError",
]
