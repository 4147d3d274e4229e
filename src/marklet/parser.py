"""Recursive descent parser producing a typed AST.

Consumes the token list from Lexer strictly left to right and builds frozen
dataclass nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `InlineParsingMixin`: Inline runs
- `BlockParsingMixin`: Top-level dispatch, headers, code blocks, rules, images
- `ContainerParsingMixin`: Lists and block quotes

"""

from __future__ import annotations

from collections.abc import Sequence

from marklet.config import get_compile_config
from marklet.nodes import Block, Inline, Root
from marklet.parsing import (
    BlockParsingMixin,
    ContainerParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from marklet.tokens import Token
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
    ContainerParsingMixin,
):
    """Recursive descent parser for the marklet token stream.

    Usage:
        >>> from marklet.lexer import Lexer
        >>> Parser(Lexer("# Hello").tokenize()).parse()
        Root(children=(Header(size=1, children=(Text(text='Hello', ...),)),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting AST is immutable and thread-safe.

    """

    __slots__ = ("_tokens", "_pos", "_source_file", "_trace")

    def __init__(self, tokens: Sequence[Token], source_file: str | None = None) -> None:
        """Initialize parser with a token sequence.

        The parser works on its own copy; the caller's sequence is untouched.

        Args:
            tokens: Tokens produced by Lexer.tokenize()
            source_file: Optional source file path for error messages
        """
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._pos = 0
        self._source_file = source_file
        self._trace = get_compile_config().trace

    def parse(self) -> Root:
        """Parse all tokens into a Root node.

        Raises:
            UnexpectedTokenError: A token of the wrong kind, or no token, was
                found where a specific kind was required.
            UnparsableInlineRunError: No parse rule accepts the next token.
        """
        blocks: list[Block | Inline] = []
        while not self._at_end():
            block = self._parse_block()
            if block is not None:
                blocks.append(block)

        logger.debug("Parsed %d tokens into %d blocks", len(self._tokens), len(blocks))
        return Root(tuple(blocks))
