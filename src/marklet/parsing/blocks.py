"""Top-level block dispatch and leaf block parsing.

Headers, code blocks, horizontal rules and images are direct translations of
one token plus its line terminator. Lists and block quotes are delegated to
the container mixin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marklet.nodes import CodeBlock, Header, Hr, Image, Paragraph
from marklet.tokens import CodeBlockToken, HeaderToken, ImageToken, TokenType
from marklet.utils.logger import get_logger

if TYPE_CHECKING:
    from marklet.nodes import Block, Inline

logger = get_logger(__name__)


class BlockParsingMixin:
    """Block-level parsing methods.

    Required Host Attributes:
        - _trace: bool

    Required Host Methods:
        - _lookahead(depth) -> Token | None
        - _consume(token_type) -> Token
        - _unparsable() -> UnparsableInlineRunError
        - _parse_inline() -> tuple[Inline, ...]
        - _parse_list() -> List
        - _parse_block_quote() -> BlockQuote

    """

    _trace: bool

    def _parse_block(self) -> Block | Inline | None:
        """Parse one top-level block.

        Returns:
            The block node, or None for a skipped blank line.
        """
        token = self._lookahead()
        assert token is not None

        if self._trace:
            logger.debug("block %s at line %d", token.type.name, token.lineno)

        match token.type:
            case TokenType.NEWLINE:
                self._consume(TokenType.NEWLINE)
                return None

            case TokenType.HEADER:
                return self._parse_header()

            case TokenType.CODEBLOCK:
                return self._parse_code_block()

            case TokenType.BLOCKQUOTE:
                return self._parse_block_quote()

            case TokenType.HR:
                return self._parse_hr()

            case TokenType.LIST_ITEM:
                return self._parse_list()

            case TokenType.IMAGE:
                return self._parse_image()

            case TokenType.TEXT | TokenType.CODE | TokenType.LINK:
                return Paragraph(self._parse_inline())

            case _:
                raise self._unparsable()

    def _parse_header(self) -> Header:
        token = self._consume(TokenType.HEADER)
        assert isinstance(token, HeaderToken)
        children = self._parse_inline()
        # Header lines are terminated by an HR + NEWLINE pair
        self._consume(TokenType.HR)
        self._consume(TokenType.NEWLINE)
        return Header(token.size, children)

    def _parse_code_block(self) -> CodeBlock:
        token = self._consume(TokenType.CODEBLOCK)
        assert isinstance(token, CodeBlockToken)
        self._consume(TokenType.NEWLINE)
        return CodeBlock(token.lang, token.code)

    def _parse_hr(self) -> Hr:
        self._consume(TokenType.HR)
        self._consume(TokenType.NEWLINE)
        return Hr()

    def _parse_image(self) -> Image:
        token = self._consume(TokenType.IMAGE)
        assert isinstance(token, ImageToken)
        self._consume(TokenType.NEWLINE)
        return Image(token.alt, token.src)
