"""Inline run parsing for the marklet parser."""

from marklet.nodes import Code, Inline, Link, Text
from marklet.tokens import (
    INLINE_TOKEN_TYPES,
    CodeToken,
    LinkToken,
    TextToken,
    TokenType,
)


class InlineParsingMixin:
    """Turns a run of TEXT/CODE/LINK tokens into inline nodes.

    Required Host Methods:
        - _lookahead(depth) -> Token | None
        - _peek(token_type, depth) -> bool
        - _peek_any(token_types, depth) -> bool
        - _consume(token_type) -> Token
        - _unparsable() -> UnparsableInlineRunError

    """

    def _parse_inline(self) -> tuple[Inline, ...]:
        """Parse an inline run and consume the NEWLINE that ends it.

        A NEWLINE followed by another inline token is a soft line break: it
        becomes a single space Text node and the run continues.
        """
        nodes: list[Inline] = []

        while self._peek_any(INLINE_TOKEN_TYPES) or (
            self._peek(TokenType.NEWLINE) and self._peek_any(INLINE_TOKEN_TYPES, depth=2)
        ):
            if self._peek(TokenType.NEWLINE):
                self._consume(TokenType.NEWLINE)
                nodes.append(Text(" "))

            token = self._lookahead()
            match token:
                case TextToken():
                    self._consume(TokenType.TEXT)
                    nodes.append(Text(token.content, token.bold, token.italic))
                case CodeToken():
                    self._consume(TokenType.CODE)
                    nodes.append(Code(token.lang, token.content))
                case LinkToken():
                    self._consume(TokenType.LINK)
                    nodes.append(Link(token.text, token.href))
                case _:
                    raise self._unparsable()

        self._consume(TokenType.NEWLINE)
        return tuple(nodes)
