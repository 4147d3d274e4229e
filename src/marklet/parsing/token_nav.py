"""Token navigation utilities for the marklet parser.

Provides mixin for peek/consume over the token list.
"""

from collections.abc import Iterable, Sequence

from marklet.config import get_compile_config
from marklet.errors import UnexpectedTokenError, UnparsableInlineRunError
from marklet.serialization import to_json
from marklet.tokens import Token, TokenType


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Tokens are never re-read: the cursor only moves forward.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _pos: int
        - _source_file: str | None

    """

    _tokens: Sequence[Token]
    _pos: int
    _source_file: str | None

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _lookahead(self, depth: int = 1) -> Token | None:
        """Token ``depth`` positions ahead (1 = the next token), or None."""
        pos = self._pos + depth - 1
        if pos < len(self._tokens):
            return self._tokens[pos]
        return None

    def _peek(self, token_type: TokenType, depth: int = 1) -> bool:
        token = self._lookahead(depth)
        return token is not None and token.type == token_type

    def _peek_any(self, token_types: Iterable[TokenType], depth: int = 1) -> bool:
        token = self._lookahead(depth)
        return token is not None and token.type in token_types

    def _consume(self, token_type: TokenType) -> Token:
        """Take the next token, which must be of ``token_type``.

        Raises:
            UnexpectedTokenError: The stream is exhausted or the next token
                is of another kind.
        """
        token = self._lookahead()
        if token is None:
            lineno = self._tokens[-1].lineno if self._tokens else None
            raise UnexpectedTokenError(
                token_type, None, lineno=lineno, source_file=self._source_file
            )
        if token.type != token_type:
            raise UnexpectedTokenError(
                token_type, token.type, lineno=token.lineno, source_file=self._source_file
            )
        self._pos += 1
        return token

    def _unparsable(self) -> UnparsableInlineRunError:
        """Build the error for a token no parse rule accepts.

        The message carries a JSON dump of the upcoming tokens; how many is
        set by ``CompileConfig.error_context``.
        """
        remaining = list(self._tokens[self._pos : self._pos + get_compile_config().error_context])
        token = self._lookahead()
        return UnparsableInlineRunError(
            f"Unable to parse tokens:\n{to_json(remaining, indent=2)}",
            lineno=token.lineno if token is not None else None,
            source_file=self._source_file,
        )
