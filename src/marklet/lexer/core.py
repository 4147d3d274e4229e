"""Line-oriented lexer.

Walks an index cursor over the (immutable) source: find the current line,
classify it, emit tokens, then commit the cursor past the consumed lines.
Every branch commits at least one character, so scanning always terminates.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from marklet.config import get_compile_config
from marklet.lexer.classifiers import BlockClassifierMixin
from marklet.lexer.inline import InlineScannerMixin
from marklet.tokens import (
    BlockQuoteToken,
    CodeBlockToken,
    HeaderToken,
    HrToken,
    ListItemToken,
    NewlineToken,
    Token,
    TokenType,
)
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(BlockClassifierMixin, InlineScannerMixin):
    """Tokenizer for the marklet dialect.

    Block forms are tried in priority order on each line: ATX header, fenced
    code, block quote, horizontal rule, list item, setext header, blank line,
    paragraph line.

    Usage:
        >>> Lexer("# Hi").tokenize()
        [HeaderToken(size=1), TextToken(content='Hi', bold=False, italic=False),
         NewlineToken(), HrToken(), NewlineToken()]

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_source_file",
        "_tokens",
        "_trace",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Leading and trailing whitespace of the whole document is dropped.

        Args:
            source: Markdown source text
            source_file: Optional source file path for error messages
        """
        stripped = source.lstrip()
        self._lineno = source.count("\n", 0, len(source) - len(stripped)) + 1
        self._source = stripped.rstrip()
        self._source_len = len(self._source)
        self._pos = 0
        self._source_file = source_file
        self._tokens: list[Token] = []
        self._trace = get_compile_config().trace

    def tokenize(self) -> list[Token]:
        """Tokenize the source.

        Returns:
            Token list, always terminated by a NEWLINE token unless empty.

        Raises:
            TokenizeError: A list marker line contains an unrecognized character.
        """
        while self._pos < self._source_len:
            self._scan_block()

        if self._tokens and self._tokens[-1].type != TokenType.NEWLINE:
            self._emit(NewlineToken(lineno=self._lineno))

        logger.debug("Tokenized %d chars into %d tokens", self._source_len, len(self._tokens))
        return self._tokens

    # =========================================================================
    # Block dispatch
    # =========================================================================

    def _scan_block(self) -> None:
        """Classify the line at the cursor and emit its tokens."""
        line_end = self._find_line_end(self._pos)
        line = self._source[self._pos : line_end]
        lineno = self._lineno

        header = self._try_classify_atx_header(line)
        if header is not None:
            size, content = header
            self._emit(HeaderToken(size, lineno=lineno))
            self._scan_inline(content + "\n")
            self._emit_header_terminator()
            self._commit_to(line_end)
            return

        lang = self._try_classify_fence_start(line)
        if lang is not None:
            self._commit_to(line_end)
            self._scan_code_fence(lang, lineno)
            return

        quote = self._try_classify_block_quote(line)
        if quote is not None:
            depth, content = quote
            self._emit(BlockQuoteToken(depth, lineno=lineno))
            self._scan_inline(content + "\n")
            self._commit_to(line_end)
            return

        if self._is_horizontal_rule(line):
            self._emit(HrToken(lineno=lineno))
            self._emit(NewlineToken(lineno=lineno))
            self._commit_to(line_end)
            return

        marker = self._try_classify_list_marker(line)
        if marker is not None:
            indent, ordered, digit, content = marker
            self._emit(ListItemToken(indent, ordered, digit, lineno=lineno))
            self._scan_inline(content + "\n")
            self._commit_to(line_end)
            return

        if line and line_end < self._source_len:
            underline_end = self._find_line_end(line_end + 1)
            size = self._try_classify_setext_underline(
                self._source[line_end + 1 : underline_end]
            )
            if size is not None:
                self._emit(HeaderToken(size, lineno=lineno))
                self._scan_inline(line + "\n")
                self._emit_header_terminator()
                self._commit_to(underline_end)
                return

        if not line:
            self._emit(NewlineToken(lineno=lineno))
            self._commit_to(line_end)
            return

        self._scan_inline(line + "\n")
        self._commit_to(line_end)

    def _scan_code_fence(self, lang: str, lineno: int) -> None:
        """Capture code verbatim up to the closing fence line.

        The cursor sits just after the opening fence line. An unterminated
        fence runs to the end of the source.
        """
        code_start = self._pos
        while self._pos < self._source_len:
            line_end = self._find_line_end(self._pos)
            if self._is_closing_fence(self._source[self._pos : line_end]):
                code = self._source[code_start : self._pos]
                self._commit_to(line_end)
                break
            self._commit_to(line_end)
        else:
            code = self._source[code_start:]

        self._emit(CodeBlockToken(lang, code, lineno=lineno))
        self._emit(NewlineToken(lineno=lineno))

    def _emit_header_terminator(self) -> None:
        # Header lines end with HR + NEWLINE; the parser consumes the pair
        self._emit(HrToken(lineno=self._lineno))
        self._emit(NewlineToken(lineno=self._lineno))

    def _emit(self, token: Token) -> None:
        if self._trace:
            logger.debug("token %s", token)
        self._tokens.append(token)

    # =========================================================================
    # Window navigation helpers
    # =========================================================================

    def _find_line_end(self, start: int) -> int:
        """Find the position of the next line feed at or after ``start``, or EOF."""
        idx = self._source.find("\n", start)
        return idx if idx != -1 else self._source_len

    def _commit_to(self, line_end: int) -> None:
        """Move the cursor to ``line_end``, consuming the line feed there if any."""
        self._lineno += self._source.count("\n", self._pos, line_end)
        self._pos = line_end
        if self._pos < self._source_len and self._source[self._pos] == "\n":
            self._pos += 1
            self._lineno += 1
