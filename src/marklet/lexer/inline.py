"""Inline scanner mixin.

Scans a single line left to right. At each position the first matching rule
wins; characters that match no rule accumulate into a plain text run, which is
flushed as one TEXT token before any other token and at the end of the line.
"""

import re

from marklet.tokens import (
    CodeToken,
    ImageToken,
    LinkToken,
    NewlineToken,
    TextToken,
    Token,
)

# (pattern, bold, italic), tried in order at * and _
# Bodies may not contain their own delimiter character.
_EMPHASIS_RULES: tuple[tuple[re.Pattern[str], bool, bool], ...] = (
    (re.compile(r"\*{3}([^*\n]+?)\*{3}|_{3}([^_\n]+?)_{3}"), True, True),
    (re.compile(r"\*{2}([^*\n]+?)\*{2}|_{2}([^_\n]+?)_{2}"), True, False),
    (re.compile(r"\*([^*\n]+?)\*|_([^_\n]+?)_"), False, True),
)

_IMAGE = re.compile(r"!\[([^\]\n]+)\]\(([^)\n]*)\)")
_LINK = re.compile(r"\[([^\]\n]+)\]\(([^)\n]*)\)")
_CODE = re.compile(r"`([^`\n]+)`([a-z]*)")

EMPHASIS_DELIMITERS: frozenset[str] = frozenset("*_")


class InlineScannerMixin:
    """Mixin providing inline tokenization.

    Required Host Attributes:
        - _lineno: int

    Required Host Methods:
        - _emit(token) -> None

    """

    _lineno: int

    def _emit(self, token: Token) -> None:
        """Append a token to the stream. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_inline(self, text: str) -> None:
        """Tokenize ``text`` as inline content.

        A line feed flushes the pending run and emits a NEWLINE token; callers
        pass the line with its terminating line feed.
        """
        plain_start = 0
        pos = 0
        text_len = len(text)
        while pos < text_len:
            matched = self._match_inline(text, pos)
            if matched is None:
                pos += 1
                continue
            token, end = matched
            self._flush_text(text[plain_start:pos])
            self._emit(token)
            pos = plain_start = end
        self._flush_text(text[plain_start:])

    def _match_inline(self, text: str, pos: int) -> tuple[Token, int] | None:
        """Match an inline rule at ``pos``.

        Returns:
            (token, end position) or None if the character is plain text.
        """
        char = text[pos]
        lineno = self._lineno

        if char in EMPHASIS_DELIMITERS:
            for pattern, bold, italic in _EMPHASIS_RULES:
                m = pattern.match(text, pos)
                if m:
                    content = m[1] if m[1] is not None else m[2]
                    return TextToken(content, bold, italic, lineno=lineno), m.end()
            return None

        if char == "!":
            m = _IMAGE.match(text, pos)
            if m:
                return ImageToken(m[1], m[2], lineno=lineno), m.end()
            return None

        if char == "[":
            m = _LINK.match(text, pos)
            if m:
                return LinkToken(m[1], m[2], lineno=lineno), m.end()
            return None

        if char == "`":
            m = _CODE.match(text, pos)
            if m:
                return CodeToken(lang=m[2], content=m[1], lineno=lineno), m.end()
            return None

        if char == "\n":
            return NewlineToken(lineno=lineno), pos + 1

        return None

    def _flush_text(self, content: str) -> None:
        if content:
            self._emit(TextToken(content, lineno=self._lineno))
