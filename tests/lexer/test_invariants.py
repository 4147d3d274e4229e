"""Property-based tests for pipeline invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from marklet import compile
from marklet.errors import MarkletError
from marklet.lexer import Lexer
from marklet.tokens import TokenType

# Markdown-significant characters plus some plain text; no tabs, so list
# markers can never trip the tokenize error.
MARKDOWN_ALPHABET = "#>*-_`[]()!=.1 \nab"


class TestLexerInvariants:
    """Test invariants of the token stream."""

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_newline_terminated(self, source: str) -> None:
        """Every non-empty token stream ends with a NEWLINE token."""
        tokens = Lexer(source).tokenize()
        if tokens:
            assert tokens[-1].type == TokenType.NEWLINE

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_line_numbers_increase(self, source: str) -> None:
        linenos = [token.lineno for token in Lexer(source).tokenize()]
        assert linenos == sorted(linenos)
        assert all(lineno >= 1 for lineno in linenos)

    @given(st.text(alphabet=" \t\n\r", max_size=50))
    @settings(max_examples=50)
    def test_whitespace_only_yields_no_tokens(self, source: str) -> None:
        assert Lexer(source).tokenize() == []


class TestCompileInvariants:
    """Test invariants of the whole pipeline."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_only_marklet_errors_escape(self, source: str) -> None:
        """Arbitrary input either compiles or raises a MarkletError subclass."""
        try:
            compile(source)
        except MarkletError:
            pass

    @given(st.text(alphabet=MARKDOWN_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        try:
            first = compile(source)
        except MarkletError:
            return
        assert compile(source) == first

    @given(st.text(alphabet=" \t\n", max_size=50))
    @settings(max_examples=50)
    def test_blank_documents_render_empty(self, source: str) -> None:
        assert compile(source) == ""
