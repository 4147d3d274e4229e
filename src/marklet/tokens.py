"""Token and TokenType definitions for the marklet lexer.

The lexer produces a flat list of tokens that the parser consumes front to
back. Each token kind is its own frozen dataclass carrying only the attributes
that kind needs; ``type`` is a class-level tag so the parser can dispatch on it
without isinstance chains.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class TokenType(Enum):
    """Token kinds produced by the lexer.

    Organized by category:
    - Line structure (NEWLINE, HR)
    - Block openers (headers, code blocks, quotes, list items)
    - Inline content (text runs, code spans, links, images)

    """

    # Line structure
    NEWLINE = auto()
    HR = auto()  # *** or ---, also terminates header lines

    # Block openers
    HEADER = auto()  # # Title, or Title\n====
    CODEBLOCK = auto()  # ```lang ... ```
    BLOCKQUOTE = auto()  # > or > > ...
    LIST_ITEM = auto()  # -, *, 1.

    # Inline content
    TEXT = auto()
    CODE = auto()  # `code`lang
    LINK = auto()  # [text](href)
    IMAGE = auto()  # ![alt](src)


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all tokens.

    Attributes:
        lineno: Source line the token came from (1-indexed). Only used for
            error messages and tracing, so it is excluded from equality.

    """

    type: ClassVar[TokenType]

    lineno: int = field(default=0, compare=False, repr=False, kw_only=True)


@dataclass(frozen=True, slots=True)
class NewlineToken(Token):
    """End of a line."""

    type: ClassVar[TokenType] = TokenType.NEWLINE


@dataclass(frozen=True, slots=True)
class HrToken(Token):
    """Horizontal rule, or the terminator of a header line."""

    type: ClassVar[TokenType] = TokenType.HR


@dataclass(frozen=True, slots=True)
class HeaderToken(Token):
    """Header opener; its inline content follows as separate tokens."""

    type: ClassVar[TokenType] = TokenType.HEADER

    size: int


@dataclass(frozen=True, slots=True)
class CodeBlockToken(Token):
    """Fenced code block, captured verbatim."""

    type: ClassVar[TokenType] = TokenType.CODEBLOCK

    lang: str
    code: str


@dataclass(frozen=True, slots=True)
class BlockQuoteToken(Token):
    """Block quote marker. ``indent`` is the number of ``> `` repetitions."""

    type: ClassVar[TokenType] = TokenType.BLOCKQUOTE

    indent: int


@dataclass(frozen=True, slots=True)
class ListItemToken(Token):
    """List item marker.

    Attributes:
        indent: Nesting level (two leading spaces per level)
        ordered: True for ``1.`` style markers
        digit: The marker digit for ordered items, None otherwise

    """

    type: ClassVar[TokenType] = TokenType.LIST_ITEM

    indent: int
    ordered: bool
    digit: int | None = None


@dataclass(frozen=True, slots=True)
class TextToken(Token):
    """A run of text with its emphasis flags."""

    type: ClassVar[TokenType] = TokenType.TEXT

    content: str
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class CodeToken(Token):
    """Inline code span with an optional trailing language tag."""

    type: ClassVar[TokenType] = TokenType.CODE

    lang: str
    content: str


@dataclass(frozen=True, slots=True)
class LinkToken(Token):
    type: ClassVar[TokenType] = TokenType.LINK

    text: str
    href: str


@dataclass(frozen=True, slots=True)
class ImageToken(Token):
    type: ClassVar[TokenType] = TokenType.IMAGE

    alt: str
    src: str


# Tokens that may appear inside an inline run (images are block-level here)
INLINE_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.TEXT, TokenType.CODE, TokenType.LINK}
)
