"""Indent-tracked container parsing: lists and block quotes.

Both constructs keep a local map from nesting level to the container open at
that level. The map lives only as long as the construct's token run and is
passed explicitly between steps. Containers are assembled in small mutable
builders and frozen into AST nodes once the run ends.

The two constructs resolve levels differently:
- Lists clamp each item to at most one level deeper than the previous item.
- Block quotes accept any depth and attach a new quote to the quote one level
  shallower, or to the outermost quote when that level was never opened.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from marklet.nodes import BlockQuote, List, ListItem
from marklet.tokens import BlockQuoteToken, ListItemToken, TokenType

if TYPE_CHECKING:
    from marklet.nodes import Inline


@dataclass(slots=True)
class _OpenList:
    """A list still receiving items. Each item is a list of inline nodes and nested lists."""

    ordered: bool
    items: list[list[Inline | _OpenList]] = field(default_factory=list)

    def freeze(self) -> List:
        return List(
            ordered=self.ordered,
            children=tuple(
                ListItem(
                    tuple(
                        child.freeze() if isinstance(child, _OpenList) else child
                        for child in item
                    )
                )
                for item in self.items
            ),
        )


@dataclass(slots=True)
class _OpenQuote:
    children: list[Inline | _OpenQuote] = field(default_factory=list)

    def freeze(self) -> BlockQuote:
        return BlockQuote(
            tuple(
                child.freeze() if isinstance(child, _OpenQuote) else child
                for child in self.children
            )
        )


class ContainerParsingMixin:
    """List and block quote parsing.

    Required Host Methods:
        - _peek(token_type, depth) -> bool
        - _consume(token_type) -> Token
        - _parse_inline() -> tuple[Inline, ...]

    """

    # =========================================================================
    # Lists
    # =========================================================================

    def _parse_list(self) -> List:
        """Parse consecutive LIST_ITEM tokens into a (possibly nested) list.

        Returns:
            The list open at indent 0.
        """
        open_lists: dict[int, _OpenList] = {}
        # The first item always opens the outermost list
        last_indent = -1
        while self._peek(TokenType.LIST_ITEM):
            last_indent = self._parse_list_item(open_lists, last_indent)
        return open_lists[0].freeze()

    def _parse_list_item(self, open_lists: dict[int, _OpenList], last_indent: int) -> int:
        """Place one list item and return its effective indent.

        The effective indent is clamped to one level deeper than the previous
        item. A list opened at a nonzero level hangs off the last item of the
        list one level up.
        """
        token = self._consume(TokenType.LIST_ITEM)
        assert isinstance(token, ListItemToken)
        indent = min(last_indent + 1, token.indent)

        current = open_lists.get(indent)
        if current is None:
            current = _OpenList(ordered=token.ordered)
            open_lists[indent] = current
            if indent != 0:
                open_lists[indent - 1].items[-1].append(current)

        current.items.append(list(self._parse_inline()))
        return indent

    # =========================================================================
    # Block quotes
    # =========================================================================

    def _parse_block_quote(self) -> BlockQuote:
        """Parse consecutive BLOCKQUOTE tokens into nested quotes.

        The first token's depth seeds the outermost quote. Content at an
        already open depth is appended to that quote as further children.

        Returns:
            The outermost quote.
        """
        token = self._consume(TokenType.BLOCKQUOTE)
        assert isinstance(token, BlockQuoteToken)
        root = _OpenQuote(list(self._parse_inline()))
        open_quotes: dict[int, _OpenQuote] = {token.indent: root}

        while self._peek(TokenType.BLOCKQUOTE):
            self._parse_quote_line(open_quotes, root)

        return root.freeze()

    def _parse_quote_line(self, open_quotes: dict[int, _OpenQuote], root: _OpenQuote) -> None:
        token = self._consume(TokenType.BLOCKQUOTE)
        assert isinstance(token, BlockQuoteToken)
        depth = token.indent

        quote = open_quotes.get(depth)
        if quote is not None:
            quote.children.extend(self._parse_inline())
            return

        quote = _OpenQuote(list(self._parse_inline()))
        open_quotes[depth] = quote
        open_quotes.get(depth - 1, root).children.append(quote)
