"""Tests for the Parser: token list in, AST out."""

from __future__ import annotations

from marklet import parse, tokenize
from marklet.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Header,
    Hr,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    Root,
    Text,
)
from marklet.parser import Parser
from marklet.tokens import (
    BlockQuoteToken,
    HeaderToken,
    HrToken,
    ListItemToken,
    NewlineToken,
    TextToken,
)

NL = NewlineToken()


def ast(source: str) -> Root:
    return parse(tokenize(source))


class TestInlineRuns:
    def test_soft_break_becomes_space(self) -> None:
        assert ast("a\nb") == Root((Paragraph((Text("a"), Text(" "), Text("b"))),))

    def test_mixed_inline_nodes(self) -> None:
        assert ast("a `c`sh [l](h)") == Root(
            (Paragraph((Text("a "), Code("sh", "c"), Text(" "), Link("l", "h"))),)
        )

    def test_blank_line_ends_run(self) -> None:
        assert ast("a\n\nb") == Root((Paragraph((Text("a"),)), Paragraph((Text("b"),))))


class TestLeafBlocks:
    def test_header_consumes_terminator(self) -> None:
        assert ast("# a\n---") == Root((Header(1, (Text("a"),)), Hr()))

    def test_code_block(self) -> None:
        assert ast("```sh\nls\n```") == Root((CodeBlock("sh", "ls\n"),))

    def test_top_level_image(self) -> None:
        assert ast("![a](s)") == Root((Image("a", "s"),))

    def test_blank_lines_are_skipped(self) -> None:
        assert ast("---\n\n\n---") == Root((Hr(), Hr()))


class TestLists:
    def test_nested_list_hangs_off_last_item(self) -> None:
        assert ast("- a\n  - b") == Root(
            (
                List(
                    ordered=False,
                    children=(
                        ListItem(
                            (
                                Text("a"),
                                List(ordered=False, children=(ListItem((Text("b"),)),)),
                            )
                        ),
                    ),
                ),
            )
        )

    def test_indent_clamped_to_one_level_deeper(self) -> None:
        tokens = [
            ListItemToken(0, False),
            TextToken("a"),
            NL,
            ListItemToken(3, False),
            TextToken("b"),
            NL,
        ]
        root = Parser(tokens).parse()
        outer = root.children[0]
        assert isinstance(outer, List)
        nested = outer.children[0].children[1]
        assert nested == List(ordered=False, children=(ListItem((Text("b"),)),))

    def test_nested_list_takes_marker_style_of_first_item(self) -> None:
        root = ast("- a\n  1. b\n  2. c")
        nested = root.children[0].children[0].children[1]
        assert isinstance(nested, List)
        assert nested.ordered is True
        assert len(nested.children) == 2

    def test_levels_stay_open_for_the_whole_run(self) -> None:
        # d reuses the level-1 list opened under a, not a new one under c
        root = ast("- a\n  - b\n- c\n  - d")
        outer = root.children[0]
        assert isinstance(outer, List)
        first, second = outer.children
        assert first.children[1] == List(
            ordered=False,
            children=(ListItem((Text("b"),)), ListItem((Text("d"),))),
        )
        assert second == ListItem((Text("c"),))

    def test_list_ends_at_non_item_token(self) -> None:
        root = ast("- a\n\nb")
        assert isinstance(root.children[0], List)
        assert root.children[1] == Paragraph((Text("b"),))


class TestBlockQuotes:
    def test_same_depth_appends_children(self) -> None:
        assert ast("> a\n> b") == Root((BlockQuote((Text("a"), Text("b"))),))

    def test_depth_jump_attaches_to_root_quote(self) -> None:
        tokens = [
            BlockQuoteToken(1),
            TextToken("a"),
            NL,
            BlockQuoteToken(3),
            TextToken("b"),
            NL,
        ]
        assert Parser(tokens).parse() == Root(
            (BlockQuote((Text("a"), BlockQuote((Text("b"),)))),)
        )

    def test_depth_attaches_to_parent_level(self) -> None:
        root = ast("> a\n> > b\n> > > c")
        assert root == Root(
            (BlockQuote((Text("a"), BlockQuote((Text("b"), BlockQuote((Text("c"),)))))),)
        )

    def test_shallower_than_first_quote_nests_under_it(self) -> None:
        root = ast("> > a\n> b")
        assert root == Root((BlockQuote((Text("a"), BlockQuote((Text("b"),)))),))


class TestParserState:
    def test_caller_tokens_untouched(self) -> None:
        tokens = [HeaderToken(1), TextToken("a"), NL, HrToken(), NL]
        snapshot = list(tokens)
        Parser(tokens).parse()
        assert tokens == snapshot

    def test_empty_token_list(self) -> None:
        assert Parser([]).parse() == Root(())
