"""Tests for marklet.serialization: tokens and AST to JSON and back."""

import json

import pytest

from marklet import parse, tokenize
from marklet.nodes import Header, Hr, Root, Text
from marklet.serialization import from_dict, from_json, to_dict, to_json
from marklet.tokens import HeaderToken, NewlineToken, TextToken


class TestToDict:
    def test_inline_node(self) -> None:
        assert to_dict(Text("a")) == {"_type": "Text", "text": "a", "bold": False, "italic": False}

    def test_nested_children_become_lists(self) -> None:
        assert to_dict(Root((Header(1, (Text("a"),)), Hr()))) == {
            "_type": "Root",
            "children": [
                {
                    "_type": "Header",
                    "size": 1,
                    "children": [{"_type": "Text", "text": "a", "bold": False, "italic": False}],
                },
                {"_type": "Hr"},
            ],
        }

    def test_token_uses_type_name_and_keeps_lineno(self) -> None:
        assert to_dict(HeaderToken(2, lineno=4)) == {"_type": "HEADER", "size": 2, "lineno": 4}


class TestJson:
    def test_token_list_is_array(self) -> None:
        data = json.loads(to_json([TextToken("a"), NewlineToken()]))
        assert [item["_type"] for item in data] == ["TEXT", "NEWLINE"]

    def test_keys_sorted(self) -> None:
        assert to_json(Text("a")) == (
            '{"_type": "Text", "bold": false, "italic": false, "text": "a"}'
        )

    def test_document_round_trip(self) -> None:
        source = "# T\n\n*a* `c`py [l](h)\n\n- x\n  1. y\n\n> q\n> > r\n\n```sh\nls\n```\n\n![i](s)"
        root = parse(tokenize(source))
        assert from_json(to_json(root)) == root


class TestFromDict:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"text": "a"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "HEADER", "size": 1})

    def test_from_json_requires_root(self) -> None:
        with pytest.raises(ValueError, match="Expected Root"):
            from_json(to_json(Text("a")))
