"""Serialization of tokens and AST nodes to JSON-compatible dicts.

Useful for:
- Dumping the upcoming token stream into parse error messages
- Inspecting the token stream or AST while debugging a document
- Storing a parsed AST and rendering it later

All JSON output is deterministic (sorted keys).

Example:
    from marklet import parse, tokenize
    from marklet.serialization import from_json, to_json

    root = parse(tokenize("# Hello **World**"))
    assert from_json(to_json(root)) == root

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

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
    Node,
    Paragraph,
    Root,
    Text,
)
from marklet.tokens import Token

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Root,
        Header,
        Paragraph,
        CodeBlock,
        BlockQuote,
        List,
        ListItem,
        Hr,
        Text,
        Code,
        Link,
        Image,
    )
}


def to_dict(obj: Node | Token) -> dict[str, Any]:
    """Convert a token or AST node to a JSON-compatible dict.

    Nodes carry a ``_type`` discriminator (the class name); tokens carry
    ``_type`` set to their TokenType name. Child tuples become lists.

    """
    if isinstance(obj, Token):
        result: dict[str, Any] = {"_type": obj.type.name}
    else:
        result = {"_type": type(obj).__name__}

    for f in fields(obj):
        result[f.name] = _serialize_value(getattr(obj, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (Node, Token)):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict produced by to_dict.

    Raises:
        ValueError: If ``_type`` is missing or not a node type.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(obj: Node | Token | list[Token], *, indent: int | None = None) -> str:
    """Serialize a node, a token, or a token list to a JSON string."""
    if isinstance(obj, list):
        return json.dumps([to_dict(token) for token in obj], sort_keys=True, indent=indent)
    return json.dumps(to_dict(obj), sort_keys=True, indent=indent)


def from_json(data: str) -> Root:
    """Deserialize a Root AST from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Root.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Root):
        msg = f"Expected Root, got {type(node).__name__}"
        raise ValueError(msg)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
