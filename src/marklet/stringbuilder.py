"""StringBuilder for O(n) string accumulation.

Appends fragments to a list and joins once at the end, instead of repeated
string concatenation while walking the AST.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("Hello").append("</p>")
        >>> sb.build()
        '<p>Hello</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped). Returns self for chaining."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)
