"""Line classifier mixin.

Each classifier inspects the text of the current line (without its line
feed) and reports whether it opens a particular block form. Classifiers are
pure logic: they never move the lexer cursor or emit tokens.
"""

from marklet.errors import TokenizeError

DIGITS: frozenset[str] = frozenset("0123456789")

# Characters allowed before a list marker; anything but a space is rejected
LIST_LEADING_BLANKS = " \t"

FENCE = "```"
QUOTE_MARKER = "> "


class BlockClassifierMixin:
    """Mixin providing block-form classification.

    Required Host Attributes:
        - _lineno: int
        - _source_file: str | None

    """

    _lineno: int
    _source_file: str | None

    def _try_classify_atx_header(self, line: str) -> tuple[int, str] | None:
        """Classify ``# Title`` through ``###### Title``.

        Returns:
            (size, content after the marker) or None.
        """
        level = len(line) - len(line.lstrip("#"))
        if not 1 <= level <= 6:
            return None
        if line[level : level + 1] != " ":
            return None
        return level, line[level + 1 :]

    def _try_classify_fence_start(self, line: str) -> str | None:
        """Classify an opening code fence.

        Returns:
            The language tag (possibly empty) or None.
        """
        if not line.startswith(FENCE):
            return None
        return line[len(FENCE) :].rstrip(" ")

    def _is_closing_fence(self, line: str) -> bool:
        return line.startswith(FENCE) and not line[len(FENCE) :].strip(" ")

    def _try_classify_block_quote(self, line: str) -> tuple[int, str] | None:
        """Classify one or more ``> `` markers.

        Returns:
            (depth, remaining content) or None.
        """
        pos = 0
        while line.startswith(QUOTE_MARKER, pos):
            pos += len(QUOTE_MARKER)
        if pos == 0:
            return None
        return pos // len(QUOTE_MARKER), line[pos:]

    def _is_horizontal_rule(self, line: str) -> bool:
        """``***`` or ``---`` followed only by the same character or spaces."""
        for char in "*-":
            if line.startswith(char * 3):
                return not line.strip(char + " ")
        return False

    def _try_classify_list_marker(
        self, line: str
    ) -> tuple[int, bool, int | None, str] | None:
        """Classify ``- item``, ``* item`` or ``1. item`` with leading indent.

        Two leading spaces make one indent level.

        Returns:
            (indent, ordered, digit, remaining content) or None.

        Raises:
            TokenizeError: A character other than a space precedes the marker.
        """
        blanks = len(line) - len(line.lstrip(LIST_LEADING_BLANKS))
        body = line[blanks:]

        if body[:2] in ("* ", "- "):
            ordered, digit, rest = False, None, body[2:]
        elif body[:1] in DIGITS and body[1:3] == ". ":
            ordered, digit, rest = True, int(body[0]), body[3:]
        else:
            return None

        for char in line[:blanks]:
            if char != " ":
                raise TokenizeError(
                    f"Invalid character found: {char!r}",
                    lineno=self._lineno,
                    source_file=self._source_file,
                )

        return blanks // 2, ordered, digit, rest

    def _try_classify_setext_underline(self, line: str) -> int | None:
        """Classify a ``====`` (size 1) or ``----`` (size 2) underline.

        Trailing spaces are allowed; nothing else may appear on the line.
        """
        underline = line.rstrip(" ")
        if not underline:
            return None
        if not underline.strip("="):
            return 1
        if not underline.strip("-"):
            return 2
        return None
