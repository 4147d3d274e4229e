"""Line-oriented lexer for marklet.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (cursor, block dispatch, code fences)
├── classifiers.py       # Pure line-form classifiers
└── inline.py            # Inline scanner (emphasis, links, images, code)

Usage:
    >>> from marklet.lexer import Lexer
    >>> tokens = Lexer("Hello\\n\\nWorld").tokenize()

"""

from marklet.lexer.core import Lexer

__all__ = ["Lexer"]
