"""Split expansion-bearing strings into argument tokens."""

from __future__ import annotations

# str.isspace() also accepts the ASCII information separators, which are
# not whitespace for tokenizing purposes
_INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def tokenize(text: str) -> list[str]:
    """Split ``text`` into tokens.

    Whitespace separates tokens unless it is inside double quotes or
    escaped. A backslash makes the next character literal and is itself
    dropped; unescaped double quotes toggle quoting and are dropped.
    An unterminated quote or trailing backslash is not an error: whatever
    was accumulated becomes the last token.

    Example:
        >>> tokenize('echo "Hello, world!"')
        ['echo', 'Hello, world!']
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False
    in_escape = False

    for ch in text:
        if ch == "\\" and not in_escape:
            in_escape = True
        elif ch == '"' and not in_escape:
            in_quotes = not in_quotes
        elif _is_separator(ch) and not in_quotes and not in_escape:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)
            in_escape = False

    if current:
        tokens.append("".join(current))

    return tokens


def _is_separator(ch: str) -> bool:
    return ch.isspace() and ch not in _INFORMATION_SEPARATORS
