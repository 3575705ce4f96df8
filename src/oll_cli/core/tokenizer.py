"""Default line tokenizer.

Splits a command line on whitespace while keeping double-quoted strings
and bracketed JSON literals in a single token.  Quotes, brackets and
escapes are preserved verbatim: decoding them is the handlers' job.

Examples::

    >>> split_line('SET greeting "hello world" 60')
    ['SET', 'greeting', '"hello world"', '60']
    >>> split_line('ARR/SET fruits ["apple", "kiwi"]')
    ['ARR/SET', 'fruits', '["apple", "kiwi"]']
"""

from __future__ import annotations

_OPENERS = {"[": "]", "{": "}"}


def split_line(raw_line: str) -> list[str]:
    """Split *raw_line* into tokens.

    Unbalanced quotes or brackets do not raise; whatever is left of the
    line ends up in the final token.
    """
    tokens: list[str] = []
    current: list[str] = []
    closers: list[str] = []
    in_quotes = False
    escaped = False

    for char in raw_line:
        if escaped:
            current.append(char)
            escaped = False
            continue

        if in_quotes:
            current.append(char)
            if char == "\\":
                escaped = True
            elif char == '"':
                in_quotes = False
            continue

        if char == '"':
            in_quotes = True
            current.append(char)
        elif char in _OPENERS:
            closers.append(_OPENERS[char])
            current.append(char)
        elif closers and char == closers[-1]:
            closers.pop()
            current.append(char)
        elif char.isspace() and not closers:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens
