from __future__ import annotations

from .tokens import is_digit, is_number


def tokenize(expression: str) -> list[str]:
    """Split *expression* into numbers, operators and parentheses.

    Whitespace is dropped. A digit that follows a number token is appended
    to it, so ``"12+3"`` yields ``["12", "+", "3"]``. Every other character
    becomes a one-character token; unknown symbols are rejected later, when
    the tree is built.
    """
    tokens: list[str] = []
    for ch in expression:
        if ch.isspace():
            continue
        if tokens and is_digit(ch) and is_number(tokens[-1]):
            tokens[-1] += ch
        else:
            tokens.append(ch)
    return tokens
