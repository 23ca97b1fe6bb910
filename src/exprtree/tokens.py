"""
exprtree.tokens — classify token strings on demand.

Tokens are plain ``str`` values. Nothing is tagged at tokenize time; the
helpers below decide what a token is from its content.
"""

from __future__ import annotations

DIGITS = frozenset("0123456789")
LPAREN = "("
RPAREN = ")"

# Lower binds looser. "(" is a barrier that no operator pops past.
PRECEDENCE: dict[str, int] = {
    LPAREN: 0,
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}
UNKNOWN_PRECEDENCE = 3


def is_digit(ch: str) -> bool:
    return ch in DIGITS


def is_number(token: str) -> bool:
    """True for a non-empty string made only of ASCII decimal digits."""
    return bool(token) and all(ch in DIGITS for ch in token)


def precedence(token: str) -> int:
    return PRECEDENCE.get(token, UNKNOWN_PRECEDENCE)
