"""
Formula tokenizer.

Splits a formula into operator tokens and section id tokens in a single
left-to-right pass. Each operator character is its own token; a maximal
run of decimal digits is one SECTION token. Whitespace between tokens is
skipped.

Usage:
    tokens = tokenize("(1^2)v!3")
    # ( 1 ^ 2 ) v ! 3
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidFormula
from .constants import (
    AND_OPERATOR,
    OR_OPERATOR,
    NOT_OPERATOR,
    OPEN_PAREN,
    CLOSE_PAREN,
    MAX_SECTION_ID_DIGITS,
)


class TokenKind(Enum):
    """Token categories."""
    SECTION = "section"
    AND = AND_OPERATOR
    OR = OR_OPERATOR
    NOT = NOT_OPERATOR
    LPAREN = OPEN_PAREN
    RPAREN = CLOSE_PAREN


_OPERATOR_KINDS = {
    AND_OPERATOR: TokenKind.AND,
    OR_OPERATOR: TokenKind.OR,
    NOT_OPERATOR: TokenKind.NOT,
    OPEN_PAREN: TokenKind.LPAREN,
    CLOSE_PAREN: TokenKind.RPAREN,
}


@dataclass(frozen=True)
class Token:
    """
    A single formula token.

    Attributes:
        kind: Token category
        text: Source text of the token
        position: Offset of the first character in the formula
    """
    kind: TokenKind
    text: str
    position: int

    @property
    def section_id(self) -> int:
        """Integer value of a SECTION token."""
        if self.kind is not TokenKind.SECTION:
            raise ValueError(f"Token {self.text!r} is not a section id")
        return int(self.text)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}@{self.position})"


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits like "²"
    return "0" <= char <= "9"


def tokenize(formula: str) -> list[Token]:
    """
    Tokenize a formula string.

    Args:
        formula: Formula text, e.g. "(1^2)v!3"

    Returns:
        List of tokens in source order.

    Raises:
        InvalidFormula: On any character that is not an operator, digit
            or whitespace, or on a section id longer than
            MAX_SECTION_ID_DIGITS digits.
    """
    tokens: list[Token] = []
    i = 0
    length = len(formula)

    while i < length:
        char = formula[i]

        if char in _OPERATOR_KINDS:
            tokens.append(Token(_OPERATOR_KINDS[char], char, i))
            i += 1
        elif _is_digit(char):
            start = i
            while i < length and _is_digit(formula[i]):
                i += 1
            if i - start > MAX_SECTION_ID_DIGITS:
                raise InvalidFormula(
                    f"Invalid statement: section id at position {start} is longer "
                    f"than {MAX_SECTION_ID_DIGITS} digits"
                )
            tokens.append(Token(TokenKind.SECTION, formula[start:i], start))
        elif char.isspace():
            i += 1
        else:
            raise InvalidFormula(
                f"Invalid statement: unexpected character {char!r} at position {i}"
            )

    return tokens


__all__ = [
    "TokenKind",
    "Token",
    "tokenize",
]
