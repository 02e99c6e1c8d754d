"""
Tests for the formula tokenizer.

Validates that:
1. Operators become single-character tokens
2. Digit runs become one SECTION token with their position
3. Whitespace is skipped
4. Anything else is rejected with InvalidFormula
"""

import pytest

from adler_availability.conditions import SectionCondition
from adler_availability.errors import InvalidFormula
from adler_availability.rules.constants import MAX_SECTION_ID_DIGITS
from adler_availability.rules.remap import remap_formula_ids
from adler_availability.rules.tokenizer import Token, TokenKind, tokenize

from conftest import StubBackupIds


class TestTokenize:
    """Token sequences for valid input."""

    def test_all_operator_kinds(self):
        """Every operator character maps to its own kind."""
        kinds = [t.kind for t in tokenize("(1^2)v!3")]
        assert kinds == [
            TokenKind.LPAREN,
            TokenKind.SECTION,
            TokenKind.AND,
            TokenKind.SECTION,
            TokenKind.RPAREN,
            TokenKind.OR,
            TokenKind.NOT,
            TokenKind.SECTION,
        ]

    def test_digit_runs_are_single_tokens(self):
        """Multi-digit ids stay together and keep their offsets."""
        tokens = tokenize("12^345")
        assert tokens == [
            Token(TokenKind.SECTION, "12", 0),
            Token(TokenKind.AND, "^", 2),
            Token(TokenKind.SECTION, "345", 3),
        ]
        assert tokens[2].section_id == 345

    def test_leading_zeros_parse_as_int(self):
        assert tokenize("007")[0].section_id == 7

    def test_whitespace_is_skipped(self):
        """Spaces between tokens do not produce tokens."""
        texts = [t.text for t in tokenize(" 1 v\t2 ")]
        assert texts == ["1", "v", "2"]

    def test_empty_formula_has_no_tokens(self):
        assert tokenize("") == []

    def test_section_id_of_operator_raises(self):
        with pytest.raises(ValueError, match="not a section id"):
            tokenize("^")[0].section_id


class TestTokenizeRejects:
    """Characters outside the formula alphabet."""

    @pytest.mark.parametrize("formula", [
        "1&2",
        "1|2",
        "a",
        "t",     # no boolean literals in formulas
        "1V2",   # OR is lowercase v only
        "-1",
        "1.5",
        "²",     # non-ASCII digit
    ])
    def test_unknown_character_raises(self, formula: str):
        with pytest.raises(InvalidFormula, match="unexpected character"):
            tokenize(formula)

    def test_error_reports_position(self):
        with pytest.raises(InvalidFormula, match="position 3"):
            tokenize("1^2x")


class TestSectionIdLength:
    """Digit runs longer than MAX_SECTION_ID_DIGITS are rejected."""

    def test_longest_id(self):
        text = "9" * MAX_SECTION_ID_DIGITS
        assert tokenize(text)[0].section_id == int(text)

    @pytest.mark.parametrize("formula,position", [
        ("1" * (MAX_SECTION_ID_DIGITS + 1), 0),
        ("1" * 5000, 0),
        ("2^" + "1" * 5000, 2),
    ])
    def test_too_long_raises(self, formula: str, position: int):
        with pytest.raises(InvalidFormula, match=f"section id at position {position} is longer"):
            tokenize(formula)

    def test_too_long_rejected_by_condition(self, make_services):
        with pytest.raises(InvalidFormula, match="^Invalid condition: .*is longer than"):
            SectionCondition({"type": "adler", "condition": "1" * 5000}, make_services())

    def test_too_long_rejected_by_remap(self):
        translator = StubBackupIds({1: 2})
        with pytest.raises(InvalidFormula, match="section id at position 2 is longer"):
            remap_formula_ids("1^" + "1" * 5000, "r1", translator)
        assert translator.calls == [("r1", "course_section", 1)]
