"""
Tests for formula evaluation.

Validates that:
1. Evaluation follows the AND/OR/NOT truth tables with AND before OR
2. Associative/commutative rewrites agree under any assignment
3. Unenrolled users resolve atoms to False; other errors propagate
4. Validation mode never calls the completion service
5. check_availability fails open and negates correctly
"""

from itertools import product

import pytest

from adler_availability.rules.evaluation import (
    FormulaEvaluator,
    SectionCompletionResolver,
    ValidationResolver,
    check_availability,
    evaluate_formula,
)
from adler_availability.rules.constants import MAX_NESTING_DEPTH
from adler_availability.rules.formula_parser import parse_formula

from conftest import FailingCompletion, StubCompletion


ASSIGNMENTS = list(product([True, False], repeat=3))


def _evaluate(formula: str, a: bool, b: bool, c: bool, user_id: int = 1) -> bool:
    completion = StubCompletion({1: a, 2: b, 3: c})
    return evaluate_formula(formula, user_id, completion)


class TestTruthTables:
    """Formulas match Python boolean semantics for every assignment."""

    @pytest.mark.parametrize("formula,expected", [
        ("1", lambda a, b, c: a),
        ("!1", lambda a, b, c: not a),
        ("1^2", lambda a, b, c: a and b),
        ("1v2", lambda a, b, c: a or b),
        ("1v2^3", lambda a, b, c: a or (b and c)),
        ("1^2v3", lambda a, b, c: (a and b) or c),
        ("(1v2)^3", lambda a, b, c: (a or b) and c),
        ("!1^2", lambda a, b, c: (not a) and b),
        ("!(1^2)", lambda a, b, c: not (a and b)),
        ("1^!2v3", lambda a, b, c: (a and not b) or c),
        ("!!1", lambda a, b, c: a),
        ("(1^2)v!3", lambda a, b, c: (a and b) or not c),
    ])
    def test_matches_python(self, formula, expected):
        for a, b, c in ASSIGNMENTS:
            assert _evaluate(formula, a, b, c) == expected(a, b, c), (formula, a, b, c)

    def test_documented_example(self):
        """(1^2)v!3 with 1=T, 2=F, 3=F -> (T AND F) OR (NOT F) -> True."""
        assert _evaluate("(1^2)v!3", True, False, False) is True


class TestAssociativity:
    """Regrouping and reordering AND/OR chains never changes the result."""

    @pytest.mark.parametrize("variants", [
        ("1^2^3", "3^2^1", "(1^2)^3", "1^(2^3)"),
        ("1v2v3", "3v2v1", "(1v2)v3", "1v(2v3)"),
    ])
    def test_variants_agree(self, variants):
        for a, b, c in ASSIGNMENTS:
            results = {_evaluate(f, a, b, c) for f in variants}
            assert len(results) == 1, (variants, a, b, c)


class TestAtomResolution:
    """How section atoms turn into booleans."""

    def test_not_enrolled_is_false(self):
        completion = StubCompletion({1: True}, not_enrolled={2})
        assert evaluate_formula("2", 5, completion) is False
        assert evaluate_formula("1^2", 5, completion) is False
        assert evaluate_formula("!2", 5, completion) is True

    def test_other_errors_propagate(self):
        with pytest.raises(ConnectionError):
            evaluate_formula("1", 5, FailingCompletion())

    def test_passes_user_id(self):
        completion = StubCompletion({1: True})
        evaluate_formula("1", 77, completion)
        assert completion.calls == [(1, 77)]

    def test_resolves_every_atom(self):
        """Both operands are evaluated even when the left decides the result."""
        completion = StubCompletion({1: False, 2: True})
        assert evaluate_formula("1^2", 3, completion) is False
        assert completion.calls == [(1, 3), (2, 3)]

    def test_resolver_requires_service_outside_validation(self):
        with pytest.raises(ValueError, match="completion service is required"):
            SectionCompletionResolver(None)


class TestValidationMode:
    """Dry-run evaluation used to syntax-check formulas."""

    def test_never_calls_service(self):
        completion = StubCompletion({1: False, 2: False})
        assert evaluate_formula("1^2", 9, completion, validation_mode=True) is True
        assert completion.calls == []

    def test_works_without_service(self):
        assert evaluate_formula("(1v2)^3", 0, None, validation_mode=True) is True

    def test_atoms_are_true(self):
        """Negated atoms are therefore false in validation mode."""
        assert evaluate_formula("!1", 0, validation_mode=True) is False

    def test_validation_resolver(self):
        assert ValidationResolver().resolve(123, 0) is True


class TestFormulaEvaluator:
    """Evaluator dispatch."""

    def test_unknown_node_raises(self):
        evaluator = FormulaEvaluator(ValidationResolver())
        with pytest.raises(TypeError, match="Unknown expression type"):
            evaluator.evaluate("1", 0)

    def test_reusable_across_users(self):
        completion = StubCompletion({1: True})
        evaluator = FormulaEvaluator(SectionCompletionResolver(completion))
        expr = parse_formula("1")
        assert evaluator.evaluate(expr, 1) is True
        assert evaluator.evaluate(expr, 2) is True
        assert completion.calls == [(1, 1), (1, 2)]


class TestCheckAvailability:
    """Top-level decision incl. fail-open and negation."""

    @pytest.mark.parametrize("formula", ["1", "!1", "1^2^3", "(1v2)^!3"])
    def test_fail_open_ignores_formula(self, formula):
        completion = StubCompletion()
        resolver = SectionCompletionResolver(completion)
        assert check_availability(parse_formula(formula), resolver, False, 1) is True
        assert completion.calls == []

    def test_fail_open_then_negate(self):
        resolver = SectionCompletionResolver(StubCompletion())
        assert check_availability(parse_formula("1"), resolver, False, 1, negate=True) is False

    @pytest.mark.parametrize("formula", ["1", "!1", "1^2", "1v2^3", "(1^2)v!3"])
    def test_negate_is_complement(self, formula):
        expr = parse_formula(formula)
        for a, b, c in ASSIGNMENTS:
            resolver = SectionCompletionResolver(StubCompletion({1: a, 2: b, 3: c}))
            plain = check_availability(expr, resolver, True, 1)
            negated = check_availability(expr, resolver, True, 1, negate=True)
            assert negated is (not plain)


class TestDeepFormulas:
    """Formulas at the nesting limit evaluate without overflowing."""

    def test_nested_groups(self):
        formula = "(" * MAX_NESTING_DEPTH + "1" + ")" * MAX_NESTING_DEPTH
        assert evaluate_formula(formula, 1, StubCompletion({1: True})) is True

    def test_not_chain(self):
        formula = "!" * MAX_NESTING_DEPTH + "1"
        assert evaluate_formula(formula, 1, StubCompletion({1: True})) is True

    def test_and_chain(self):
        completion = StubCompletion({1: True})
        formula = "^".join(["1"] * (MAX_NESTING_DEPTH + 1))
        assert evaluate_formula(formula, 1, completion) is True
        assert len(completion.calls) == MAX_NESTING_DEPTH + 1
