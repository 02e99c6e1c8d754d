"""
Formula Expression Evaluator.

Evaluates formula trees against an atom resolver.

Usage:
    evaluator = FormulaEvaluator(SectionCompletionResolver(completion))
    allowed = evaluator.evaluate(parse_formula("(1^2)v!3"), user_id=42)
"""

from __future__ import annotations

from ..formula_nodes import Expr, SectionRef, AndExpr, OrExpr, NotExpr, GroupExpr
from ..formula_parser import parse_formula
from ...services import CompletionService
from .boolean_ops import eval_and, eval_or, eval_not
from .protocols import AtomResolver
from .resolve import SectionCompletionResolver


class FormulaEvaluator:
    """
    Evaluates formula trees for a user.

    Stateless apart from the resolver; can be reused across evaluations.
    """

    def __init__(self, resolver: AtomResolver):
        self._resolver = resolver

    def evaluate(self, expr: Expr, user_id: int) -> bool:
        """
        Evaluate an expression tree.

        Args:
            expr: Root of the tree.
            user_id: User whose completion state decides each atom.

        Returns:
            Truth value of the formula.
        """
        if isinstance(expr, SectionRef):
            return self._resolver.resolve(expr.section_id, user_id)
        elif isinstance(expr, AndExpr):
            return eval_and(expr, user_id, self)
        elif isinstance(expr, OrExpr):
            return eval_or(expr, user_id, self)
        elif isinstance(expr, NotExpr):
            return eval_not(expr, user_id, self)
        elif isinstance(expr, GroupExpr):
            return self.evaluate(expr.child, user_id)
        else:
            raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def evaluate_formula(
    formula: str,
    user_id: int,
    completion: CompletionService | None = None,
    validation_mode: bool = False,
) -> bool:
    """
    Parse and evaluate a formula in one call.

    Args:
        formula: Formula text.
        user_id: User to evaluate for.
        completion: Completion service; may be None in validation mode.
        validation_mode: Resolve every atom as true without calling out.

    Raises:
        InvalidFormula: If the formula does not parse.
    """
    resolver = SectionCompletionResolver(completion, validation_mode=validation_mode)
    return FormulaEvaluator(resolver).evaluate(parse_formula(formula), user_id)


def check_availability(
    expr: Expr,
    resolver: AtomResolver,
    dependency_installed: bool,
    user_id: int,
    negate: bool = False,
) -> bool:
    """
    Availability decision for one user.

    Fails open: without the dependency plugin nothing can be resolved,
    so the section is treated as available (before negation).
    """
    if dependency_installed:
        allow = FormulaEvaluator(resolver).evaluate(expr, user_id)
    else:
        allow = True

    if negate:
        allow = not allow
    return allow
