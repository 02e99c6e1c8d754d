"""
Boolean operators for formula expressions.

Handles AndExpr, OrExpr, NotExpr evaluation. Both sides of AND/OR are
always evaluated, so every referenced section is resolved.
"""

from __future__ import annotations

from ..formula_nodes import AndExpr, OrExpr, NotExpr
from .protocols import ExprEvaluatorProtocol


def eval_and(expr: AndExpr, user_id: int, evaluator: ExprEvaluatorProtocol) -> bool:
    """Evaluate AndExpr (AND)."""
    left = evaluator.evaluate(expr.left, user_id)
    right = evaluator.evaluate(expr.right, user_id)
    return left and right


def eval_or(expr: OrExpr, user_id: int, evaluator: ExprEvaluatorProtocol) -> bool:
    """Evaluate OrExpr (OR)."""
    left = evaluator.evaluate(expr.left, user_id)
    right = evaluator.evaluate(expr.right, user_id)
    return left or right


def eval_not(expr: NotExpr, user_id: int, evaluator: ExprEvaluatorProtocol) -> bool:
    """Evaluate NotExpr (negation)."""
    return not evaluator.evaluate(expr.child, user_id)
