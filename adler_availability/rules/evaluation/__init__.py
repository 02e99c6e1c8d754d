"""
Formula Evaluation Package.

- core.py: FormulaEvaluator dispatch, evaluate_formula, check_availability
- boolean_ops.py: AndExpr, OrExpr, NotExpr evaluation
- resolve.py: section atom resolution (completion service / validation mode)
- protocols.py: Protocols shared between the modules

Usage:
    from adler_availability.rules.evaluation import FormulaEvaluator, SectionCompletionResolver

    evaluator = FormulaEvaluator(SectionCompletionResolver(completion))
    allowed = evaluator.evaluate(expr, user_id)
"""

from .core import FormulaEvaluator, evaluate_formula, check_availability
from .protocols import AtomResolver
from .resolve import SectionCompletionResolver, ValidationResolver

__all__ = [
    "FormulaEvaluator",
    "evaluate_formula",
    "check_availability",
    "AtomResolver",
    "SectionCompletionResolver",
    "ValidationResolver",
]
