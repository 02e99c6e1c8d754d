"""
Formula language for section availability.

A formula is a boolean expression over section ids:

    ^   AND   (binds tighter than OR)
    v   OR
    !   NOT
    ( ) grouping

e.g. "(1^2)v!3": sections 1 and 2 completed, or section 3 not completed.

Modules:
    constants       - operator characters and plugin identity
    tokenizer       - Token, TokenKind, tokenize
    formula_nodes   - SectionRef, AndExpr, OrExpr, NotExpr, GroupExpr
    formula_parser  - parse_formula, validate_formula, formula_to_string
    evaluation      - FormulaEvaluator, resolvers, check_availability
    renderer        - FormulaRenderer
    remap           - remap_formula_ids
"""

from .constants import CONDITION_TYPE, COMPONENT, SECTION_ENTITY_KIND
from .formula_nodes import (
    SectionRef,
    AndExpr,
    OrExpr,
    NotExpr,
    GroupExpr,
    Expr,
)
from .tokenizer import Token, TokenKind, tokenize
from .formula_parser import (
    parse_formula,
    validate_formula,
    formula_to_string,
    get_referenced_sections,
)
from .evaluation import (
    FormulaEvaluator,
    evaluate_formula,
    check_availability,
    SectionCompletionResolver,
    ValidationResolver,
)
from .renderer import FormulaRenderer
from .remap import remap_formula_ids

__all__ = [
    # Constants
    "CONDITION_TYPE",
    "COMPONENT",
    "SECTION_ENTITY_KIND",
    # Nodes
    "SectionRef",
    "AndExpr",
    "OrExpr",
    "NotExpr",
    "GroupExpr",
    "Expr",
    # Tokenizer
    "Token",
    "TokenKind",
    "tokenize",
    # Parser
    "parse_formula",
    "validate_formula",
    "formula_to_string",
    "get_referenced_sections",
    # Evaluation
    "FormulaEvaluator",
    "evaluate_formula",
    "check_availability",
    "SectionCompletionResolver",
    "ValidationResolver",
    # Rendering / restore
    "FormulaRenderer",
    "remap_formula_ids",
]
