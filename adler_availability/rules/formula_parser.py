"""
Formula Parser: formula string to AST conversion.

Grammar:
```
expr   := term ('v' term)*
term   := factor ('^' factor)*
factor := '!' factor | section | '(' expr ')'
section := [0-9]+
```

AND binds tighter than OR; parentheses override both. Operator chains
build left-associated binary nodes.

Usage:
    expr = parse_formula("(1^2)v!3")
    # Or(Group(And(Section(1), Section(2))), Not(Section(3)))

    formula_to_string(expr)
    # "(1^2)v!3"
"""

from __future__ import annotations

from ..errors import InvalidFormula
from .constants import (
    AND_OPERATOR,
    OR_OPERATOR,
    NOT_OPERATOR,
    OPEN_PAREN,
    CLOSE_PAREN,
    MAX_NESTING_DEPTH,
)
from .formula_nodes import Expr, SectionRef, AndExpr, OrExpr, NotExpr, GroupExpr
from .tokenizer import Token, TokenKind, tokenize


class _Parser:
    """Recursive-descent parser over a token list."""

    def __init__(self, formula: str, tokens: list[Token]):
        self._formula = formula
        self._tokens = tokens
        self._pos = 0
        self._depth = 0

    def _peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _fail(self, token: Token | None, expected: str) -> InvalidFormula:
        if token is None:
            where = "end of formula"
        else:
            where = f"{token.text!r} at position {token.position}"
        return InvalidFormula(
            f"Invalid statement: expected {expected}, found {where} in {self._formula!r}"
        )

    def _too_deep(self, where: str) -> InvalidFormula:
        return InvalidFormula(
            f"Invalid statement: formula nested too deeply {where}, "
            f"limit is {MAX_NESTING_DEPTH} levels"
        )

    def _enter(self, token: Token) -> None:
        self._depth += 1
        if self._depth > MAX_NESTING_DEPTH:
            raise self._too_deep(f"at position {token.position}")

    def parse(self) -> Expr:
        if not self._tokens:
            raise InvalidFormula("Invalid statement: formula is empty")
        expr = self._parse_expr()
        trailing = self._peek()
        if trailing is not None:
            if trailing.kind is TokenKind.RPAREN:
                raise InvalidFormula(
                    f"Invalid statement: unmatched ')' at position {trailing.position}"
                )
            raise self._fail(trailing, "an operator")
        depth = _tree_depth(expr)
        if depth > MAX_NESTING_DEPTH:
            raise self._too_deep(f"({depth} levels)")
        return expr

    def _parse_expr(self) -> Expr:
        expr = self._parse_term()
        while (token := self._peek()) is not None and token.kind is TokenKind.OR:
            self._advance()
            expr = OrExpr(expr, self._parse_term())
        return expr

    def _parse_term(self) -> Expr:
        expr = self._parse_factor()
        while (token := self._peek()) is not None and token.kind is TokenKind.AND:
            self._advance()
            expr = AndExpr(expr, self._parse_factor())
        return expr

    def _parse_factor(self) -> Expr:
        token = self._peek()
        if token is None:
            raise self._fail(None, "a section id, '!' or '('")

        if token.kind is TokenKind.NOT:
            self._advance()
            self._enter(token)
            child = self._parse_factor()
            self._depth -= 1
            return NotExpr(child)

        if token.kind is TokenKind.SECTION:
            self._advance()
            return SectionRef(token.section_id)

        if token.kind is TokenKind.LPAREN:
            self._advance()
            self._enter(token)
            inner = self._parse_expr()
            closing = self._peek()
            if closing is None:
                raise InvalidFormula(
                    f"Invalid statement: unmatched '(' at position {token.position}"
                )
            if closing.kind is not TokenKind.RPAREN:
                raise self._fail(closing, "')'")
            self._advance()
            self._depth -= 1
            return GroupExpr(inner)

        raise self._fail(token, "a section id, '!' or '('")


def _tree_depth(expr: Expr) -> int:
    """Depth of the deepest node below expr; a lone section is 0."""
    deepest = 0
    stack = [(expr, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, (AndExpr, OrExpr)):
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        elif isinstance(node, (NotExpr, GroupExpr)):
            stack.append((node.child, depth + 1))
        else:
            deepest = max(deepest, depth)
    return deepest


def parse_formula(formula: str) -> Expr:
    """
    Parse a formula into an expression tree.

    Args:
        formula: Formula text, e.g. "(1v2)^!3"

    Returns:
        Root node of the expression tree.

    Raises:
        InvalidFormula: If the formula is empty, contains unknown characters,
            has unbalanced parentheses, an empty group, or a missing operand,
            or nests deeper than MAX_NESTING_DEPTH levels.
    """
    if not isinstance(formula, str):
        raise InvalidFormula(
            f"Invalid statement: formula must be a string, got {type(formula).__name__}"
        )
    return _Parser(formula, tokenize(formula)).parse()


def validate_formula(formula: str) -> list[str]:
    """
    Validate a formula without raising.

    Returns:
        List of error messages (empty if valid).
    """
    try:
        parse_formula(formula)
    except InvalidFormula as e:
        return [e.detail]
    return []


def formula_to_string(expr: Expr) -> str:
    """
    Write an expression tree back to formula syntax.

    The output is canonical: no whitespace, parentheses only where a
    GroupExpr exists in the tree.
    """
    if isinstance(expr, SectionRef):
        return str(expr.section_id)
    elif isinstance(expr, AndExpr):
        return f"{formula_to_string(expr.left)}{AND_OPERATOR}{formula_to_string(expr.right)}"
    elif isinstance(expr, OrExpr):
        return f"{formula_to_string(expr.left)}{OR_OPERATOR}{formula_to_string(expr.right)}"
    elif isinstance(expr, NotExpr):
        return f"{NOT_OPERATOR}{formula_to_string(expr.child)}"
    elif isinstance(expr, GroupExpr):
        return f"{OPEN_PAREN}{formula_to_string(expr.child)}{CLOSE_PAREN}"
    else:
        raise ValueError(f"Unknown expression type: {type(expr).__name__}")


def get_referenced_sections(expr: Expr) -> list[int]:
    """Collect section ids in the order they appear, duplicates kept."""
    sections: list[int] = []

    def _walk(e: Expr) -> None:
        if isinstance(e, SectionRef):
            sections.append(e.section_id)
        elif isinstance(e, (AndExpr, OrExpr)):
            _walk(e.left)
            _walk(e.right)
        elif isinstance(e, (NotExpr, GroupExpr)):
            _walk(e.child)

    _walk(expr)
    return sections


__all__ = [
    "parse_formula",
    "validate_formula",
    "formula_to_string",
    "get_referenced_sections",
]
