"""
Formula AST Node Types.

This module defines the expression tree built from a condition formula:
- SectionRef: Atom referencing a section/room by id
- AndExpr: AND of two sub-expressions ("^")
- OrExpr: OR of two sub-expressions ("v")
- NotExpr: Negation of a sub-expression ("!")
- GroupExpr: Parenthesized sub-expression

Nodes are frozen dataclasses for immutability and hashability.

Type Hierarchy:
    Expr = SectionRef | AndExpr | OrExpr | NotExpr | GroupExpr

Usage:
    # (1^2)v!3
    expr = OrExpr(
        left=GroupExpr(AndExpr(SectionRef(1), SectionRef(2))),
        right=NotExpr(SectionRef(3)),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# =============================================================================
# Atom
# =============================================================================

@dataclass(frozen=True)
class SectionRef:
    """
    A reference to another section by id.

    Attributes:
        section_id: Non-negative section id as written in the formula.

    Examples:
        SectionRef(12)  # "12"
    """
    section_id: int

    def __post_init__(self):
        if self.section_id < 0:
            raise ValueError(
                f"SectionRef: section_id must be >= 0, got {self.section_id}"
            )

    def __repr__(self) -> str:
        return f"Section({self.section_id})"


# =============================================================================
# Boolean Expression Nodes
# =============================================================================

@dataclass(frozen=True)
class AndExpr:
    """
    AND expression: both sides must be true.

    Chains are left-associated: "1^2^3" -> And(And(1, 2), 3).
    """
    left: "Expr"
    right: "Expr"

    def __repr__(self) -> str:
        return f"And({self.left!r}, {self.right!r})"


@dataclass(frozen=True)
class OrExpr:
    """
    OR expression: at least one side must be true.

    Binds looser than AND: "1v2^3" -> Or(1, And(2, 3)).
    """
    left: "Expr"
    right: "Expr"

    def __repr__(self) -> str:
        return f"Or({self.left!r}, {self.right!r})"


@dataclass(frozen=True)
class NotExpr:
    """NOT expression: negates the child."""
    child: "Expr"

    def __repr__(self) -> str:
        return f"Not({self.child!r})"


@dataclass(frozen=True)
class GroupExpr:
    """
    Parenthesized expression.

    Kept as its own node so the tree can be written back to the
    exact formula it was parsed from.
    """
    child: "Expr"

    def __repr__(self) -> str:
        return f"Group({self.child!r})"


# All expression types that can appear in a formula tree
Expr = Union[SectionRef, AndExpr, OrExpr, NotExpr, GroupExpr]


__all__ = [
    "SectionRef",
    "AndExpr",
    "OrExpr",
    "NotExpr",
    "GroupExpr",
    "Expr",
]
