"""
Shared protocols for formula evaluation.

Provides Protocol classes to avoid circular imports between evaluation modules.
"""

from __future__ import annotations

from typing import Protocol

from ..formula_nodes import Expr


class ExprEvaluatorProtocol(Protocol):
    """Protocol for expression evaluator to avoid circular imports."""

    def evaluate(self, expr: Expr, user_id: int) -> bool: ...


class AtomResolver(Protocol):
    """Maps a section id to its truth value for a user."""

    def resolve(self, section_id: int, user_id: int) -> bool: ...
