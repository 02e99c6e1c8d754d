"""
Human-readable rendering of formulas.

Replaces section ids with their (HTML-escaped) names, colored green when
the user completed the section and red otherwise, and replaces operator
symbols with localized words:

    "(1^2)v!3"  ->  "(<span ...>Intro</span> AND <span ...>Basics</span>) OR NOT <span ...>Quiz</span>"
"""

from __future__ import annotations

import html

from ..services import CompletionService, SectionNameService, StringCatalog
from .constants import COMPONENT
from .evaluation.resolve import SectionCompletionResolver
from .tokenizer import TokenKind, tokenize

COMPLETED_COLOR = "green"
NOT_COMPLETED_COLOR = "red"

# Localized string ids for operator words
OPERATOR_STRING_IDS = {
    TokenKind.AND: "condition_operator_pretty_and",
    TokenKind.OR: "condition_operator_pretty_or",
    TokenKind.NOT: "condition_operator_pretty_not",
}


class FormulaRenderer:
    """Renders formulas for display to a specific user."""

    def __init__(
        self,
        completion: CompletionService,
        section_names: SectionNameService,
        strings: StringCatalog,
        component: str = COMPONENT,
    ):
        self._resolver = SectionCompletionResolver(completion)
        self._section_names = section_names
        self._strings = strings
        self._component = component

    def _operator_word(self, kind: TokenKind) -> str:
        return self._strings.get_string(OPERATOR_STRING_IDS[kind], self._component)

    def _render_section(self, section_id: int, user_id: int) -> str:
        completed = self._resolver.resolve(section_id, user_id)
        color = COMPLETED_COLOR if completed else NOT_COMPLETED_COLOR
        name = self._section_names.get_section_name(section_id)
        return f'<span style="color: {color};">{html.escape(name, quote=True)}</span>'

    def render(self, formula: str, user_id: int) -> str:
        """
        Render a formula as a quoted, annotated HTML fragment.

        Raises:
            InvalidFormula: On characters outside the formula alphabet.
            Whatever the name or completion services raise.
        """
        parts: list[str] = []
        for token in tokenize(formula):
            if token.kind is TokenKind.SECTION:
                parts.append(self._render_section(token.section_id, user_id))
            elif token.kind in (TokenKind.AND, TokenKind.OR):
                parts.append(f" {self._operator_word(token.kind)} ")
            elif token.kind is TokenKind.NOT:
                parts.append(f"{self._operator_word(token.kind)} ")
            else:
                parts.append(token.text)

        return '"' + "".join(parts).strip() + '"'


__all__ = [
    "FormulaRenderer",
    "OPERATOR_STRING_IDS",
]
