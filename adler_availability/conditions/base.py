"""
Availability condition base.

An availability condition gates a section on the completion of other
sections. Its whole state is one formula string; see
adler_availability.rules for the language.

Lifecycle:
    1. Constructed from the persisted structure. The formula is parsed and
       dry-run in validation mode; malformed formulas fail here.
    2. Queried read-only (is_available, get_description).
    3. Optionally remapped once after a course restore, then saved.
"""

from __future__ import annotations

from typing import Any

from ..config import get_config
from ..errors import InvalidFormula
from ..rules.constants import COMPONENT, CONDITION_TYPE
from ..rules.evaluation import (
    FormulaEvaluator,
    SectionCompletionResolver,
    ValidationResolver,
    check_availability,
)
from ..rules.formula_nodes import Expr
from ..rules.formula_parser import parse_formula, get_referenced_sections
from ..rules.remap import remap_formula_ids
from ..rules.renderer import FormulaRenderer
from ..services import AdlerServices
from ..utils.logger import get_logger
from .structure import load_structure


def _compile(formula: str) -> Expr:
    """Parse and dry-run a formula, failing with context."""
    try:
        expr = parse_formula(formula)
        FormulaEvaluator(ValidationResolver()).evaluate(expr, 0)
    except InvalidFormula as e:
        raise InvalidFormula(f"Invalid condition: {e.detail}") from e
    return expr


class AvailabilityCondition:
    """
    Formula-based availability condition.

    Subclasses only pick the wording; evaluation, rendering and restore
    are shared.

    Attributes:
        description_key: String id used by get_description
        debug_label: Prefix of get_debug_string
    """

    description_key: str = "description_previous_sections_required"
    debug_label: str = "Section condition"

    def __init__(self, structure: Any, services: AdlerServices):
        self._logger = get_logger(COMPONENT, "condition")
        data = load_structure(structure)
        self._expr = _compile(data.condition)
        self._formula = data.condition
        self._services = services

    @property
    def formula(self) -> str:
        """The formula as persisted."""
        return self._formula

    @property
    def referenced_sections(self) -> list[int]:
        """Section ids the formula depends on, in order of appearance."""
        return get_referenced_sections(self._expr)

    def is_available(self, negate: bool, grab_the_lot: bool, user_id: int) -> bool:
        """
        Decide whether the user may access the gated section.

        Args:
            negate: Invert the result (condition used inside a NOT block).
            grab_the_lot: Accepted for interface compatibility; unused.
            user_id: User to decide for.

        Returns:
            True if available. Without the dependency plugin this is True
            (before negation) and a warning is logged.
        """
        dependency_installed = self._services.dependency_installed
        if not dependency_installed:
            self._logger.warning("%s is not available", get_config().plugin.dependency_plugin)

        resolver = SectionCompletionResolver(self._services.completion)
        return check_availability(
            self._expr,
            resolver,
            dependency_installed,
            user_id,
            negate=negate,
        )

    def make_condition_user_readable(self, user_id: int) -> str:
        """Formula with section names and localized operators, colored for user_id."""
        renderer = FormulaRenderer(
            self._services.completion,
            self._services.section_names,
            self._services.strings,
        )
        return renderer.render(self._formula, user_id)

    def get_description(self, full: bool, negate: bool, user_id: int) -> str:
        """
        Localized description of the condition.

        Args:
            full: Accepted for interface compatibility; the description is
                always complete.
            negate: Use the negated wording.
            user_id: User whose progress colors the section names.
        """
        key = f"{self.description_key}_not" if negate else self.description_key
        return self._services.strings.get_string(
            key, COMPONENT, a=self.make_condition_user_readable(user_id)
        )

    def get_debug_string(self) -> str:
        return f"{self.debug_label}: {self._formula}"

    def save(self) -> dict[str, str]:
        """Persisted form of the condition."""
        return {
            "type": CONDITION_TYPE,
            "condition": self._formula,
        }

    def update_after_restore(
        self,
        restore_id: str,
        course_id: int,
        restore_logger: Any = None,
        name: str = "",
    ) -> bool:
        """
        Translate section ids to the ids of the restored course.

        Args:
            restore_id: Id of the running restore.
            course_id: Course being restored into.
            restore_logger: Logger of the restore process; defaults to
                the condition logger.
            name: Name of the item owning this condition, for log output.

        Returns:
            True if the formula changed and needs to be saved.

        Raises:
            UnknownSection: If a referenced section was not restored. The
                formula is left untouched.
        """
        log = restore_logger if restore_logger is not None else self._logger

        updated = remap_formula_ids(self._formula, restore_id, self._services.backup_ids)
        changed = updated != self._formula
        if changed:
            self._expr = _compile(updated)
            log.info(
                "Restore %s: remapped %s condition of '%s' in course %s: %s -> %s",
                restore_id,
                CONDITION_TYPE,
                name,
                course_id,
                self._formula,
                updated,
            )
            self._formula = updated
        return changed

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._formula!r})"
