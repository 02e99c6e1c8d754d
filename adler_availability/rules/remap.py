"""
Section id remapping after a course restore.

Section ids in a formula refer to the course the backup was taken from.
After restore every id is translated to the id of the restored section;
everything that is not a digit run is kept verbatim.
"""

from __future__ import annotations

import re

from ..errors import InvalidFormula, UnknownSection
from ..services import BackupIdTranslator
from .constants import MAX_SECTION_ID_DIGITS, SECTION_ENTITY_KIND

_SECTION_ID = re.compile(r"[0-9]+")


def remap_formula_ids(
    formula: str,
    restore_id: str,
    translator: BackupIdTranslator,
    entity_kind: str = SECTION_ENTITY_KIND,
) -> str:
    """
    Translate every section id in a formula.

    Args:
        formula: Formula with ids from the backup.
        restore_id: Id of the running restore.
        translator: Backup id lookup.
        entity_kind: Kind of entity the ids refer to.

    Returns:
        The formula with translated ids. The input string is not modified.

    Raises:
        UnknownSection: If an id has no mapping in this restore.
        InvalidFormula: If a digit run is too long to be a section id.
    """

    def _translate(match: re.Match) -> str:
        if len(match.group(0)) > MAX_SECTION_ID_DIGITS:
            raise InvalidFormula(
                f"Invalid statement: section id at position {match.start()} is longer "
                f"than {MAX_SECTION_ID_DIGITS} digits"
            )
        old_id = int(match.group(0))
        new_id = translator.translate_backup_id(restore_id, entity_kind, old_id)
        if new_id is None:
            raise UnknownSection(old_id)
        return str(new_id)

    return _SECTION_ID.sub(_translate, formula)


__all__ = [
    "remap_formula_ids",
]
