"""
Condition Registry - builds conditions from persisted structures.

Section and room conditions share the persisted type "adler"; the host
knows which kind of item it is loading and passes that as `kind`.
"""

from __future__ import annotations

from typing import Any

from ..services import AdlerServices
from .base import AvailabilityCondition
from .room import RoomCondition
from .section import SectionCondition

CONDITION_CLASSES: dict[str, type[AvailabilityCondition]] = {
    "section": SectionCondition,
    "room": RoomCondition,
}


def condition_from_structure(
    structure: Any,
    services: AdlerServices,
    kind: str = "section",
) -> AvailabilityCondition:
    """
    Build a condition from its persisted structure.

    Args:
        structure: Persisted form, e.g. {"type": "adler", "condition": "1^2"}
        services: Collaborators for the condition.
        kind: "section" or "room".

    Raises:
        ValueError: If kind is unknown.
        InvalidStructure: If the structure is malformed.
        InvalidFormula: If the formula does not validate.
    """
    if kind not in CONDITION_CLASSES:
        raise ValueError(
            f"Unknown condition kind '{kind}'. "
            f"Valid kinds: {sorted(CONDITION_CLASSES)}"
        )
    return CONDITION_CLASSES[kind](structure, services)


__all__ = [
    "CONDITION_CLASSES",
    "condition_from_structure",
]
