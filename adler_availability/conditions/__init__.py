"""
Availability conditions.

- base.py: AvailabilityCondition (shared lifecycle)
- section.py: SectionCondition
- room.py: RoomCondition
- structure.py: persisted structure model
- registry.py: condition_from_structure
"""

from .base import AvailabilityCondition
from .section import SectionCondition
from .room import RoomCondition
from .structure import ConditionStructure, load_structure
from .registry import CONDITION_CLASSES, condition_from_structure

__all__ = [
    "AvailabilityCondition",
    "SectionCondition",
    "RoomCondition",
    "ConditionStructure",
    "load_structure",
    "CONDITION_CLASSES",
    "condition_from_structure",
]
