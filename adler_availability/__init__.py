"""
adler-availability - section availability by completion formulas

Gates course sections on the completion of other sections, using a small
boolean formula language over section ids ("(1^2)v!3"). Provides
validation, per-user evaluation, human-readable descriptions and id
remapping after course restore.
"""

__version__ = "3.0.0"
__author__ = "adler"

from .conditions import (
    AvailabilityCondition,
    SectionCondition,
    RoomCondition,
    condition_from_structure,
)
from .errors import (
    AvailabilityError,
    InvalidFormula,
    InvalidStructure,
    UnknownSection,
    UserNotEnrolled,
    StringNotFound,
)
from .services import AdlerServices

__all__ = [
    "__version__",
    "AvailabilityCondition",
    "SectionCondition",
    "RoomCondition",
    "condition_from_structure",
    "AvailabilityError",
    "InvalidFormula",
    "InvalidStructure",
    "UnknownSection",
    "UserNotEnrolled",
    "StringNotFound",
    "AdlerServices",
]
