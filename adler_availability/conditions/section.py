"""
Section condition.

Gates a course section on the completion of other sections:

    {"type": "adler", "condition": "(12^13)v!14"}
"""

from __future__ import annotations

from .base import AvailabilityCondition


class SectionCondition(AvailabilityCondition):
    """Availability condition attached to a course section."""

    description_key = "description_previous_sections_required"
    debug_label = "Section condition"


__all__ = [
    "SectionCondition",
]
