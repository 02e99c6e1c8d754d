"""
Room condition.

Predecessor of SectionCondition from when sections were called rooms.
Same formula language and persisted form, room wording in descriptions.
"""

from __future__ import annotations

from .base import AvailabilityCondition


class RoomCondition(AvailabilityCondition):
    """Availability condition attached to a room."""

    description_key = "description_previous_rooms_required"
    debug_label = "Room condition"


__all__ = [
    "RoomCondition",
]
