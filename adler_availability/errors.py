"""
Exception taxonomy for availability conditions.

Every error carries a machine-readable ``error_code`` matching the string
ids in the ``availability_adler`` language catalog, so callers can map
failures to localized messages.

- InvalidFormula: formula failed tokenizing/parsing (fatal to construction)
- InvalidStructure: persisted structure is malformed
- UnknownSection: restore could not translate a section id
- UserNotEnrolled: raised by completion collaborators, recovered as False
- StringNotFound: language catalog has no entry for an id
"""

from __future__ import annotations


class AvailabilityError(Exception):
    """Base class for all availability condition errors."""

    error_code: str = "availability_error"


class InvalidFormula(AvailabilityError):
    """Formula is not a well-formed boolean expression over section ids."""

    error_code = "invalid_formula"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class InvalidStructure(AvailabilityError):
    """Persisted condition structure cannot be loaded."""

    error_code = "invalid_structure"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class UnknownSection(AvailabilityError):
    """
    No restore mapping exists for a section id.

    Usually means the referenced section was excluded from the backup.
    """

    error_code = "unknown_section"

    def __init__(self, old_id: int):
        self.old_id = old_id
        super().__init__(f"section: {old_id}")


class UserNotEnrolled(AvailabilityError):
    """User is not enrolled in the course owning the section."""

    error_code = "user_not_enrolled"

    def __init__(self, section_id: int, user_id: int):
        self.section_id = section_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not enrolled in the course of section {section_id}"
        )


class StringNotFound(AvailabilityError):
    """Language catalog lookup failed."""

    error_code = "string_not_found"

    def __init__(self, identifier: str, component: str):
        self.identifier = identifier
        self.component = component
        super().__init__(f"String '{identifier}' not found in component '{component}'")


__all__ = [
    "AvailabilityError",
    "InvalidFormula",
    "InvalidStructure",
    "UnknownSection",
    "UserNotEnrolled",
    "StringNotFound",
]
