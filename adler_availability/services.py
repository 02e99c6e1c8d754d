"""
Collaborator interfaces.

Conditions never reach into a host framework directly; everything they
need from the outside world is passed in through these protocols, bundled
as AdlerServices.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class CompletionService(Protocol):
    """Answers whether a user completed a section."""

    def is_section_completed(self, section_id: int, user_id: int) -> bool:
        """
        Raises:
            UserNotEnrolled: If the user is not enrolled in the section's course.
        """
        ...


class SectionNameService(Protocol):
    """Looks up display names of sections."""

    def get_section_name(self, section_id: int) -> str: ...


class BackupIdTranslator(Protocol):
    """Maps ids from a backup to ids in the restored course."""

    def translate_backup_id(
        self, restore_id: str, entity_kind: str, old_id: int
    ) -> int | None: ...


class StringCatalog(Protocol):
    """Localized string lookup."""

    def get_string(self, identifier: str, component: str, a: object = None) -> str: ...


@dataclass
class AdlerServices:
    """
    Bundle of collaborators a condition talks to.

    Attributes:
        completion: Completion-status lookup
        section_names: Section display-name lookup
        backup_ids: Restore id translation
        strings: Localized string catalog
        dependency_installed: Whether the local_adler plugin is present.
            When False, availability checks fail open.
    """
    completion: CompletionService
    section_names: SectionNameService
    backup_ids: BackupIdTranslator
    strings: StringCatalog
    dependency_installed: bool = True


__all__ = [
    "CompletionService",
    "SectionNameService",
    "BackupIdTranslator",
    "StringCatalog",
    "AdlerServices",
]
