"""
Pytest configuration and stub collaborators.

The stubs implement the protocols in adler_availability.services with
controlled inputs so conditions can be tested without a host platform:

    completion = StubCompletion({1: True, 2: False}, not_enrolled={3})
    names = StubSectionNames({1: "Intro"})
    translator = StubBackupIds({1: 101, 2: 102})
"""

from __future__ import annotations

import pytest

from adler_availability.config import PACKAGED_LANG_DIR, get_config
from adler_availability.errors import UserNotEnrolled
from adler_availability.i18n import YamlStringCatalog
from adler_availability.services import AdlerServices


class StubCompletion:
    """
    Completion service with fixed answers.

    Sections missing from `completed` are not completed. Sections in
    `not_enrolled` raise UserNotEnrolled. Every call is recorded.
    """

    def __init__(self, completed: dict[int, bool] | None = None, not_enrolled=()):
        self.completed = dict(completed or {})
        self.not_enrolled = set(not_enrolled)
        self.calls: list[tuple[int, int]] = []

    def is_section_completed(self, section_id: int, user_id: int) -> bool:
        self.calls.append((section_id, user_id))
        if section_id in self.not_enrolled:
            raise UserNotEnrolled(section_id, user_id)
        return self.completed.get(section_id, False)


class FailingCompletion:
    """Completion service whose backend is down."""

    def is_section_completed(self, section_id: int, user_id: int) -> bool:
        raise ConnectionError("completion backend unavailable")


class StubSectionNames:
    """Section names; unknown ids get "Section <id>"."""

    def __init__(self, names: dict[int, str] | None = None):
        self.names = dict(names or {})

    def get_section_name(self, section_id: int) -> str:
        return self.names.get(section_id, f"Section {section_id}")


class StubBackupIds:
    """Backup id translator backed by a dict; unknown ids map to None."""

    def __init__(self, mapping: dict[int, int] | None = None):
        self.mapping = dict(mapping or {})
        self.calls: list[tuple[str, str, int]] = []

    def translate_backup_id(self, restore_id: str, entity_kind: str, old_id: int) -> int | None:
        self.calls.append((restore_id, entity_kind, old_id))
        return self.mapping.get(old_id)


@pytest.fixture
def strings() -> YamlStringCatalog:
    """The packaged English catalog."""
    return YamlStringCatalog(PACKAGED_LANG_DIR, "en")


@pytest.fixture
def make_services(strings):
    """Factory for AdlerServices with stub collaborators."""

    def _make(
        completed: dict[int, bool] | None = None,
        not_enrolled=(),
        names: dict[int, str] | None = None,
        mapping: dict[int, int] | None = None,
        dependency_installed: bool = True,
    ) -> AdlerServices:
        return AdlerServices(
            completion=StubCompletion(completed, not_enrolled),
            section_names=StubSectionNames(names),
            backup_ids=StubBackupIds(mapping),
            strings=strings,
            dependency_installed=dependency_installed,
        )

    return _make


@pytest.fixture
def adler_env(monkeypatch):
    """
    Set ADLER_* variables for one test.

    Yields a function (name, value) -> reloaded config. The environment
    is restored and the config reloaded afterwards.
    """

    def _set(**env: str):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return get_config().reload()

    yield _set
    monkeypatch.undo()
    get_config().reload()
