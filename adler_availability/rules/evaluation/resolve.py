"""
Atom resolution for formula evaluation.

Turns a section id into a boolean by asking the completion service.
In validation mode no service is called and every atom is true, which
lets a formula be dry-run at construction time.
"""

from __future__ import annotations

from ...errors import UserNotEnrolled
from ...services import CompletionService
from ...utils.logger import get_logger


class SectionCompletionResolver:
    """
    Resolves section atoms through a CompletionService.

    Policy: a user who is not enrolled fails the gate instead of erroring
    the page, so UserNotEnrolled resolves to False. Any other exception
    from the service propagates.
    """

    def __init__(self, completion: CompletionService | None, validation_mode: bool = False):
        if completion is None and not validation_mode:
            raise ValueError("SectionCompletionResolver: completion service is required")
        self._completion = completion
        self.validation_mode = validation_mode
        self._logger = get_logger("availability_adler", "evaluation")

    def resolve(self, section_id: int, user_id: int) -> bool:
        if self.validation_mode:
            return True
        try:
            return bool(self._completion.is_section_completed(section_id, user_id))
        except UserNotEnrolled:
            self._logger.debug(
                "User %s not enrolled for section %s, treating as not completed",
                user_id,
                section_id,
            )
            return False


class ValidationResolver(SectionCompletionResolver):
    """Resolver that never calls out; every atom is true."""

    def __init__(self):
        super().__init__(None, validation_mode=True)


__all__ = [
    "SectionCompletionResolver",
    "ValidationResolver",
]
