"""
Pydantic model for the persisted condition structure.

Stored form:
    {"type": "adler", "condition": "(1^2)v!3"}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..errors import InvalidStructure
from ..rules.constants import CONDITION_TYPE


class ConditionStructure(BaseModel):
    """Persisted availability condition."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str = CONDITION_TYPE
    condition: str

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: str) -> str:
        if value != CONDITION_TYPE:
            raise ValueError(f"expected type '{CONDITION_TYPE}', got '{value}'")
        return value


def load_structure(structure: Any) -> ConditionStructure:
    """
    Read a persisted structure.

    Accepts a ConditionStructure, a mapping (decoded JSON) or any object
    exposing "type"/"condition" attributes.

    Raises:
        InvalidStructure: If the condition is missing or malformed.
    """
    if isinstance(structure, ConditionStructure):
        return structure
    try:
        if isinstance(structure, Mapping):
            return ConditionStructure.model_validate(dict(structure))
        return ConditionStructure.model_validate(structure, from_attributes=True)
    except ValidationError as e:
        missing = any(err["type"] == "missing" and err["loc"] == ("condition",) for err in e.errors())
        if missing:
            raise InvalidStructure("adler condition not set") from e
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidStructure(f"Invalid adler condition structure: {details}") from e


__all__ = [
    "ConditionStructure",
    "load_structure",
]
