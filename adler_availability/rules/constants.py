"""
Formula Constants.

This module defines all constant values used by the formula language:
- Operator characters
- Persisted structure type
- Restore entity kind
- Language component name
"""

from __future__ import annotations

# =============================================================================
# Operator Characters
# =============================================================================
# Each operator is a single character; digits outside these form atoms.

AND_OPERATOR = "^"
OR_OPERATOR = "v"
NOT_OPERATOR = "!"
OPEN_PAREN = "("
CLOSE_PAREN = ")"

OPERATOR_CHARS = frozenset({
    AND_OPERATOR,
    OR_OPERATOR,
    NOT_OPERATOR,
    OPEN_PAREN,
    CLOSE_PAREN,
})

# =============================================================================
# Limits
# =============================================================================

# Deepest expression tree accepted (parentheses, NOT and operator chains)
MAX_NESTING_DEPTH = 100

# Longest digit run accepted as a section id (fits a signed 64-bit id)
MAX_SECTION_ID_DIGITS = 19

# =============================================================================
# Plugin Identity
# =============================================================================

# "type" key of the persisted structure, shared by section and room conditions
CONDITION_TYPE = "adler"

# Language catalog component
COMPONENT = "availability_adler"

# Entity kind passed to the backup id translator during restore
SECTION_ENTITY_KIND = "course_section"


__all__ = [
    "AND_OPERATOR",
    "OR_OPERATOR",
    "NOT_OPERATOR",
    "OPEN_PAREN",
    "CLOSE_PAREN",
    "OPERATOR_CHARS",
    "MAX_NESTING_DEPTH",
    "MAX_SECTION_ID_DIGITS",
    "CONDITION_TYPE",
    "COMPONENT",
    "SECTION_ENTITY_KIND",
]
