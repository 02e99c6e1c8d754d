"""
Localized strings.
"""

from .strings import YamlStringCatalog, PLACEHOLDER

__all__ = [
    "YamlStringCatalog",
    "PLACEHOLDER",
]
