"""
YAML String Catalog.

Localized strings live in one YAML file per component and locale:

    <lang_dir>/<locale>/<component>.yaml

Each file is a flat mapping of string id -> text. "{$a}" in a text is
replaced with the argument passed to get_string.

Example YAML:
    condition_operator_pretty_and: "AND"
    description_previous_sections_required: "Complete {$a} to unlock this section"
"""

from __future__ import annotations

from pathlib import Path

import yaml

from ..config import get_config
from ..errors import StringNotFound

PLACEHOLDER = "{$a}"


class YamlStringCatalog:
    """
    String catalog backed by YAML files.

    Files are read on first use and cached per component.
    """

    def __init__(self, lang_dir: Path | str | None = None, locale: str | None = None):
        if lang_dir is None or locale is None:
            lang_config = get_config().lang
            lang_dir = lang_config.lang_dir if lang_dir is None else lang_dir
            locale = lang_config.locale if locale is None else locale
        self.lang_dir = Path(lang_dir)
        self.locale = locale
        self._cache: dict[str, dict[str, str]] = {}

    def _catalog_path(self, component: str) -> Path:
        return self.lang_dir / self.locale / f"{component}.yaml"

    def _load(self, component: str) -> dict[str, str]:
        if component in self._cache:
            return self._cache[component]

        path = self._catalog_path(component)
        if not path.exists():
            raise FileNotFoundError(f"String catalog not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"String catalog must be a mapping: {path}")

        strings = {str(k): str(v) for k, v in data.items()}
        self._cache[component] = strings
        return strings

    def get_string(self, identifier: str, component: str, a: object = None) -> str:
        """
        Look up a localized string.

        Args:
            identifier: String id, e.g. "condition_operator_pretty_and"
            component: Catalog name, e.g. "availability_adler"
            a: Value substituted for "{$a}"

        Raises:
            StringNotFound: If the catalog has no such id.
        """
        strings = self._load(component)
        if identifier not in strings:
            raise StringNotFound(identifier, component)
        text = strings[identifier]
        if a is not None:
            text = text.replace(PLACEHOLDER, str(a))
        return text

    def has_string(self, identifier: str, component: str) -> bool:
        """Check whether an id exists without raising."""
        return identifier in self._load(component)


__all__ = [
    "YamlStringCatalog",
    "PLACEHOLDER",
]
