"""
Configuration management for availability conditions.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Language catalogs shipped with the package
PACKAGED_LANG_DIR = Path(__file__).resolve().parents[1] / "lang"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    # Empty = console only; otherwise a daily file is written here
    log_dir: str = ""


@dataclass
class LangConfig:
    """String catalog configuration."""
    lang_dir: str = str(PACKAGED_LANG_DIR)
    locale: str = "en"


@dataclass
class PluginConfig:
    """
    Plugin identity.

    dependency_plugin names the plugin that provides section completion;
    it only appears in log output, presence itself is injected per
    AdlerServices.
    """
    component: str = "availability_adler"
    dependency_plugin: str = "local_adler"


class AvailabilityConfig:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['AvailabilityConfig'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.log = self._load_log_config()
        self.lang = self._load_lang_config()
        self.plugin = self._load_plugin_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("ADLER_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("ADLER_LOG_DIR", ""),
        )

    def _load_lang_config(self) -> LangConfig:
        """Load string catalog configuration from environment."""
        return LangConfig(
            lang_dir=os.getenv("ADLER_LANG_DIR", str(PACKAGED_LANG_DIR)),
            locale=os.getenv("ADLER_LOCALE", "en"),
        )

    def _load_plugin_config(self) -> PluginConfig:
        """Load plugin identity from environment."""
        return PluginConfig(
            dependency_plugin=os.getenv("ADLER_DEPENDENCY_PLUGIN", "local_adler"),
        )

    def reload(self, env_file: str = ".env"):
        """Reload configuration from environment."""
        self._initialized = False
        AvailabilityConfig._instance = None
        return AvailabilityConfig(env_file)

    def validate(self) -> tuple[bool, List[str]]:
        """
        Validate configuration.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        errors = []

        if self.log.level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"INVALID: ADLER_LOG_LEVEL={self.log.level}. "
                f"Expected one of {', '.join(VALID_LOG_LEVELS)}."
            )

        lang_path = Path(self.lang.lang_dir) / self.lang.locale
        if not lang_path.is_dir():
            errors.append(
                f"MISSING: no string catalog for locale '{self.lang.locale}' "
                f"under {self.lang.lang_dir}."
            )

        if not self.plugin.dependency_plugin:
            errors.append("INVALID: ADLER_DEPENDENCY_PLUGIN must not be empty.")

        return len(errors) == 0, errors

    def summary_short(self) -> str:
        """Generate a short one-line configuration summary."""
        log_target = self.log.log_dir or "console"
        return (
            f"{self.plugin.component} | locale: {self.lang.locale} | "
            f"log: {self.log.level} -> {log_target}"
        )


def get_config(env_file: str = ".env") -> AvailabilityConfig:
    """Get or create the global config instance."""
    return AvailabilityConfig(env_file)
