"""
Configuration settings for utilkit.

**Conceptual**: The helpers are pure functions, so there is very little to
configure: only the timestamp format tag used when a caller omits one. It is
loaded from environment variables (optionally via a project-root .env file),
validated once, and cached.

**Why a settings object at all?**
  - Single place to look up defaults instead of scattered os.getenv() calls.
  - Fail-fast validation: a typo in UTILKIT_DEFAULT_TIMESTAMP_FORMAT is reported
    on first use with the list of valid tags, not silently ignored.
  - Testable: tests build UtilkitSettings(...) directly or call reset_settings().

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (no-op if the file does not exist)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


# Names accepted for the default format; mirrors utilkit.timestamps.TimestampFormat
VALID_TIMESTAMP_FORMATS = ("RELATIVE", "DATE", "TIME", "SHORT_TIME", "FULL")


@dataclass(frozen=True)
class UtilkitSettings:
    """
    Global settings for utilkit.

    Attributes:
        default_timestamp_format: Format tag name used by utilkit.timestamps when
                                  the caller does not pass one. Defaults to "FULL".
    """
    default_timestamp_format: str = "FULL"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.default_timestamp_format not in VALID_TIMESTAMP_FORMATS:
            raise ValueError(
                f"UTILKIT_DEFAULT_TIMESTAMP_FORMAT must be one of "
                f"{', '.join(VALID_TIMESTAMP_FORMATS)}, "
                f"got: {self.default_timestamp_format}"
            )

    @classmethod
    def from_env(cls) -> "UtilkitSettings":
        """
        Load settings from environment variables.

        **Environment variables**:
          - UTILKIT_DEFAULT_TIMESTAMP_FORMAT (optional): One of RELATIVE, DATE,
            TIME, SHORT_TIME, FULL. Defaults to "FULL". Surrounding whitespace is
            ignored; the name is case-sensitive.

        Returns:
            UtilkitSettings loaded from the environment.

        Raises:
            ValueError: If the variable holds an unknown tag.

        Usage example:
            >>> # In .env file:
            >>> # UTILKIT_DEFAULT_TIMESTAMP_FORMAT=RELATIVE
            >>>
            >>> settings = UtilkitSettings.from_env()
            >>> print(settings.default_timestamp_format)  # "RELATIVE"
        """
        default_format = os.getenv("UTILKIT_DEFAULT_TIMESTAMP_FORMAT", "FULL").strip()
        return cls(default_timestamp_format=default_format)


_default_settings: Optional[UtilkitSettings] = None


def get_settings() -> UtilkitSettings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached. Tests
    that change environment variables should call reset_settings() afterwards.

    Returns:
        Global UtilkitSettings singleton.

    Raises:
        ValueError: If the environment holds an invalid value.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = UtilkitSettings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    The next call to get_settings() reloads from the environment.
    """
    global _default_settings
    _default_settings = None
