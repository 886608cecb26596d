"""Configuration utilities for APPBUNDLER.

Settings are read from environment variables so that host applications can
change composer behavior without touching the code that builds the app.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

KEEP_DATA_FIELDS_ENVVAR = "APPBUNDLER_KEEP_DATA_FIELDS"  # pragma: no mutate

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


class InvalidSettingError(ValueError):
    """Raised when an APPBUNDLER environment variable has an unusable value."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r}")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class Settings:
    """Composer settings.

    Attributes:
        keep_data_fields: Copy bundle fields that are neither the name nor a
            function into the wrapped bundle instead of dropping them.
    """

    keep_data_fields: bool = False


def _parse_flag(name: str, environ: Mapping[str, str]) -> bool:
    raw = environ.get(name, "")
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise InvalidSettingError(name, raw)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build `Settings` from the environment.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`; override in
            tests to avoid touching the process environment.

    Returns:
        The settings; unset variables take their defaults.

    Raises:
        InvalidSettingError: If a variable is set to an unrecognized value.
    """
    if environ is None:
        environ = os.environ
    return Settings(keep_data_fields=_parse_flag(KEEP_DATA_FIELDS_ENVVAR, environ))
