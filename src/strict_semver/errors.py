# SPDX-License-Identifier: MIT
"""Exceptions raised while building or parsing semantic versions."""

from __future__ import annotations

from typing import Any


class VersionError(Exception):
    """Base class for all version errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class VersionBuildError(VersionError):
    """Raised when a version cannot be built from its components.

    Attributes:
        field: Name of the offending component ("major", "minor" or "patch")
        value: The offending value, or None when the component was never set
    """

    def __init__(self, field: str, value: Any = None, message: str = ""):
        self.field = field
        self.value = value
        if not message:
            if value is None:
                message = f"{field.capitalize()} version needs to be specified."
            else:
                message = f'{field.capitalize()} version "{value}" can\'t be less than 0.'
        super().__init__(message)


class VersionParseError(VersionError):
    """Raised when a string does not denote a valid semantic version.

    The original input is kept on ``version`` for diagnostics. When the
    grammar matched but the builder rejected the values, the
    ``VersionBuildError`` is chained as ``__cause__``.
    """

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        super().__init__(
            message or f'Version could not be parsed from version string "{version}".'
        )


class ConfigError(Exception):
    """Raised when parser configuration loading fails."""

    pass
