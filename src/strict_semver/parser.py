# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +001
- A single leading "v" or "V" is accepted: v1.2.3
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .builder import VersionBuilder
from .config import DEFAULT_CONFIG, ParserConfig
from .errors import VersionBuildError, VersionParseError
from .version import Version

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
# Always matched with fullmatch(); re.ASCII keeps \d to 0-9.
SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)

# "0.0.0" is the shortest valid version
MIN_VERSION_LENGTH = 5


def parse_version(version_string: str, config: Optional[ParserConfig] = None) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            ([v]MAJOR.MINOR.PATCH[-prerelease][+build])
        config: Parser options. Defaults to ``DEFAULT_CONFIG``.

    Returns:
        A Version object with parsed components

    Raises:
        VersionParseError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, pre_release='', build_metadata='')

        >>> parse_version("v1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, pre_release='alpha.1', build_metadata='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, pre_release='rc.1', build_metadata='build.456')
    """
    if not isinstance(version_string, str):
        raise VersionParseError(
            version_string,
            f"Version must be a string, got {type(version_string).__name__}",
        )

    config = config or DEFAULT_CONFIG
    candidate = version_string.strip() if config.strip_whitespace else version_string

    if len(candidate) < MIN_VERSION_LENGTH:
        logger.debug("Rejected version string %r: too short", version_string)
        raise VersionParseError(version_string)

    if config.allow_v_prefix and candidate[0] in ("v", "V"):
        candidate = candidate[1:]

    match = SEMVER_PATTERN.fullmatch(candidate)
    if match is None:
        logger.debug("Rejected version string %r", version_string)
        raise VersionParseError(version_string)

    try:
        major = int(match.group("major"))
        minor = int(match.group("minor"))
        patch = int(match.group("patch"))
    except ValueError as e:
        # Only reachable past the interpreter's integer string length limit
        raise VersionParseError(
            version_string,
            f'Numeric components could not be read from version string "{version_string}".',
        ) from e

    try:
        return (
            VersionBuilder()
            .with_major(major)
            .with_minor(minor)
            .with_patch(patch)
            .with_pre_release(match.group("prerelease") or "")
            .with_meta(match.group("buildmetadata") or "")
            .build()
        )
    except VersionBuildError as e:
        raise VersionParseError(
            version_string,
            f'Builder failed while parsing version from string "{version_string}": {e.message}',
        ) from e


def is_valid_semver(version_string: str, config: Optional[ParserConfig] = None) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        config: Parser options. Defaults to ``DEFAULT_CONFIG``.

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("v1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string, config)
    except VersionParseError:
        return False
    return True
