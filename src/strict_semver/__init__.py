# SPDX-License-Identifier: MIT
"""Strict Semantic Versioning 2.0.0 parsing and precedence.

This package parses version strings into immutable Version objects and
compares them following the SemVer 2.0.0 precedence rules.

Example:
    >>> from strict_semver import parse_version, compare, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre_release_identifiers
    ('alpha', '1')
    >>>
    >>> is_valid_semver("1.0")
    False
    >>>
    >>> compare(parse_version("1.0.0"), parse_version("1.0.0-alpha"))
    <VersionCheckResult.NEWER: 'newer'>
"""

__version__ = "0.1.0"

from .errors import (
    ConfigError,
    VersionBuildError,
    VersionError,
    VersionParseError,
)
from .version import Version
from .builder import (
    VersionBuilder,
    build_version,
)
from .config import (
    DEFAULT_CONFIG,
    ParserConfig,
    load_config,
)
from .parser import (
    SEMVER_PATTERN,
    is_valid_semver,
    parse_version,
)
from .compare import (
    VersionCheckResult,
    compare,
    compare_identifier,
    compare_pre_release,
    is_equal,
    is_newer,
    is_newer_or_equal,
    is_older,
    is_older_or_equal,
    version_key,
)

__all__ = [
    # Errors
    "VersionError",
    "VersionBuildError",
    "VersionParseError",
    "ConfigError",
    # Construction
    "Version",
    "VersionBuilder",
    "build_version",
    # Parsing
    "SEMVER_PATTERN",
    "parse_version",
    "is_valid_semver",
    "ParserConfig",
    "DEFAULT_CONFIG",
    "load_config",
    # Comparison
    "VersionCheckResult",
    "compare",
    "compare_pre_release",
    "compare_identifier",
    "is_equal",
    "is_newer",
    "is_older",
    "is_newer_or_equal",
    "is_older_or_equal",
    "version_key",
]
