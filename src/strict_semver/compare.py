# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 section 11.

Pre-release ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta
< 1.0.0-beta < 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .version import Version


class VersionCheckResult(Enum):
    """Precedence of one version relative to another."""

    NEWER = "newer"
    EQUAL = "equal"
    OLDER = "older"


def _result(current: int | str, other: int | str) -> VersionCheckResult:
    if current == other:
        return VersionCheckResult.EQUAL
    return VersionCheckResult.NEWER if current > other else VersionCheckResult.OLDER


def _is_numeric(identifier: str) -> bool:
    """Return True for a SemVer numeric identifier ("0" or no leading zero)."""
    if not identifier.isascii() or not identifier.isdigit():
        return False
    return identifier == "0" or not identifier.startswith("0")


def compare_identifier(current: str, other: str) -> VersionCheckResult:
    """Compare a single pair of pre-release identifiers.

    Numeric identifiers compare by value and always have lower precedence
    than alphanumeric ones. Alphanumeric identifiers compare by code point.
    """
    current_numeric = _is_numeric(current)
    other_numeric = _is_numeric(other)

    if current_numeric and other_numeric:
        return _result(int(current), int(other))
    if current_numeric:
        return VersionCheckResult.OLDER
    if other_numeric:
        return VersionCheckResult.NEWER
    return _result(current, other)


def compare_pre_release(current: Version, other: Version) -> VersionCheckResult:
    """Compare the pre-release identifiers of two versions.

    A version without a pre-release has higher precedence than one with a
    pre-release (1.0.0 > 1.0.0-alpha). When every shared identifier is
    equal, the longer sequence has higher precedence.
    """
    current_ids = current.pre_release_identifiers
    other_ids = other.pre_release_identifiers

    if not current_ids and not other_ids:
        return VersionCheckResult.EQUAL
    if not current_ids:
        return VersionCheckResult.NEWER
    if not other_ids:
        return VersionCheckResult.OLDER

    for current_id, other_id in zip(current_ids, other_ids):
        result = compare_identifier(current_id, other_id)
        if result is not VersionCheckResult.EQUAL:
            return result

    return _result(len(current_ids), len(other_ids))


def compare(current: Version, other: Version) -> VersionCheckResult:
    """Determine the precedence of ``current`` relative to ``other``.

    Args:
        current: The version being checked
        other: The version to check against

    Returns:
        NEWER if current has higher precedence, OLDER if lower, else EQUAL

    Examples:
        >>> from strict_semver import parse_version
        >>> compare(parse_version("2.0.0"), parse_version("1.9.9"))
        <VersionCheckResult.NEWER: 'newer'>
        >>> compare(parse_version("1.0.0-rc.1"), parse_version("1.0.0"))
        <VersionCheckResult.OLDER: 'older'>
        >>> compare(parse_version("1.0.0+build.1"), parse_version("1.0.0+build.2"))
        <VersionCheckResult.EQUAL: 'equal'>
    """
    for attr in ("major", "minor", "patch"):
        result = _result(getattr(current, attr), getattr(other, attr))
        if result is not VersionCheckResult.EQUAL:
            return result

    return compare_pre_release(current, other)


def is_equal(current: Version, other: Version) -> bool:
    """Return True if both versions have the same precedence."""
    return compare(current, other) is VersionCheckResult.EQUAL


def is_newer(current: Version, other: Version) -> bool:
    return compare(current, other) is VersionCheckResult.NEWER


def is_older(current: Version, other: Version) -> bool:
    return compare(current, other) is VersionCheckResult.OLDER


def is_newer_or_equal(current: Version, other: Version) -> bool:
    return compare(current, other) is not VersionCheckResult.OLDER


def is_older_or_equal(current: Version, other: Version) -> bool:
    return compare(current, other) is not VersionCheckResult.NEWER


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with ``compare``.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Raises:
        VersionParseError: If a string is given and it is not valid

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    if isinstance(version, str):
        from .parser import parse_version

        version = parse_version(version)

    # Release becomes (1,) to sort after every pre-release
    if not version.pre_release_identifiers:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in version.pre_release_identifiers:
            if _is_numeric(part):
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (version.major, version.minor, version.patch, prerelease_key)
