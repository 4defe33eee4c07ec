# SPDX-License-Identifier: MIT
"""Immutable semantic version value type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Instances are created through ``VersionBuilder``, ``build_version``,
    ``Version.of`` or ``parse_version``, which validate the components
    before construction. Every derived field is computed once here.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Raw pre-release string (e.g. "alpha.1", "rc.2"), "" if none
        build_metadata: Raw build metadata (e.g. "build.123"), "" if none
        pre_release_identifiers: ``pre_release`` split on "." without empty parts
        has_pre_release: True if ``pre_release`` is not empty
        has_meta: True if ``build_metadata`` is not empty
        short_form: "MAJOR.MINOR.PATCH"
        full_form: "MAJOR.MINOR.PATCH[-pre_release][+build_metadata]"

    Note:
        Equality and hashing use (major, minor, patch, has_pre_release,
        build_metadata). Two versions whose pre-releases differ in content
        only are therefore equal, even though ``compare`` orders them.
        Ordering ignores build metadata, equality does not.
    """

    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build_metadata: str = ""

    pre_release_identifiers: tuple[str, ...] = field(init=False, repr=False)
    has_pre_release: bool = field(init=False, repr=False)
    has_meta: bool = field(init=False, repr=False)
    short_form: str = field(init=False, repr=False)
    full_form: str = field(init=False, repr=False)
    is_alpha: bool = field(init=False, repr=False)
    is_beta: bool = field(init=False, repr=False)
    is_dev: bool = field(init=False, repr=False)
    is_release_candidate: bool = field(init=False, repr=False)
    is_snapshot: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        pre_release = self.pre_release
        # Adjacent, leading or trailing dots never yield an identifier
        identifiers = tuple(part for part in pre_release.split(".") if part)
        short_form = f"{self.major}.{self.minor}.{self.patch}"
        full_form = short_form
        if pre_release:
            full_form += f"-{pre_release}"
        if self.build_metadata:
            full_form += f"+{self.build_metadata}"

        lowered = pre_release.lower()
        derived = {
            "pre_release_identifiers": identifiers,
            "has_pre_release": bool(pre_release),
            "has_meta": bool(self.build_metadata),
            "short_form": short_form,
            "full_form": full_form,
            "is_alpha": "alpha" in lowered,
            "is_beta": "beta" in lowered,
            # "develop" and "development" both contain "dev"
            "is_dev": "dev" in lowered,
            "is_release_candidate": "rc" in lowered,
            "is_snapshot": "snapshot" in lowered,
        }
        for name, value in derived.items():
            object.__setattr__(self, name, value)

    @classmethod
    def of(
        cls,
        version: Union[str, int],
        minor: Optional[int] = None,
        patch: Optional[int] = None,
        pre_release: Optional[str] = None,
        meta: Optional[str] = None,
    ) -> Version:
        """Create a version from a string or from its components.

        Examples:
            >>> str(Version.of("v1.2.3-rc.1"))
            '1.2.3-rc.1'
            >>> str(Version.of(1, 2, 3, "alpha", "build.5"))
            '1.2.3-alpha+build.5'

        Raises:
            VersionParseError: If a string is given and it is not valid
            VersionBuildError: If components are given and are invalid
        """
        if isinstance(version, str) and minor is None and patch is None:
            from .parser import parse_version

            return parse_version(version)

        from .builder import build_version

        return build_version(version, minor, patch, pre_release, meta)

    @classmethod
    def of_optional(cls, version: str) -> Optional[Version]:
        """Parse a version string, returning None if it is not valid."""
        from .errors import VersionParseError
        from .parser import parse_version

        try:
            return parse_version(version)
        except VersionParseError:
            return None

    def compare_to(self, other: Version) -> int:
        """Return -1, 0 or 1 as this version is older, equal or newer than other.

        Build metadata is ignored. Negative means lower precedence, so
        ``sorted()`` over versions gives ascending precedence.
        """
        from .compare import VersionCheckResult, compare

        result = compare(self, other)
        if result is VersionCheckResult.OLDER:
            return -1
        if result is VersionCheckResult.NEWER:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def _identity(self) -> tuple:
        return (
            self.major,
            self.minor,
            self.patch,
            self.has_pre_release,
            self.build_metadata,
        )

    def __str__(self) -> str:
        """Return the full semantic version string."""
        return self.full_form
