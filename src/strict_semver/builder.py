# SPDX-License-Identifier: MIT
"""Validated construction of Version objects."""

from __future__ import annotations

from typing import Optional

from .errors import VersionBuildError
from .version import Version

_NUMERIC_FIELDS = ("major", "minor", "patch")


class VersionBuilder:
    """Accumulates version components and validates them on ``build``.

    Every ``with_*`` method returns the builder so calls can be chained:

        >>> VersionBuilder().with_major(1).with_minor(2).with_patch(3).build()
        Version(major=1, minor=2, patch=3, pre_release='', build_metadata='')

    Builders are cheap and meant to be used by a single caller. A builder can
    be reused after ``build``; already built versions are unaffected.
    """

    def __init__(self) -> None:
        self.major: Optional[int] = None
        self.minor: Optional[int] = None
        self.patch: Optional[int] = None
        self.pre_release: Optional[str] = None
        self.meta: Optional[str] = None

    def with_major(self, major: int) -> VersionBuilder:
        self.major = major
        return self

    def with_minor(self, minor: int) -> VersionBuilder:
        self.minor = minor
        return self

    def with_patch(self, patch: int) -> VersionBuilder:
        self.patch = patch
        return self

    def with_pre_release(self, pre_release: Optional[str]) -> VersionBuilder:
        self.pre_release = pre_release
        return self

    def with_meta(self, meta: Optional[str]) -> VersionBuilder:
        self.meta = meta
        return self

    def build(self) -> Version:
        """Validate the accumulated components and create a Version.

        Returns:
            An immutable Version

        Raises:
            VersionBuildError: If major, minor or patch is missing, is not an
                integer, or is negative, or if a non-empty pre-release has no
                identifiers
        """
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if value is None:
                raise VersionBuildError(name)
            # bool is an int subclass but never a version number
            if isinstance(value, bool) or not isinstance(value, int):
                raise VersionBuildError(
                    name,
                    value,
                    f"{name.capitalize()} version must be an integer, "
                    f"got {type(value).__name__} {value!r}.",
                )

        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if value < 0:
                raise VersionBuildError(name, value)

        pre_release = self.pre_release or ""
        if pre_release and not any(pre_release.split(".")):
            raise VersionBuildError(
                "pre_release",
                pre_release,
                f'Pre-release "{pre_release}" contains no identifiers.',
            )

        return Version(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            pre_release=pre_release,
            build_metadata=self.meta or "",
        )


def build_version(
    major: int,
    minor: int,
    patch: int,
    pre_release: Optional[str] = None,
    meta: Optional[str] = None,
) -> Version:
    """Build a Version from its components.

    Raises:
        VersionBuildError: If a numeric component is missing or negative
    """
    return (
        VersionBuilder()
        .with_major(major)
        .with_minor(minor)
        .with_patch(patch)
        .with_pre_release(pre_release)
        .with_meta(meta)
        .build()
    )
