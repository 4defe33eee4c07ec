# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from strict_semver import (
    VersionCheckResult,
    build_version,
    compare,
    compare_identifier,
    compare_pre_release,
    is_equal,
    is_newer,
    is_newer_or_equal,
    is_older,
    is_older_or_equal,
    parse_version,
    version_key,
)

NEWER = VersionCheckResult.NEWER
EQUAL = VersionCheckResult.EQUAL
OLDER = VersionCheckResult.OLDER


def cmp(current: str, other: str) -> VersionCheckResult:
    return compare(parse_version(current), parse_version(other))


class TestCompare:
    """Tests for compare function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert cmp("1.0.0", "1.0.0") is EQUAL

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert cmp("1.0.0", "2.0.0") is OLDER
        assert cmp("2.0.0", "1.0.0") is NEWER

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert cmp("1.0.0", "1.1.0") is OLDER
        assert cmp("1.1.0", "1.0.0") is NEWER

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert cmp("1.0.0", "1.0.1") is OLDER
        assert cmp("1.0.1", "1.0.0") is NEWER

    def test_major_decides_before_minor(self):
        """Test that the first differing level decides."""
        assert cmp("2.0.0", "1.99.99") is NEWER
        assert cmp("1.2.0", "1.1.99") is NEWER

    def test_very_large_numbers(self):
        """Test numbers beyond 64 bits compare by magnitude."""
        assert cmp("999999.999999.999999", "1000000.0.0") is OLDER
        assert cmp("18446744073709551616.0.0", "18446744073709551615.0.0") is NEWER

    def test_release_newer_than_prerelease(self):
        """Test that a release has higher precedence than its pre-release."""
        assert cmp("1.0.0", "1.0.0-alpha") is NEWER
        assert cmp("1.0.0-alpha", "1.0.0") is OLDER

    def test_prerelease_of_higher_version(self):
        """Test that a pre-release still beats lower normal versions."""
        assert cmp("1.0.0-alpha", "0.9.9") is NEWER
        assert cmp("1.0.0-alpha", "1.0.1") is OLDER

    def test_numeric_older_than_alphanumeric(self):
        """Test that numeric identifiers have lower precedence."""
        assert cmp("1.0.0-1", "1.0.0-alpha") is OLDER
        assert cmp("1.0.0-alpha.1", "1.0.0-alpha.beta") is OLDER
        assert cmp("1.0.0-alpha.beta", "1.0.0-alpha.1") is NEWER

    def test_numeric_identifiers_by_magnitude(self):
        """Test that numeric identifiers compare numerically."""
        assert cmp("1.0.0-beta.2", "1.0.0-beta.11") is OLDER
        assert cmp("1.0.0-2", "1.0.0-10") is OLDER
        assert cmp("1.0.0-build.10", "1.0.0-build.2") is NEWER

    def test_zero_identifier_is_numeric(self):
        """Test that "0" is a numeric identifier."""
        assert cmp("1.0.0-0", "1.0.0-1") is OLDER
        assert cmp("1.0.0-0", "1.0.0-a") is OLDER

    def test_alphanumeric_lexical(self):
        """Test that alphanumeric identifiers compare by code point."""
        assert cmp("1.0.0-a1", "1.0.0-a2") is OLDER
        assert cmp("1.0.0-alpha", "1.0.0-beta") is OLDER
        assert cmp("1.0.0-a10", "1.0.0-a9") is OLDER
        assert cmp("1.0.0-Beta", "1.0.0-alpha") is OLDER

    def test_longer_prerelease_newer(self):
        """Test that more identifiers with an equal prefix win."""
        assert cmp("1.0.0-alpha", "1.0.0-alpha.1") is OLDER
        assert cmp("1.0.0-alpha.1", "1.0.0-alpha") is NEWER
        assert cmp("1.0.0-alpha.beta", "1.0.0-alpha.beta.1") is OLDER

    def test_snapshot_lexical(self):
        """Test that named pre-releases get no special ranking."""
        assert cmp("2.0.0-snapshot", "2.0.0-beta.2") is NEWER
        assert cmp("2.0.0", "2.0.0-snapshot") is NEWER

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert cmp("1.0.0+build.1", "1.0.0+build.2") is EQUAL
        assert cmp("1.0.0+build", "1.0.0") is EQUAL
        assert cmp("1.0.0-alpha+build.1", "1.0.0-alpha+build.2") is EQUAL
        assert cmp("1.0.0-alpha.1+build.1", "1.0.0-alpha+build.1") is NEWER

    def test_v_prefix_irrelevant(self):
        """Test that the v prefix does not change precedence."""
        assert cmp("v1.0.0", "1.0.0") is EQUAL


class TestPrereleaseOrdering:
    """Tests for pre-release ordering edge cases."""

    def test_semver_chain(self):
        """Test the precedence chain from the SemVer specification."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i in range(len(versions) - 1):
            assert cmp(versions[i], versions[i + 1]) is OLDER, (
                f"{versions[i]} should be older than {versions[i + 1]}"
            )
            assert cmp(versions[i + 1], versions[i]) is NEWER

    def test_common_patterns(self):
        """Test the usual alpha, beta, rc progression."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-beta",
            "1.0.0-beta.1",
            "1.0.0-rc",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i, older in enumerate(versions):
            for newer in versions[i + 1 :]:
                assert cmp(older, newer) is OLDER
                assert cmp(newer, older) is NEWER

    def test_mixed_versions(self):
        """Test a sorted mix of normal and pre-release versions."""
        versions = [
            "0.0.1",
            "0.1.0",
            "0.9.0",
            "1.0.0-rc.1",
            "1.0.0",
            "1.0.1",
            "1.2.3",
            "2.0.0-alpha",
            "2.0.0",
        ]
        for i, older in enumerate(versions):
            for newer in versions[i + 1 :]:
                assert cmp(older, newer) is OLDER


class TestComparePreRelease:
    """Tests for compare_pre_release and compare_identifier."""

    def test_neither_has_prerelease(self):
        """Test two releases are equal at the pre-release level."""
        assert compare_pre_release(build_version(1, 0, 0), build_version(2, 0, 0)) is EQUAL

    def test_only_prerelease_considered(self):
        """Test that numeric components are not compared here."""
        current = build_version(9, 0, 0, "alpha")
        other = build_version(1, 0, 0, "beta")
        assert compare_pre_release(current, other) is OLDER

    def test_empty_fragments_ignored(self):
        """Test that built pre-releases with stray dots compare by their identifiers."""
        current = build_version(1, 0, 0, "alpha..1")
        other = build_version(1, 0, 0, "alpha.1")
        assert compare(current, other) is EQUAL

    @pytest.mark.parametrize(
        ("current", "other", "expected"),
        [
            ("1", "1", EQUAL),
            ("2", "11", OLDER),
            ("11", "2", NEWER),
            ("1", "a", OLDER),
            ("a", "1", NEWER),
            ("alpha", "alpha", EQUAL),
            ("alpha", "beta", OLDER),
            ("Z", "a", OLDER),
            ("0", "0", EQUAL),
            ("01", "1", NEWER),
        ],
    )
    def test_compare_identifier(self, current, other, expected):
        """Test single identifier comparison."""
        assert compare_identifier(current, other) is expected

    def test_leading_zero_not_numeric(self):
        """Test that "01" from a built version is treated as alphanumeric."""
        assert compare_identifier("01", "a") is OLDER
        assert compare_identifier("01", "9") is NEWER


class TestPredicates:
    """Tests for the boolean helpers."""

    def test_release_vs_prerelease(self):
        """Test predicates for a release against its pre-release."""
        release = parse_version("1.0.0")
        pre_release = parse_version("1.0.0-alpha")

        assert is_newer(release, pre_release)
        assert is_newer_or_equal(release, pre_release)
        assert not is_equal(release, pre_release)
        assert not is_older_or_equal(release, pre_release)
        assert not is_older(release, pre_release)

    def test_identical(self):
        """Test predicates for identical versions."""
        v1 = parse_version("1.2.3")
        v2 = parse_version("1.2.3")

        assert is_equal(v1, v2)
        assert is_newer_or_equal(v1, v2)
        assert is_older_or_equal(v1, v2)
        assert not is_newer(v1, v2)
        assert not is_older(v1, v2)

    def test_metadata_only_difference(self):
        """Test predicates for versions differing only in metadata."""
        v1 = parse_version("1.0.0-alpha+build.1")
        v2 = parse_version("1.0.0-alpha+build.2")

        assert is_equal(v1, v2)
        assert is_older_or_equal(v1, v2)
        assert is_newer_or_equal(v1, v2)

    def test_older(self):
        """Test predicates for an older version."""
        v1 = parse_version("0.0.0")
        v2 = parse_version("0.0.1")

        assert is_older(v1, v2)
        assert is_older_or_equal(v1, v2)
        assert not is_newer_or_equal(v1, v2)


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_semver_chain(self):
        """Test sorting the SemVer precedence chain."""
        expected = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        shuffled = [expected[i] for i in (5, 0, 7, 3, 1, 6, 2, 4)]
        assert sorted(shuffled, key=version_key) == expected

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0.0"), parse_version("1.0.0-rc.1"), parse_version("1.0.0")]
        result = sorted(versions, key=version_key)
        assert [str(v) for v in result] == ["1.0.0-rc.1", "1.0.0", "2.0.0"]

    def test_metadata_ignored(self):
        """Test that build metadata does not change the key."""
        assert version_key("1.0.0+a") == version_key("1.0.0+b")


class TestTransitivity:
    """Tests for comparison transitivity."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        assert cmp("1.0.0-alpha", "1.0.0-beta") is OLDER
        assert cmp("1.0.0-beta", "1.0.0") is OLDER
        assert cmp("1.0.0-alpha", "1.0.0") is OLDER

    def test_antisymmetry(self):
        """Test that comparison is antisymmetric: if a < b, then b > a."""
        assert cmp("1.0.0", "2.0.0") is OLDER
        assert cmp("2.0.0", "1.0.0") is NEWER

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["1.0.0", "1.0.0-alpha", "1.0.0+build"]:
            assert cmp(v, v) is EQUAL
