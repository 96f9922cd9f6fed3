"""Bridge loose version strings to strict semver.Version objects."""

from __future__ import annotations

from typing import Optional

from semver import Version

from loosever.version_utils import _parse_segments, _segment_digits, normalize


def to_semver(version: Optional[str]) -> Optional[Version]:
    """Convert a loose version into a semver Version.

    The first three segments become major.minor.patch (zero-padded); any
    further segments are kept as build metadata, which semver ignores for
    precedence:

        "v1.2"     -> 1.2.0
        "1.7.1.10" -> 1.7.1+10

    Returns None when the version does not normalize.
    """
    normalized = normalize(version)
    if normalized is None:
        return None
    segments = _parse_segments(normalized)
    major, minor, patch = (segments + [0, 0, 0])[:3]
    build = ".".join(_segment_digits(normalized)[3:]) or None
    return Version(major, minor, patch, build=build)
