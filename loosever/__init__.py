"""
Loose version string utilities for build and release tooling.

Versions may carry arbitrary prefixes ("v", "version ", "gpu-operator-charts-v")
and any number of dot-separated numeric segments:
- normalize / compare / is_at_least / latest for single versions and collections
- sorting and latest/earliest-N helpers
- latest tag per release series
- conversion to strict semver.Version
"""

from loosever.release_tags import latest_per_series
from loosever.semver_compat import to_semver
from loosever.version_utils import (
    compare,
    get_earliest_versions,
    get_latest_versions,
    get_sorted_versions,
    is_at_least,
    latest,
    max_version,
    normalize,
)

__all__ = [
    "normalize",
    "compare",
    "is_at_least",
    "latest",
    "max_version",
    "get_sorted_versions",
    "get_latest_versions",
    "get_earliest_versions",
    "latest_per_series",
    "to_semver",
]
