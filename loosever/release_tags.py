"""
Group release tags into series and keep the latest tag of each.

Supports any tag format normalize() understands, for example:
- gpu-operator-charts-v1.4.0
- v1.0.0, 1.0.0
- release-4.18.3.1
"""

from __future__ import annotations

import logging
import re
from functools import cmp_to_key
from typing import Iterable, Optional, Union

from loosever.version_utils import _segment_digits, compare, normalize

logger = logging.getLogger(__name__)


def series_key(normalized: str, depth: int) -> str:
    """Return the first `depth` segments of a normalized version, e.g. "1.4" for "1.4.2"."""
    segments = _segment_digits(normalized)[:depth]
    segments += ["0"] * (depth - len(segments))
    return ".".join(segments)


def latest_per_series(
    tags: Iterable[str],
    depth: int = 2,
    ignore: Optional[Union[str, re.Pattern]] = None,
) -> dict[str, str]:
    """Map each release series to its latest tag.

    Args:
        tags: Release tag names.
        depth: Number of leading segments that identify a series
            (2 groups "1.4.0" and "1.4.1" under "1.4").
        ignore: Optional regex; tags whose normalized version matches it
            (re.match) are skipped.

    Returns:
        dict mapping series key -> latest raw tag, ordered by series.
        Example: {'1.4': 'v1.4.1', '1.5': 'v1.5.0'}

    Raises:
        ValueError: If depth is not positive or ignore is not a valid regex.
    """
    if depth < 1:
        raise ValueError("depth must be positive")
    try:
        ignore_re = re.compile(ignore) if isinstance(ignore, str) else ignore
    except re.error as exc:
        raise ValueError(f"invalid ignore pattern: {exc}") from exc

    series: dict[str, str] = {}
    tag_count = 0
    for tag in tags:
        tag_count += 1
        normalized = normalize(tag)
        if normalized is None:
            logger.debug(f"Skipping non-version tag: {tag!r}")
            continue
        if ignore_re is not None and ignore_re.match(normalized):
            logger.debug(f"Skipping ignored version: {tag!r}")
            continue

        key = series_key(normalized, depth)
        existing = series.get(key)
        if existing is None or compare(tag, existing) > 0:
            series[key] = tag

    logger.info(f"Grouped {tag_count} tags into {len(series)} series")
    return {key: series[key] for key in sorted(series, key=cmp_to_key(compare))}
