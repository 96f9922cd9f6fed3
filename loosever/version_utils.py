"""
Parse, normalize and compare loosely formatted version strings.

Versions may carry any non-numeric prefix ("v1.4.1", "version 2.0",
"gpu-operator-charts-v1.3.1") and any number of dot-separated segments.
Malformed input never raises: it degrades to None, 0 or False.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Optional, Union

logger = logging.getLogger(__name__)

# Probed in order when latest() gets records without a key or extractor.
FALLBACK_KEYS = ("version", "versionCode", "tag")

LEADING_NON_DIGITS = re.compile(r"^[^0-9]*")
LEADING_DIGITS = re.compile(r"^[0-9]+")
INT_CHUNK_DIGITS = 4000

KeyOrExtractor = Union[str, Callable[[Any], Optional[str]]]


def normalize(value: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace and any leading non-digit characters.

    Examples:
        "v1.7.1.10" -> "1.7.1.10"
        "  1.2.3  " -> "1.2.3"
        "latest"    -> None

    Args:
        value: Raw version string. Non-string values are coerced with str().

    Returns:
        The digit-leading version string, or None when the input is empty
        or contains no digit at all.
    """
    try:
        if not value:
            return None
        cleaned = LEADING_NON_DIGITS.sub("", str(value).strip())
    except Exception:
        logger.debug(f"Could not coerce {type(value).__name__} to a version string", exc_info=True)
        return None
    return cleaned or None


def _to_int(digits: str) -> int:
    # int() refuses strings longer than sys.get_int_max_str_digits()
    value = 0
    for start in range(0, len(digits), INT_CHUNK_DIGITS):
        chunk = digits[start:start + INT_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _segment_digits(normalized: str) -> list[str]:
    """Split on '.' and keep the leading digits of each token without leading zeros ("0" when there are none)."""
    digits = []
    for token in normalized.split("."):
        match = LEADING_DIGITS.match(token)
        digits.append((match.group(0).lstrip("0") or "0") if match else "0")
    return digits


def _parse_segments(normalized: str) -> list[int]:
    """Split on '.' and keep the leading digits of each token (0 when there are none)."""
    return [_to_int(d) for d in _segment_digits(normalized)]


def compare(a: Optional[str], b: Optional[str]) -> int:
    """Compare two version strings segment by segment.

    Missing trailing segments count as zero, so "1.2" == "1.2.0". A version
    that does not normalize sorts before any version that does; two such
    versions are equal. Unexpected failures are treated as equality.

    Returns:
        A positive number if a > b, 0 if equal, a negative number if a < b.
        Only the sign is meaningful.
    """
    try:
        na = normalize(a)
        nb = normalize(b)

        if na is None and nb is None:
            return 0
        if na is None:
            return -1
        if nb is None:
            return 1

        pa = _parse_segments(na)
        pb = _parse_segments(nb)
        length = max(len(pa), len(pb))
        # pad the shorter one with zero segments
        pa += [0] * (length - len(pa))
        pb += [0] * (length - len(pb))

        for va, vb in zip(pa, pb):
            if va != vb:
                return va - vb
        return 0
    except Exception:
        logger.debug(f"Comparison of {a!r} and {b!r} failed, treating as equal", exc_info=True)
        return 0


def is_at_least(version: Optional[str], target: Optional[str]) -> bool:
    """Return True if version >= target. A missing target is never satisfied."""
    if not target:
        return False
    return compare(version, target) >= 0


def _read_field(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def _extract_version(item: Any, key_or_extractor: Optional[KeyOrExtractor]) -> Any:
    if isinstance(item, str):
        return item
    if callable(key_or_extractor):
        return key_or_extractor(item)
    if key_or_extractor:
        return _read_field(item, key_or_extractor)
    for key in FALLBACK_KEYS:
        candidate = _read_field(item, key)
        if candidate:
            return candidate
    return None


def latest(
    items: Optional[Iterable[Any]],
    key_or_extractor: Optional[KeyOrExtractor] = None,
) -> Optional[str]:
    """Find the latest version among version strings or records.

    For each item the version is taken from, in order:
    - the item itself when it is a string
    - key_or_extractor(item) when key_or_extractor is callable
    - the item's key_or_extractor field when it is a field name
    - the first truthy of the item's "version", "versionCode" or "tag" fields

    Items without a usable version are skipped. Among equal versions the
    first one seen wins.

    Args:
        items: Version strings and/or records (mappings or plain objects).
        key_or_extractor: Optional field name or callable returning the version.

    Returns:
        The latest version string as it was extracted, or None.
    """
    if not items:
        return None

    best = None
    for item in items:
        try:
            candidate = _extract_version(item, key_or_extractor)
        except Exception:
            logger.debug(f"Skipping item {item!r}: version extraction failed", exc_info=True)
            continue

        if not candidate:
            continue
        if not isinstance(candidate, str):
            candidate = str(candidate)

        if best is None or compare(candidate, best) > 0:
            best = candidate

    return best


def max_version(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Return the higher of two versions, preferring a on ties."""
    return latest([a, b])


def get_sorted_versions(versions: Iterable[str]) -> list:
    """Sort versions ascending. Equal versions keep their input order."""
    return sorted(versions, key=cmp_to_key(compare))


def get_latest_versions(versions: Iterable[str], count: int) -> list:
    if count <= 0:
        raise ValueError("count must be positive")
    sorted_versions = get_sorted_versions(versions)
    return sorted_versions[-count:] if len(sorted_versions) > count else sorted_versions


def get_earliest_versions(versions: Iterable[str], count: int) -> list:
    if count <= 0:
        raise ValueError("count must be positive")
    sorted_versions = get_sorted_versions(versions)
    return sorted_versions[:count] if len(sorted_versions) > count else sorted_versions
