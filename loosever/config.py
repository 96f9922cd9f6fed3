"""
Version list file loading.

A version list file is YAML (JSON works too) holding either a list of
version strings / records, or a mapping with such a list under "versions":

    versions:
      - v1.4.0
      - {tag: v1.4.1}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from loosever.errors import VersionFileError


def load_versions_file(path: str | Path) -> list[Any]:
    """
    Load a list of versions from a YAML or JSON file.

    Args:
        path: Path to the file

    Returns:
        List of version strings and/or records, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        VersionFileError: If the file is not valid YAML or holds no version list
    """
    path = Path(path).expanduser()

    if not path.exists():
        raise FileNotFoundError(f"Version file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise VersionFileError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("versions")
    if not isinstance(data, list):
        raise VersionFileError(
            f"{path} must contain a list of versions or a mapping with a 'versions' list"
        )
    return data
