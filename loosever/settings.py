import logging
import os
import re
from typing import Optional


class Settings:
    log_level: int
    version_key: Optional[str]
    ignored_versions: Optional[str]

    def __init__(self):
        level_name = os.getenv("LOOSEVER_LOG_LEVEL", "WARNING").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"LOOSEVER_LOG_LEVEL must be a logging level name, got '{level_name}'")
        self.log_level = level

        # Field read from records by the `latest` command when --key is not given
        self.version_key = os.getenv("LOOSEVER_VERSION_KEY", "").strip() or None

        # Default --ignore pattern for the `series` command, e.g. "4\.(7|8|9)"
        self.ignored_versions = os.getenv("LOOSEVER_IGNORED_VERSIONS_REGEX", "").strip() or None
        if self.ignored_versions:
            try:
                re.compile(self.ignored_versions)
            except re.error as exc:
                raise ValueError(f"LOOSEVER_IGNORED_VERSIONS_REGEX is not a valid regex: {exc}") from exc
