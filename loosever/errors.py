"""Exceptions for loading version lists."""


class VersionFileError(RuntimeError):
    """Raised when a version list file cannot be parsed or has the wrong shape."""
