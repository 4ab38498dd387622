from __future__ import annotations


class PackagingError(Exception):
    """Base class for every fatal packaging failure."""


class ConfigError(PackagingError, ValueError):
    pass


class SourceNotFoundError(PackagingError):
    pass


class PathConflictError(PackagingError):
    """Output directory would overwrite the source tree."""


class InvalidJsonError(PackagingError, ValueError):
    """Raised for a source JSON file that cannot be parsed. Recovered by the tree walk."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid JSON in {path}: {reason}")
        self.path = path
        self.reason = reason


class ArchiverError(PackagingError):
    pass


class CompressorNotFoundError(ArchiverError):
    def __init__(self, tool: str) -> None:
        super().__init__(f"compression tool not found: {tool}")
        self.tool = tool


class CompressorFailedError(ArchiverError):
    def __init__(self, tool: str, returncode: int) -> None:
        super().__init__(f"compression tool failed: {tool} exited with status {returncode}")
        self.tool = tool
        self.returncode = returncode
