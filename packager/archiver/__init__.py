"""Archive creation from the output tree."""

from packager.archiver.compressor import (
    DEFAULT_STRATEGY,
    STRATEGIES,
    build_archive,
    build_command,
    resolve_executable,
    write_deterministic_zip,
)

__all__ = [
    "DEFAULT_STRATEGY",
    "STRATEGIES",
    "build_archive",
    "build_command",
    "resolve_executable",
    "write_deterministic_zip",
]
