"""Fatal error types raised by the repository profiler.

Absence of an optional convention directory is never an error; it is a
normal branch outcome. Only the conditions below abort a run.
"""

from pathlib import Path


class ProfilerError(Exception):
    """Base class for fatal profiler errors."""


class ManifestNotFoundError(ProfilerError):
    """Raised when the project has no dependency manifest."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path.name} not found in project root: {path.parent}")


class ManifestParseError(ProfilerError):
    """Raised when the manifest is not a key-value document."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to parse {path}: {message}")


class ScanError(ProfilerError):
    """Raised when the filesystem cannot be read during a scan."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {message}")
