"""Convention strategy chain and filesystem helpers for the scanners.

A category (domains, hooks, API routes, ...) is described by an ordered list
of conventions. Each convention inspects the filesystem and returns either a
result list or ``None`` when it does not apply. The caller commits to the
first applicable convention and never merges results across conventions.
"""

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from ctxgraph.analyzers.base import ScanError

logger = logging.getLogger(__name__)

SCRIPT_EXTENSIONS = frozenset({".ts", ".tsx", ".js", ".jsx"})

Finder = Callable[[], list[str] | None]


@dataclass(frozen=True)
class Convention:
    """Named filesystem convention.

    Attributes:
        name: Identifier reported when the convention is committed to
        find: Returns the discovered entries, or None if not applicable
    """

    name: str
    find: Finder


def first_match(conventions: Iterable[Convention]) -> tuple[str | None, list[str]]:
    """Run conventions in order and return the first applicable result.

    Args:
        conventions: Ordered candidate conventions

    Returns:
        Tuple of (convention name, entries), or (None, []) if none applies
    """
    for convention in conventions:
        result = convention.find()
        if result is not None:
            logger.debug("Using convention %s (%d entries)", convention.name, len(result))
            return convention.name, result
    return None, []


def non_empty(find: Finder) -> Finder:
    """Wrap a finder so that an empty result counts as not applicable."""

    def wrapped() -> list[str] | None:
        result = find()
        return result or None

    return wrapped


# =============================================================================
# Filesystem helpers
# =============================================================================


def list_dir(path: Path) -> list[Path] | None:
    """List a directory's entries sorted by name.

    Returns:
        Sorted entries, or None if ``path`` is not a directory

    Raises:
        ScanError: If the directory exists but cannot be read
    """
    if not path.is_dir():
        return None
    try:
        return sorted(path.iterdir(), key=lambda p: p.name)
    except PermissionError as e:
        raise ScanError(path, "permission denied") from e


def subdirectories(path: Path) -> list[str] | None:
    """Names of the immediate subdirectories of ``path``, or None if missing."""
    entries = list_dir(path)
    if entries is None:
        return None
    return [entry.name for entry in entries if entry.is_dir()]


def walk_files(root: Path, suffixes: Iterable[str] | None = None) -> Iterator[Path]:
    """Yield files below ``root`` recursively, sorted by relative path.

    Args:
        root: Directory to walk
        suffixes: Optional set of accepted suffixes (e.g. ``{".ts"}``)

    Raises:
        ScanError: If a directory below ``root`` cannot be read
    """
    accepted = set(suffixes) if suffixes is not None else None

    def on_error(error: OSError) -> None:
        raise ScanError(Path(error.filename or root), error.strerror or str(error))

    files: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=on_error):
        files.extend(Path(dirpath) / name for name in filenames)

    for file_path in sorted(files):
        if accepted is None or file_path.suffix in accepted:
            yield file_path


def script_files(root: Path) -> list[Path] | None:
    """Script files (``.ts/.tsx/.js/.jsx``) below ``root``, or None if missing."""
    if not root.is_dir():
        return None
    return list(walk_files(root, SCRIPT_EXTENSIONS))


def strip_script_extension(name: str) -> str:
    """Drop a trailing script extension from a file name."""
    suffix = Path(name).suffix
    if suffix in SCRIPT_EXTENSIONS:
        return name[: -len(suffix)]
    return name


def relative_posix(path: Path, base: Path) -> str:
    """Relative path with forward slashes, for stable reporting."""
    return path.relative_to(base).as_posix()
