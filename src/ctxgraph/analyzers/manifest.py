"""Dependency manifest loading.

Reads ``package.json`` and flattens its runtime and development groups into
one ``name -> version`` mapping for the stack detector.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ctxgraph.analyzers.base import ManifestNotFoundError, ManifestParseError, ScanError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"

# Merged in order; later groups win on key collision
DEPENDENCY_GROUPS = ("dependencies", "devDependencies")


def merge_dependencies(data: dict[str, Any], source: Path | None = None) -> dict[str, str]:
    """Merge the dependency groups of a parsed manifest.

    Args:
        data: Parsed manifest document
        source: Manifest path, used in error messages

    Returns:
        Mapping of dependency name to declared version string

    Raises:
        ManifestParseError: If a dependency group is not an object
    """
    path = source or Path(MANIFEST_FILENAME)
    deps: dict[str, str] = {}

    for group in DEPENDENCY_GROUPS:
        entries = data.get(group) or {}
        if not isinstance(entries, dict):
            raise ManifestParseError(path, f"'{group}' must be an object")
        for name, version in entries.items():
            deps[name] = version if isinstance(version, str) else str(version)

    return deps


def load_manifest(project_root: Path) -> dict[str, str]:
    """Load and merge the project's dependency manifest.

    Args:
        project_root: Project root directory

    Returns:
        Mapping of dependency name to declared version string

    Raises:
        ManifestNotFoundError: If package.json does not exist
        ManifestParseError: If package.json is not a JSON object
        ScanError: If package.json cannot be read
    """
    path = project_root / MANIFEST_FILENAME
    if not path.is_file():
        raise ManifestNotFoundError(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestParseError(path, str(e)) from e
    except UnicodeDecodeError as e:
        raise ManifestParseError(path, f"not valid UTF-8 ({e.reason})") from e
    except PermissionError as e:
        raise ScanError(path, "permission denied") from e

    if not isinstance(data, dict):
        raise ManifestParseError(path, "top-level value must be an object")

    deps = merge_dependencies(data, path)
    logger.debug("Loaded %d dependencies from %s", len(deps), path)
    return deps
