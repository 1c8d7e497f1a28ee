"""Convention-based source tree scanning.

Builds a SourceStructure by checking well-known directory conventions:
- Feature folders: <src>/features, <src>/modules, <src>/domains
- App router: app/, <src>/app (Next.js, Expo Router)
- Pages router: <src>/pages, pages/
- Screens and navigation folders (React Native, Expo)
- Hooks, stores, services, components, GraphQL documents, type files

Every category commits to its first applicable convention. The platform
from the StackProfile decides whether screens or web routers are tried first
when looking for domains.
"""

import logging
from pathlib import Path

from ctxgraph.analyzers.conventions import (
    Convention,
    first_match,
    list_dir,
    non_empty,
    relative_posix,
    script_files,
    strip_script_extension,
    subdirectories,
    walk_files,
)
from ctxgraph.models.stack import StackProfile
from ctxgraph.models.structure import SourceStructure

logger = logging.getLogger(__name__)

FEATURE_DIRS = ("features", "modules", "domains")

# App router folders that are never route segments
APP_ROUTER_RESERVED = frozenset({"api", "components", "lib", "utils"})
APP_ROUTER_RESERVED_PREFIXES = ("_", ".", "(")

# Pages router entries that are never domains
PAGES_ROUTER_RESERVED = frozenset({"api", "index"})
PAGES_ROUTER_RESERVED_PREFIXES = ("_", ".")

HOOK_PREFIX = "use"
SCREEN_SUFFIX = "Screen"
COMPONENT_PREVIEW_LIMIT = 10

GRAPHQL_EXTENSIONS = frozenset({".graphql", ".gql"})
GRAPHQL_FILENAMES = frozenset({"graphql.ts", "queries.ts", "mutations.ts"})
TYPE_FILE_SUFFIX = ".types.ts"


def _dedupe(names: list[str]) -> list[str]:
    return list(dict.fromkeys(names))


class SourceScanner:
    """Scans a project for source conventions.

    Attributes:
        project_root: Project root directory
        source_root: Primary source directory (``<project>/src`` by default)
    """

    def __init__(self, project_root: Path, source_dir: str = "src") -> None:
        """Initialize the scanner.

        Args:
            project_root: Project root directory
            source_dir: Source directory relative to the project root
        """
        self.project_root = project_root
        self.source_dir = source_dir
        self.source_root = project_root / source_dir

    def scan(self, stack: StackProfile) -> SourceStructure:
        """Scan the project for every inventory category.

        Args:
            stack: Detected stack (its platform orders domain conventions)

        Returns:
            SourceStructure inventory

        Raises:
            ScanError: If a convention directory exists but cannot be read
        """
        structure = SourceStructure()

        structure.feature_convention, structure.features = first_match(
            self._domain_conventions(stack)
        )
        _, structure.pages = first_match(self._route_conventions())
        _, structure.screens = first_match(self._screen_conventions())
        _, structure.navigation_files = first_match(
            self._project_files_conventions("navigation")
        )
        _, structure.services = first_match(self._project_files_conventions("services"))
        _, structure.hooks = first_match(self._hook_conventions())
        _, structure.stores = first_match(self._store_conventions())
        structure.components = self._scan_components()
        structure.graphql_files, structure.type_files = self._scan_source_documents()

        logger.info(
            "Scanned source tree: %d domain(s) via %s, %d screen(s), %d hook(s)",
            len(structure.features),
            structure.feature_convention or "no convention",
            len(structure.screens),
            len(structure.hooks),
        )
        return structure

    # =========================================================================
    # Domains and routes
    # =========================================================================

    def _domain_conventions(self, stack: StackProfile) -> list[Convention]:
        feature_folders = [
            Convention(
                f"{self.source_dir}/{name}",
                non_empty(lambda path=self.source_root / name: subdirectories(path)),
            )
            for name in FEATURE_DIRS
        ]
        app_router = [
            Convention(label, non_empty(lambda path=path: self._app_segments(path)))
            for label, path in self._app_dirs()
        ]
        pages_router = [
            Convention(
                label,
                non_empty(lambda path=path, files=files: self._page_entries(path, files)),
            )
            for label, path, files in self._pages_dirs()
        ]
        screens = [
            Convention(label, non_empty(lambda path=path: subdirectories(path)))
            for label, path in self._screens_dirs()
        ]

        if stack.is_mobile:
            return [*feature_folders, *screens, *app_router, *pages_router]
        return [*feature_folders, *app_router, *pages_router, *screens]

    def _route_conventions(self) -> list[Convention]:
        conventions = [
            Convention(label, lambda path=path: self._app_segments(path))
            for label, path in self._app_dirs()
        ]
        conventions.append(
            Convention("pages", lambda: subdirectories(self.project_root / "pages"))
        )
        return conventions

    def _app_dirs(self) -> list[tuple[str, Path]]:
        return [
            ("app", self.project_root / "app"),
            (f"{self.source_dir}/app", self.source_root / "app"),
        ]

    def _pages_dirs(self) -> list[tuple[str, Path, bool]]:
        # Root-level pages/ contributes folders only
        return [
            (f"{self.source_dir}/pages", self.source_root / "pages", True),
            ("pages", self.project_root / "pages", False),
        ]

    def _screens_dirs(self) -> list[tuple[str, Path]]:
        return [
            ("screens", self.project_root / "screens"),
            (f"{self.source_dir}/screens", self.source_root / "screens"),
        ]

    def _app_segments(self, app_dir: Path) -> list[str] | None:
        """Top-level route segments of an app router directory."""
        entries = list_dir(app_dir)
        if entries is None:
            return None
        return [
            entry.name
            for entry in entries
            if entry.is_dir()
            and not entry.name.startswith(APP_ROUTER_RESERVED_PREFIXES)
            and entry.name not in APP_ROUTER_RESERVED
        ]

    def _page_entries(self, pages_dir: Path, include_files: bool = True) -> list[str] | None:
        """Page names of a pages router directory (folders, plus files if asked)."""
        entries = list_dir(pages_dir)
        if entries is None:
            return None

        names: list[str] = []
        for entry in entries:
            if entry.name.startswith(PAGES_ROUTER_RESERVED_PREFIXES):
                continue
            if entry.is_dir():
                name = entry.name
            elif not include_files:
                continue
            else:
                name = strip_script_extension(entry.name)
                if name == entry.name:
                    continue
            if name not in PAGES_ROUTER_RESERVED:
                names.append(name)
        return _dedupe(names)

    # =========================================================================
    # Screens, navigation and services
    # =========================================================================

    def _screen_conventions(self) -> list[Convention]:
        return [
            Convention(label, lambda path=path: self._screen_names(path))
            for label, path in self._screens_dirs()
        ]

    def _screen_names(self, screens_dir: Path) -> list[str] | None:
        entries = list_dir(screens_dir)
        if entries is None:
            return None

        names: list[str] = []
        for entry in entries:
            if entry.is_dir():
                names.append(entry.name)
                continue
            stem = strip_script_extension(entry.name)
            if stem == entry.name:
                continue
            if stem.endswith(SCREEN_SUFFIX) and stem != SCREEN_SUFFIX:
                stem = stem[: -len(SCREEN_SUFFIX)]
            names.append(stem)
        return _dedupe(names)

    def _project_files_conventions(self, folder: str) -> list[Convention]:
        """Root-level folder first, then the same folder under the source root."""
        return [
            Convention(label, lambda path=path: self._files_relative_to_project(path))
            for label, path in (
                (folder, self.project_root / folder),
                (f"{self.source_dir}/{folder}", self.source_root / folder),
            )
        ]

    def _files_relative_to_project(self, folder: Path) -> list[str] | None:
        files = script_files(folder)
        if files is None:
            return None
        return [relative_posix(f, self.project_root) for f in files]

    # =========================================================================
    # Hooks, stores and components
    # =========================================================================

    def _hook_conventions(self) -> list[Convention]:
        return [
            Convention(
                f"{self.source_dir}/{name}",
                lambda path=self.source_root / name: self._hook_names(path),
            )
            for name in ("hooks", "hooks-next")
        ]

    def _hook_names(self, hooks_dir: Path) -> list[str] | None:
        files = script_files(hooks_dir)
        if files is None:
            return None
        return [f.stem for f in files if f.stem.startswith(HOOK_PREFIX)]

    def _store_conventions(self) -> list[Convention]:
        return [
            Convention(
                f"{self.source_dir}/{name}",
                lambda path=self.source_root / name: self._store_names(path),
            )
            for name in ("stores", "store")
        ]

    def _store_names(self, stores_dir: Path) -> list[str] | None:
        files = script_files(stores_dir)
        if files is None:
            return None
        return [f.stem for f in files if f.stem != "index"]

    def _scan_components(self) -> list[str]:
        """Preview of component files; callers must not assume completeness."""
        components_dir = self.source_root / "components"
        files = script_files(components_dir)
        if files is None:
            return []
        paths = [relative_posix(f, components_dir) for f in files]
        return [p for p in paths if Path(p).stem != "index"][:COMPONENT_PREVIEW_LIMIT]

    # =========================================================================
    # GraphQL documents and type files
    # =========================================================================

    def _scan_source_documents(self) -> tuple[list[str], list[str]]:
        if not self.source_root.is_dir():
            return [], []

        graphql: list[str] = []
        types: list[str] = []
        for file_path in walk_files(self.source_root):
            rel = relative_posix(file_path, self.source_root)
            if file_path.suffix in GRAPHQL_EXTENSIONS or file_path.name in GRAPHQL_FILENAMES:
                graphql.append(rel)
            if file_path.name.endswith(TYPE_FILE_SUFFIX):
                types.append(rel)
        return graphql, types


def scan_source(
    project_root: Path,
    stack: StackProfile,
    source_dir: str = "src",
) -> SourceStructure:
    """Scan a project's source conventions.

    Args:
        project_root: Project root directory
        stack: Detected technology stack
        source_dir: Source directory relative to the project root

    Returns:
        SourceStructure inventory
    """
    return SourceScanner(project_root, source_dir).scan(stack)
