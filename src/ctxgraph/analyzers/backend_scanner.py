"""Backend and schema scanning.

Checks, in order:
1. Hosted backend (Supabase): schemas/, functions/, migrations/ folders
2. Prisma: prisma/schema.prisma models and prisma/migrations/
3. Drizzle: drizzle/, <src>/db or <src>/schema
4. Framework API routes: app/api, <src>/app/api, pages/api, <src>/pages/api

The first backend check that matches fixes ``backend_type``. Later checks still
contribute to the inventory, so a project can report Supabase functions
alongside framework API routes.
"""

import logging
import re
from pathlib import Path

from ctxgraph.analyzers.base import ScanError
from ctxgraph.analyzers.conventions import (
    Convention,
    first_match,
    relative_posix,
    script_files,
    subdirectories,
    walk_files,
)
from ctxgraph.models.structure import BackendStructure, BackendType

logger = logging.getLogger(__name__)

PRISMA_SCHEMA = Path("prisma") / "schema.prisma"
PRISMA_MIGRATIONS = Path("prisma") / "migrations"

# Lightweight match over the schema text, not a grammar
PRISMA_MODEL_PATTERN = re.compile(r"\bmodel\s+(\w+)\s*\{")


def parse_prisma_models(schema_text: str) -> list[str]:
    """Extract model names declared in a Prisma schema.

    Args:
        schema_text: Contents of schema.prisma

    Returns:
        Model names in declaration order
    """
    return PRISMA_MODEL_PATTERN.findall(schema_text)


class BackendScanner:
    """Scans a project for backend conventions.

    Attributes:
        project_root: Project root directory
        backend_root: Hosted-backend directory (``<project>/supabase`` by default)
    """

    def __init__(
        self,
        project_root: Path,
        backend_dir: str = "supabase",
        source_dir: str = "src",
    ) -> None:
        self.project_root = project_root
        self.backend_root = project_root / backend_dir
        self.source_dir = source_dir
        self.source_root = project_root / source_dir

    def scan(self) -> BackendStructure:
        """Check every backend convention.

        Returns:
            BackendStructure inventory

        Raises:
            ScanError: If a backend directory or schema file cannot be read
        """
        structure = BackendStructure()

        self._scan_hosted_backend(structure)
        self._scan_prisma(structure)
        self._scan_drizzle(structure)
        _, structure.api_routes = first_match(self._api_route_conventions())

        logger.info(
            "Scanned backend: type=%s, %d model(s), %d migration(s), %d API route(s)",
            structure.backend_type.value,
            len(structure.orm_models),
            len(structure.migrations),
            len(structure.api_routes),
        )
        return structure

    def _scan_hosted_backend(self, structure: BackendStructure) -> None:
        if not self.backend_root.is_dir():
            return

        structure.claim(BackendType.SUPABASE)
        structure.schemas = subdirectories(self.backend_root / "schemas") or []
        structure.edge_functions = subdirectories(self.backend_root / "functions") or []

        migrations_dir = self.backend_root / "migrations"
        if migrations_dir.is_dir():
            structure.migrations.extend(
                f.stem for f in walk_files(migrations_dir, {".sql"})
            )

    def _scan_prisma(self, structure: BackendStructure) -> None:
        schema_path = self.project_root / PRISMA_SCHEMA
        if not schema_path.is_file():
            return

        structure.claim(BackendType.PRISMA)
        try:
            schema_text = schema_path.read_text(encoding="utf-8", errors="replace")
        except PermissionError as e:
            raise ScanError(schema_path, "permission denied") from e
        structure.orm_models = parse_prisma_models(schema_text)

        migrations = subdirectories(self.project_root / PRISMA_MIGRATIONS)
        if migrations:
            structure.migrations.extend(migrations)

    def _scan_drizzle(self, structure: BackendStructure) -> None:
        candidates = (
            self.project_root / "drizzle",
            self.source_root / "db",
            self.source_root / "schema",
        )
        for candidate in candidates:
            if candidate.is_dir():
                logger.debug("Drizzle convention matched: %s", candidate)
                structure.claim(BackendType.DRIZZLE)
                return

    def _api_route_conventions(self) -> list[Convention]:
        candidates = (
            ("app/api", self.project_root / "app" / "api"),
            (f"{self.source_dir}/app/api", self.source_root / "app" / "api"),
            ("pages/api", self.project_root / "pages" / "api"),
            (f"{self.source_dir}/pages/api", self.source_root / "pages" / "api"),
        )
        return [
            Convention(label, lambda path=path: self._route_files(path))
            for label, path in candidates
        ]

    def _route_files(self, api_dir: Path) -> list[str] | None:
        files = script_files(api_dir)
        if files is None:
            return None
        return [relative_posix(f, self.project_root) for f in files]


def scan_backend(
    project_root: Path,
    backend_dir: str = "supabase",
    source_dir: str = "src",
) -> BackendStructure:
    """Scan a project's backend conventions.

    Args:
        project_root: Project root directory
        backend_dir: Hosted-backend directory relative to the project root
        source_dir: Source directory relative to the project root

    Returns:
        BackendStructure inventory
    """
    return BackendScanner(project_root, backend_dir, source_dir).scan()
