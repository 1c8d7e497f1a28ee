"""Source and backend inventory entities.

Inventories hold names and relative paths only; they never own the files
they describe.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class BackendType(Enum):
    """Backend technology, set by the first backend convention that fires."""

    SUPABASE = "supabase"
    PRISMA = "prisma"
    DRIZZLE = "drizzle"
    UNKNOWN = "unknown"


@dataclass
class SourceStructure:
    """Inventory of conventions discovered in the source tree.

    API routes are not listed here; they are inventoried on
    ``BackendStructure.api_routes``.

    Attributes:
        features: Domain names from the first non-empty domain convention
        feature_convention: Name of the convention that supplied ``features``
        pages: Route segments from the app or pages router
        components: Component paths relative to the components folder (preview only)
        hooks: Hook names (``use*``)
        stores: Store module names
        screens: Screen names
        services: Service file paths relative to the project root
        navigation_files: Navigation file paths relative to the project root
        graphql_files: GraphQL documents relative to the source root
        type_files: ``*.types.ts`` files relative to the source root
    """

    features: list[str] = field(default_factory=list)
    feature_convention: str | None = None
    pages: list[str] = field(default_factory=list)
    components: list[str] = field(default_factory=list)
    hooks: list[str] = field(default_factory=list)
    stores: list[str] = field(default_factory=list)
    screens: list[str] = field(default_factory=list)
    services: list[str] = field(default_factory=list)
    navigation_files: list[str] = field(default_factory=list)
    graphql_files: list[str] = field(default_factory=list)
    type_files: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "features": list(self.features),
            "feature_convention": self.feature_convention,
            "pages": list(self.pages),
            "components": list(self.components),
            "hooks": list(self.hooks),
            "stores": list(self.stores),
            "screens": list(self.screens),
            "services": list(self.services),
            "navigation_files": list(self.navigation_files),
            "graphql_files": list(self.graphql_files),
            "type_files": list(self.type_files),
        }


@dataclass
class BackendStructure:
    """Inventory of backend conventions.

    Attributes:
        backend_type: First detected backend technology
        schemas: Hosted-backend schema folders
        edge_functions: Hosted-backend function folders
        migrations: Migration names (SQL stems and ORM migration folders)
        orm_models: Model names declared in the ORM schema
        api_routes: API route files relative to the project root
    """

    backend_type: BackendType = BackendType.UNKNOWN
    schemas: list[str] = field(default_factory=list)
    edge_functions: list[str] = field(default_factory=list)
    migrations: list[str] = field(default_factory=list)
    orm_models: list[str] = field(default_factory=list)
    api_routes: list[str] = field(default_factory=list)

    def claim(self, backend_type: BackendType) -> None:
        """Set the backend type unless an earlier check already set it."""
        if self.backend_type is BackendType.UNKNOWN:
            self.backend_type = backend_type

    @property
    def has_data_model(self) -> bool:
        """Check whether any schema or ORM model was discovered."""
        return bool(self.schemas or self.orm_models)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "backend_type": self.backend_type.value,
            "schemas": list(self.schemas),
            "edge_functions": list(self.edge_functions),
            "migrations": list(self.migrations),
            "orm_models": list(self.orm_models),
            "api_routes": list(self.api_routes),
        }
