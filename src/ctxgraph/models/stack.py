"""Technology profile entities.

- Platform: Target platform inferred from the framework
- StackProfile: Immutable technology profile derived from a manifest
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Platform(Enum):
    """Target platform of the profiled project."""

    WEB = "web"
    MOBILE = "mobile"
    UNIVERSAL = "universal"


@dataclass(frozen=True)
class StackProfile:
    """Technology profile derived from a dependency manifest.

    Set-valued fields are tuples in detection order; each member comes from
    exactly one matched rule and never repeats.

    Attributes:
        framework: Application framework (Next.js, Expo, React Native) or None
        platform: Target platform
        build_tool: Build tool or None
        typescript: Whether TypeScript is declared
        react_version: Declared React version without range prefix
        navigation: Navigation/routing libraries
        state_management: State management libraries
        api_layer: API clients and data-fetching libraries
        ui_library: Component libraries
        testing: Test frameworks
        css: Styling solutions
        backend: Backend services and server frameworks
        database: ORMs and databases
    """

    framework: str | None = None
    platform: Platform = Platform.WEB
    build_tool: str | None = None
    typescript: bool = False
    react_version: str | None = None
    navigation: tuple[str, ...] = ()
    state_management: tuple[str, ...] = ()
    api_layer: tuple[str, ...] = ()
    ui_library: tuple[str, ...] = ()
    testing: tuple[str, ...] = ()
    css: tuple[str, ...] = ()
    backend: tuple[str, ...] = ()
    database: tuple[str, ...] = ()

    @property
    def is_mobile(self) -> bool:
        """Return True for mobile and universal projects."""
        return self.platform in (Platform.MOBILE, Platform.UNIVERSAL)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "framework": self.framework,
            "platform": self.platform.value,
            "build_tool": self.build_tool,
            "typescript": self.typescript,
            "react_version": self.react_version,
            "navigation": list(self.navigation),
            "state_management": list(self.state_management),
            "api_layer": list(self.api_layer),
            "ui_library": list(self.ui_library),
            "testing": list(self.testing),
            "css": list(self.css),
            "backend": list(self.backend),
            "database": list(self.database),
        }
