"""Shared pytest fixtures for ctxgraph tests.

This module provides common fixtures used across unit and integration
tests. Fixtures are organized by category:
- Project fixtures: Projects built in tmp_path (manifest + source tree)
- Context graph fixtures: Documentation trees for the verifier
- Configuration fixtures: Test configs for various scenarios
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from tests.fixtures import (
    ARCHITECTURE_SECTIONS,
    DOMAIN_SECTIONS,
    PATTERN_SECTIONS,
    WORKFLOW_SECTIONS,
    markdown_with_sections,
)

# =============================================================================
# Project Fixtures
# =============================================================================


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes package.json into tmp_path."""

    def _write(
        dependencies: dict[str, Any] | None = None,
        dev_dependencies: dict[str, Any] | None = None,
        root: Path | None = None,
    ) -> Path:
        target = (root or tmp_path) / "package.json"
        data: dict[str, Any] = {"name": "sample-app", "version": "0.1.0"}
        if dependencies is not None:
            data["dependencies"] = dependencies
        if dev_dependencies is not None:
            data["devDependencies"] = dev_dependencies
        target.write_text(json.dumps(data, indent=2))
        return target

    return _write


@pytest.fixture
def touch(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that creates files (and parents) under tmp_path."""

    def _touch(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _touch


@pytest.fixture
def nextjs_project(tmp_path: Path, write_manifest, touch) -> Path:
    """Create a small Next.js project with an app router and feature folders."""
    write_manifest(
        dependencies={"next": "14.0.0", "react": "^18.2.0", "zustand": "4.4.0"},
        dev_dependencies={"typescript": "5.3.0", "vitest": "1.0.0"},
    )
    touch("src/features/auth/index.ts")
    touch("src/features/billing/index.ts")
    touch("app/dashboard/page.tsx")
    touch("app/api/users/route.ts")
    touch("src/hooks/useAuth.ts")
    touch("src/hooks/helpers.ts")
    touch("src/components/Button.tsx")
    touch("src/components/index.ts")
    return tmp_path


# =============================================================================
# Context Graph Fixtures
# =============================================================================


@pytest.fixture
def context_graph(tmp_path: Path, touch) -> Path:
    """Create a complete, healthy context graph in tmp_path.

    Layout:
        AGENTS.md, CLAUDE.md, .cursorrules (entry files)
        context/templates/domain-template.md
        context/domains/auth/CONTEXT.md
        context/architecture/overview.md
        context/patterns/error-handling.md
        context/workflows/deploy.md
    """
    touch("AGENTS.md", "# Agents\n\nSee context/domains/auth/CONTEXT.md and overview.md\n")
    touch("CLAUDE.md", "Read AGENTS.md first. Patterns: error-handling, deploy\n")
    touch(".cursorrules", "Follow AGENTS.md\n")

    touch("context/templates/domain-template.md", "# Template\n")
    touch("context/domains/auth/CONTEXT.md", markdown_with_sections(DOMAIN_SECTIONS))
    touch("context/architecture/overview.md", markdown_with_sections(ARCHITECTURE_SECTIONS))
    touch("context/patterns/error-handling.md", markdown_with_sections(PATTERN_SECTIONS))
    touch("context/workflows/deploy.md", markdown_with_sections(WORKFLOW_SECTIONS))
    return tmp_path


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    """Return a minimal valid ctxgraph configuration."""
    return {
        "verify": {
            "context_dir": "context",
        }
    }


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a complete ctxgraph configuration with all options."""
    return {
        "scan": {
            "source_root": "app-src",
            "backend_root": "backend",
        },
        "verify": {
            "context_dir": "docs/context",
            "fail_under": 50,
            "warn_under": 70,
        },
        "ci": {
            "fail_on_warning": True,
            "json_output": False,
        },
    }
