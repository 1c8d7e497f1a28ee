"""Pipeline orchestrators.

Two independent, read-only pipelines:
- ProfilePipeline: manifest -> stack detection -> source scan -> backend scan
- VerificationPipeline: structure -> content -> cross-references -> completeness

Every run builds its results from scratch; nothing is carried between runs.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ctxgraph.analyzers import load_manifest, scan_backend, scan_source
from ctxgraph.analyzers.stack_detector import StackDetector
from ctxgraph.config import ContextGraphConfig
from ctxgraph.models import (
    BackendStructure,
    Scores,
    SourceStructure,
    StackProfile,
    VerificationResult,
)
from ctxgraph.models.verification import Finding, Severity
from ctxgraph.utils.logging import get_logger
from ctxgraph.verifiers import (
    ContextLayout,
    calculate_completeness,
    verify_content,
    verify_cross_references,
    verify_structure,
)

logger = get_logger(__name__)


@dataclass
class ProjectProfile:
    """Everything the profiler learned about a project.

    Attributes:
        project_root: Absolute project root
        stack: Technology profile from the manifest
        source: Convention-based source inventory
        backend: Backend and schema inventory
    """

    project_root: Path
    stack: StackProfile
    source: SourceStructure = field(default_factory=SourceStructure)
    backend: BackendStructure = field(default_factory=BackendStructure)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "project_root": str(self.project_root),
            "stack": self.stack.to_dict(),
            "source": self.source.to_dict(),
            "backend": self.backend.to_dict(),
        }


class ProfilePipeline:
    """Profiles a project's stack and source conventions.

    The manifest is required; its absence or a parse failure aborts the
    run. Missing convention folders simply leave categories empty.
    """

    def __init__(
        self,
        config: ContextGraphConfig | None = None,
        detector: StackDetector | None = None,
    ) -> None:
        """Initialize the profile pipeline.

        Args:
            config: ctxgraph configuration (uses defaults if None)
            detector: Stack detector (uses default rule tables if None)
        """
        self.config = config or ContextGraphConfig()
        self._detector = detector or StackDetector()

    def run(
        self,
        project_root: Path,
        source_dir: str | None = None,
        backend_dir: str | None = None,
    ) -> ProjectProfile:
        """Profile a project.

        Args:
            project_root: Project root directory
            source_dir: Source directory override (defaults to config)
            backend_dir: Hosted-backend directory override (defaults to config)

        Returns:
            ProjectProfile

        Raises:
            ManifestNotFoundError: If package.json is missing
            ManifestParseError: If package.json cannot be parsed
            ScanError: If a convention folder cannot be read
        """
        root = project_root.resolve()
        source_dir = source_dir or self.config.scan.source_root
        backend_dir = backend_dir or self.config.scan.backend_root

        logger.info("Profiling project: %s", root)

        deps = load_manifest(root)
        stack = self._detector.detect(deps)
        logger.info(
            "Detected stack: %s (%s)",
            stack.framework or "no framework",
            stack.platform.value,
        )

        source = scan_source(root, stack, source_dir)
        backend = scan_backend(root, backend_dir, source_dir)

        return ProjectProfile(project_root=root, stack=stack, source=source, backend=backend)


class VerificationPipeline:
    """Verifies a project's context graph.

    Phases run in order and each returns its own findings and score; the
    aggregator recomputes completeness from those values on every run.
    """

    def __init__(self, config: ContextGraphConfig | None = None) -> None:
        """Initialize the verification pipeline.

        Args:
            config: ctxgraph configuration (uses defaults if None)
        """
        self.config = config or ContextGraphConfig()

    def run(self, project_dir: Path) -> VerificationResult:
        """Verify the context graph of a project.

        Args:
            project_dir: Project root directory

        Returns:
            VerificationResult. When the documentation root is missing, every
            score is 0 and only that fact is reported.

        Raises:
            ScanError: If a documentation file or folder cannot be read
        """
        layout = ContextLayout(
            project_dir=project_dir.resolve(),
            context_dir_name=self.config.verify.context_dir,
        )
        logger.info("Verifying context graph: %s", layout.context_dir)

        if not layout.exists():
            logger.warning("Documentation root does not exist: %s", layout.context_dir)
            return VerificationResult(
                structure=[
                    Finding.error(f"{layout.context_dir_name}/ directory does not exist")
                ],
            )

        structure = verify_structure(layout)
        content, files = verify_content(layout)
        references = verify_cross_references(layout)

        for phase_name, phase in (
            ("structure", structure),
            ("content", content),
            ("references", references),
        ):
            counts = phase.counts()
            logger.debug(
                "Phase %s: score=%d errors=%d warnings=%d",
                phase_name,
                phase.score,
                counts[Severity.ERROR],
                counts[Severity.WARNING],
            )

        completeness = calculate_completeness(
            structure=structure.score,
            content=content.score,
            references=references.score,
            total_files=files.total,
        )

        result = VerificationResult(
            structure=structure.findings,
            content=content.findings,
            cross_references=references.findings,
            scores=Scores(
                structure=structure.score,
                content=content.score,
                references=references.score,
                completeness=completeness,
            ),
            files=files,
        )

        errors = sum(1 for f in result.all_findings() if f.severity is Severity.ERROR)
        logger.structured(
            logging.INFO,
            f"Scores: structure={structure.score} content={content.score} "
            f"references={references.score} completeness={completeness}",
            errors=errors,
            **result.scores.to_dict(),
        )
        return result


def profile_project(
    project_root: Path,
    config: ContextGraphConfig | None = None,
) -> ProjectProfile:
    """Profile a project with the given (or default) configuration."""
    return ProfilePipeline(config).run(project_root)


def verify_context_graph(
    project_dir: Path,
    config: ContextGraphConfig | None = None,
) -> VerificationResult:
    """Verify a project's context graph with the given (or default) configuration."""
    return VerificationPipeline(config).run(project_dir)
