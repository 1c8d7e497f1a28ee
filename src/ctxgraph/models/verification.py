"""Verification result entities.

This module contains entities produced by the documentation graph verifier:
- Severity: Finding severity levels
- Finding: One atomic verification observation
- PhaseResult: Findings and score of a single verification phase
- Scores: Per-phase scores plus the weighted completeness score
- DocumentationFiles: Documentation files discovered per category
- VerificationResult: Aggregate for one verification run
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity of a verification finding."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Finding:
    """Single verification observation.

    Attributes:
        severity: How the observation affects scoring
        message: Human-readable description
    """

    severity: Severity
    message: str

    @classmethod
    def success(cls, message: str) -> "Finding":
        return cls(Severity.SUCCESS, message)

    @classmethod
    def warning(cls, message: str) -> "Finding":
        return cls(Severity.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "Finding":
        return cls(Severity.ERROR, message)

    @classmethod
    def info(cls, message: str) -> "Finding":
        return cls(Severity.INFO, message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"type": self.severity.value, "message": self.message}


@dataclass
class DocumentationFiles:
    """Documentation file names discovered per category.

    Domain files in the nested layout are reported as ``<domain>/CONTEXT.md``.
    """

    domains: list[str] = field(default_factory=list)
    architectures: list[str] = field(default_factory=list)
    patterns: list[str] = field(default_factory=list)
    workflows: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Total number of categorized documentation files."""
        return (
            len(self.domains)
            + len(self.architectures)
            + len(self.patterns)
            + len(self.workflows)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "domains": list(self.domains),
            "architectures": list(self.architectures),
            "patterns": list(self.patterns),
            "workflows": list(self.workflows),
        }


@dataclass
class PhaseResult:
    """Output of one verification phase.

    Attributes:
        findings: Ordered findings emitted by the phase
        score: Phase score (0-100)
    """

    findings: list[Finding] = field(default_factory=list)
    score: int = 0

    def counts(self) -> Counter[Severity]:
        """Count findings by severity."""
        return Counter(finding.severity for finding in self.findings)


@dataclass
class Scores:
    """Verification scores, each an integer 0-100."""

    structure: int = 0
    content: int = 0
    references: int = 0
    completeness: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "structure": self.structure,
            "content": self.content,
            "references": self.references,
            "completeness": self.completeness,
        }


@dataclass
class VerificationResult:
    """Aggregate result of one verification run.

    Informational findings (orphan listings) live inside ``cross_references``.

    Attributes:
        structure: Structural verifier findings
        content: Content completeness findings
        cross_references: Cross-reference and orphan findings
        scores: Phase scores and weighted completeness
        files: Documentation files discovered per category
    """

    structure: list[Finding] = field(default_factory=list)
    content: list[Finding] = field(default_factory=list)
    cross_references: list[Finding] = field(default_factory=list)
    scores: Scores = field(default_factory=Scores)
    files: DocumentationFiles = field(default_factory=DocumentationFiles)

    @property
    def completeness(self) -> int:
        """Shortcut for the weighted completeness score."""
        return self.scores.completeness

    def all_findings(self) -> list[Finding]:
        """All findings in report order."""
        return [*self.structure, *self.content, *self.cross_references]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "structure": [f.to_dict() for f in self.structure],
            "content": [f.to_dict() for f in self.content],
            "crossReferences": [f.to_dict() for f in self.cross_references],
            "scores": self.scores.to_dict(),
            "files": self.files.to_dict(),
        }
