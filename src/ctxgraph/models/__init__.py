"""ctxgraph data models.

This module exports all core entities used throughout the application:
- StackProfile, Platform: Technology profile derived from the manifest
- SourceStructure: Convention-based source inventory
- BackendStructure, BackendType: Backend and schema inventory
- Finding, Severity: Single verification observation
- PhaseResult, Scores, DocumentationFiles, VerificationResult: Verifier output
"""

from ctxgraph.models.stack import Platform, StackProfile
from ctxgraph.models.structure import BackendStructure, BackendType, SourceStructure
from ctxgraph.models.verification import (
    DocumentationFiles,
    Finding,
    PhaseResult,
    Scores,
    Severity,
    VerificationResult,
)

__all__ = [
    "BackendStructure",
    "BackendType",
    "DocumentationFiles",
    "Finding",
    "PhaseResult",
    "Platform",
    "Scores",
    "Severity",
    "SourceStructure",
    "StackProfile",
    "VerificationResult",
]
