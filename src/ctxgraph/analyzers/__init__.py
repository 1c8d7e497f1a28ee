"""ctxgraph analyzers - repository profiling.

Analyzers are read-only passes over the project tree:
- Manifest: package.json loading and dependency merging
- Stack Detector: Rule-based technology profile
- Source Scanner: Convention-based source inventory
- Backend Scanner: Backend, schema and API route inventory
"""

from ctxgraph.analyzers.backend_scanner import BackendScanner, scan_backend
from ctxgraph.analyzers.base import (
    ManifestNotFoundError,
    ManifestParseError,
    ProfilerError,
    ScanError,
)
from ctxgraph.analyzers.conventions import Convention, first_match
from ctxgraph.analyzers.manifest import load_manifest
from ctxgraph.analyzers.source_scanner import SourceScanner, scan_source
from ctxgraph.analyzers.stack_detector import StackDetector, detect_stack

__all__ = [
    "BackendScanner",
    "Convention",
    "ManifestNotFoundError",
    "ManifestParseError",
    "ProfilerError",
    "ScanError",
    "SourceScanner",
    "StackDetector",
    "detect_stack",
    "first_match",
    "load_manifest",
    "scan_backend",
    "scan_source",
]
