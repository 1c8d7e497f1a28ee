"""ctxgraph verifiers - documentation graph verification.

Each phase is a pure function of the context graph layout:
- Structure: entry files, documentation root and required folders
- Content: required section headers per document category
- References: dangling file references and orphaned documents
- Scoring: per-phase scores and the weighted completeness score
"""

from ctxgraph.verifiers.content import verify_content
from ctxgraph.verifiers.layout import ContextLayout
from ctxgraph.verifiers.references import verify_cross_references
from ctxgraph.verifiers.scoring import calculate_completeness, calculate_score
from ctxgraph.verifiers.structure import verify_structure

__all__ = [
    "ContextLayout",
    "calculate_completeness",
    "calculate_score",
    "verify_content",
    "verify_cross_references",
    "verify_structure",
]
