"""ctxgraph - Context graph profiler and verifier.

ctxgraph inspects a project's manifest and source tree to infer its
technology profile, and scores the completeness and internal consistency of
the ``context/`` documentation tree that feeds project knowledge to AI
coding assistants.

Core principles:
- Read-only: every run treats the filesystem as a snapshot
- Stateless: nothing is persisted between runs
- Deterministic: same tree produces the same profile and scores
- CI/CD Compatibility: No interactive prompts, meaningful exit codes
"""

__version__ = "1.0.0"
__author__ = "ctxgraph Contributors"
