"""Structural verification of a context graph.

Checks the fixed layout: AI-tool entry files in the project root, the
documentation root and its required subdirectories, plus two soft
reference-integrity checks that the tool entry files point at AGENTS.md.
"""

import logging

from ctxgraph.analyzers.conventions import list_dir
from ctxgraph.models.verification import Finding, PhaseResult
from ctxgraph.verifiers.layout import (
    MARKDOWN_SUFFIX,
    MASTER_FILE,
    MASTER_REFERRERS,
    REQUIRED_SUBDIRS,
    ROOT_FILES,
    TEMPLATES_DIR,
    ContextLayout,
    read_markdown,
)
from ctxgraph.verifiers.scoring import calculate_score

logger = logging.getLogger(__name__)


def verify_structure(layout: ContextLayout) -> PhaseResult:
    """Run the structural checks.

    Args:
        layout: Context graph layout

    Returns:
        PhaseResult with one finding per check
    """
    findings: list[Finding] = []

    for name in ROOT_FILES:
        if layout.entry_file(name).exists():
            findings.append(Finding.success(f"{name} exists in project root"))
        else:
            findings.append(Finding.error(f"{name} missing in project root"))

    for name in MASTER_REFERRERS:
        path = layout.entry_file(name)
        if not path.is_file():
            continue
        if MASTER_FILE in read_markdown(path):
            findings.append(Finding.success(f"{name} references {MASTER_FILE}"))
        else:
            findings.append(Finding.warning(f"{name} does not reference {MASTER_FILE}"))

    context_name = layout.context_dir_name
    if not layout.exists():
        findings.append(Finding.error(f"{context_name}/ directory does not exist"))
        return PhaseResult(findings=findings, score=calculate_score(findings))

    findings.append(Finding.success(f"{context_name}/ directory exists"))

    for subdir in REQUIRED_SUBDIRS:
        if (layout.context_dir / subdir).is_dir():
            findings.append(Finding.success(f"{context_name}/{subdir}/ directory exists"))
        else:
            findings.append(Finding.warning(f"{context_name}/{subdir}/ directory missing"))

    templates = list_dir(layout.context_dir / TEMPLATES_DIR)
    if templates is not None:
        template_count = sum(
            1 for entry in templates if entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX)
        )
        if template_count:
            findings.append(
                Finding.success(
                    f"{context_name}/{TEMPLATES_DIR}/ has {template_count} template file(s)"
                )
            )
        else:
            findings.append(
                Finding.warning(f"{context_name}/{TEMPLATES_DIR}/ directory is empty")
            )

    score = calculate_score(findings)
    logger.debug("Structure verification: %d finding(s), score %d", len(findings), score)
    return PhaseResult(findings=findings, score=score)
