"""Score aggregation shared by every verification phase.

Phase score: success findings carry full weight, warnings half weight,
errors and info items none, normalized by the number of findings:

    score = round(100 * (10 * successes + 5 * warnings) / (10 * total))

Completeness blends the phase scores with a documentation-volume signal:

    completeness = round(0.25 * structure + 0.35 * content
                         + 0.20 * references + 0.20 * volume)
"""

import math
from collections.abc import Iterable

from ctxgraph.models.verification import Finding, Severity

SUCCESS_POINTS = 10
WARNING_POINTS = 5

COMPLETENESS_WEIGHTS = {
    "structure": 25,
    "content": 35,
    "references": 20,
    "volume": 20,
}

# Number of documentation files at which the volume signal saturates
VOLUME_TARGET = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def calculate_score(findings: Iterable[Finding]) -> int:
    """Score a phase from its findings.

    Args:
        findings: Findings emitted by one phase

    Returns:
        Score 0-100; 0 when there are no findings
    """
    items = list(findings)
    if not items:
        return 0

    successes = sum(1 for f in items if f.severity is Severity.SUCCESS)
    warnings = sum(1 for f in items if f.severity is Severity.WARNING)

    earned = successes * SUCCESS_POINTS + warnings * WARNING_POINTS
    maximum = len(items) * SUCCESS_POINTS
    return round_half_up(earned / maximum * 100)


def volume_score(total_files: int) -> float:
    """Documentation breadth signal, capped at 100 from VOLUME_TARGET files."""
    return min(total_files / VOLUME_TARGET * 100, 100.0)


def calculate_completeness(
    structure: int,
    content: int,
    references: int,
    total_files: int,
) -> int:
    """Weighted completeness score.

    Args:
        structure: Structure phase score
        content: Content phase score
        references: Cross-reference phase score
        total_files: Number of categorized documentation files

    Returns:
        Completeness score 0-100
    """
    weighted = (
        structure / 100 * COMPLETENESS_WEIGHTS["structure"]
        + content / 100 * COMPLETENESS_WEIGHTS["content"]
        + references / 100 * COMPLETENESS_WEIGHTS["references"]
        + volume_score(total_files) / 100 * COMPLETENESS_WEIGHTS["volume"]
    )
    return round_half_up(weighted)
