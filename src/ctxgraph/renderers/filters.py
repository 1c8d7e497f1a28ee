"""Jinja2 filters for the text reports.

Filters turn finding severities and scores into the icons, bars and
health labels shown in the verification report.
"""

from ctxgraph.models.verification import Severity

SEVERITY_ICONS: dict[Severity, str] = {
    Severity.SUCCESS: "✓",
    Severity.ERROR: "✗",
    Severity.WARNING: "⚠",
    Severity.INFO: "ℹ",
}

# (minimum score, label, marker), checked top-down
HEALTH_TIERS: tuple[tuple[int, str, str], ...] = (
    (90, "Excellent", "🟢"),
    (80, "Good", "🟡"),
    (70, "Fair", "🟠"),
    (0, "Needs Work", "🔴"),
)

BAR_WIDTH = 20


def severity_icon(severity: Severity | str) -> str:
    """Icon for a finding severity (accepts the enum or its value)."""
    if isinstance(severity, str):
        try:
            severity = Severity(severity)
        except ValueError:
            return "•"
    return SEVERITY_ICONS.get(severity, "•")


def score_bar(score: int, width: int = BAR_WIDTH) -> str:
    """Render a score as a fixed-width bar, one cell per 100/width points."""
    clamped = max(0, min(score, 100))
    filled = int(clamped * width / 100 + 0.5)
    return "█" * filled + "░" * (width - filled)


def health_status(score: int) -> str:
    """Health label with marker, e.g. ``🟢 Excellent``."""
    for minimum, label, marker in HEALTH_TIERS:
        if score >= minimum:
            return f"{marker} {label}"
    return f"{HEALTH_TIERS[-1][2]} {HEALTH_TIERS[-1][1]}"


def join_or(values: list[str] | tuple[str, ...], fallback: str = "-") -> str:
    """Comma-join a list, or return ``fallback`` when it is empty."""
    return ", ".join(values) if values else fallback
