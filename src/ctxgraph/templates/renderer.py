"""Report renderer for scan summaries and verification reports.

Renders models to plain text using Jinja2 templates shipped in this package.
"""

import logging
from typing import Any

from jinja2 import Environment, PackageLoader, TemplateNotFound

from ctxgraph.models.verification import VerificationResult
from ctxgraph.pipeline import ProjectProfile
from ctxgraph.renderers.filters import health_status, join_or, score_bar, severity_icon

logger = logging.getLogger(__name__)

VERIFY_TEMPLATE = "verify_report.txt.j2"
SCAN_TEMPLATE = "scan_summary.txt.j2"


class ReportRenderer:
    """Renders ctxgraph results to human-readable text.

    Usage:
        renderer = ReportRenderer()
        text = renderer.render_verification(result)
    """

    def __init__(self) -> None:
        self._env = Environment(
            loader=PackageLoader("ctxgraph", "templates"),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._env.filters["severity_icon"] = severity_icon
        self._env.filters["score_bar"] = score_bar
        self._env.filters["health_status"] = health_status
        self._env.filters["join_or"] = join_or

    def _render(self, template_name: str, context: dict[str, Any]) -> str:
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            logger.error("Failed to load template %s", template_name)
            raise ValueError(f"Template not found: {template_name}") from e

        rendered = template.render(**context)
        logger.debug("Rendered %s (%d characters)", template_name, len(rendered))
        return rendered

    def render_verification(self, result: VerificationResult, project_dir: str = "") -> str:
        """Render the verification report.

        Args:
            result: Verification result
            project_dir: Project directory shown in the header

        Returns:
            Report text
        """
        phases = [
            ("Structure Verification", result.structure),
            ("Content Verification", result.content),
            ("Cross-Reference Verification", result.cross_references),
        ]
        scores = [
            ("Structure", result.scores.structure),
            ("Content", result.scores.content),
            ("References", result.scores.references),
            ("Overall Completeness", result.scores.completeness),
        ]
        return self._render(
            VERIFY_TEMPLATE,
            {
                "project_dir": project_dir,
                "phases": phases,
                "scores": scores,
                "completeness": result.scores.completeness,
                "files": result.files,
            },
        )

    def render_scan(self, profile: ProjectProfile) -> str:
        """Render the scan summary.

        Args:
            profile: Project profile

        Returns:
            Summary text
        """
        return self._render(
            SCAN_TEMPLATE,
            {
                "project_root": str(profile.project_root),
                "stack": profile.stack,
                "source": profile.source,
                "backend": profile.backend,
            },
        )
