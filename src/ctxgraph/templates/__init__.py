"""ctxgraph report rendering.

This module provides Jinja2-based rendering of the scan summary and the
verification report. Output is deterministic for identical input.
"""

from ctxgraph.templates.renderer import ReportRenderer

__all__ = ["ReportRenderer"]
