"""Test fixtures for ctxgraph.

Section lists and markdown builders shared by the verifier tests. Projects
themselves are built per test in tmp_path (see tests/conftest.py).
"""

DOMAIN_SECTIONS = (
    "Purpose",
    "Key Entities",
    "Business Rules",
    "Code Locations",
    "Dependencies",
    "Common Gotchas",
)
ARCHITECTURE_SECTIONS = (
    "Overview",
    "Configuration",
    "Code Locations",
    "Error Handling",
    "Dependencies",
)
PATTERN_SECTIONS = (
    "Overview",
    "When to Use",
    "Standard Implementation",
    "Best Practices",
    "Anti-Patterns",
)
WORKFLOW_SECTIONS = (
    "Overview",
    "Prerequisites",
    "Workflow Steps",
    "Checklist",
    "Troubleshooting",
)


def markdown_with_sections(sections: tuple[str, ...] | list[str], title: str = "Doc") -> str:
    """Build a markdown document with one ``##`` heading per section.

    Args:
        sections: Section names to include
        title: Top-level heading

    Returns:
        Markdown text
    """
    lines = [f"# {title}", ""]
    for section in sections:
        lines.extend([f"## {section}", "", "Details.", ""])
    return "\n".join(lines)
