"""Content completeness scoring for context graph documents.

Each documentation category carries an ordered list of required section
headers. A section counts as present when a markdown heading (``#`` to
``####``) at the start of a line begins with the section name,
case-insensitively.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ctxgraph.analyzers.conventions import list_dir
from ctxgraph.models.verification import DocumentationFiles, Finding, PhaseResult
from ctxgraph.verifiers.layout import (
    DOMAIN_CONTEXT_FILE,
    MARKDOWN_SUFFIX,
    ContextLayout,
    read_markdown,
)
from ctxgraph.verifiers.scoring import calculate_score, round_half_up

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS: dict[str, tuple[str, ...]] = {
    "domain": (
        "Purpose",
        "Key Entities",
        "Business Rules",
        "Code Locations",
        "Dependencies",
        "Common Gotchas",
    ),
    "architecture": (
        "Overview",
        "Configuration",
        "Code Locations",
        "Error Handling",
        "Dependencies",
    ),
    "pattern": (
        "Overview",
        "When to Use",
        "Standard Implementation",
        "Best Practices",
        "Anti-Patterns",
    ),
    "workflow": (
        "Overview",
        "Prerequisites",
        "Workflow Steps",
        "Checklist",
        "Troubleshooting",
    ),
}

# Below 100% but at least this share of sections is a warning, not an error
WARNING_THRESHOLD = 75


@dataclass(frozen=True)
class DocumentCategory:
    """A documentation category and how to report it.

    Attributes:
        kind: Key into REQUIRED_SECTIONS
        directory: Folder under the documentation root
        found_label: Noun used in the "Found N ..." summary
        missing_message: Warning emitted when the folder holds no files
    """

    kind: str
    directory: str
    found_label: str
    missing_message: str


CATEGORIES: tuple[DocumentCategory, ...] = (
    DocumentCategory(
        "domain", "domains", "domain context file(s)", "No domain context files found"
    ),
    DocumentCategory(
        "architecture",
        "architecture",
        "architecture file(s)",
        "No architecture context files found",
    ),
    DocumentCategory(
        "pattern", "patterns", "pattern file(s)", "No pattern documentation files found"
    ),
    DocumentCategory(
        "workflow", "workflows", "workflow file(s)", "No workflow documentation files found"
    ),
)


def has_section(text: str, section: str) -> bool:
    """Check for a line-anchored markdown heading starting with ``section``."""
    pattern = re.compile(rf"^#{{1,4}}\s*{re.escape(section)}", re.IGNORECASE | re.MULTILINE)
    return pattern.search(text) is not None


def check_sections(text: str, kind: str, name: str) -> Finding:
    """Score one document against its category's required sections.

    Args:
        text: Document contents
        kind: Category key (domain, architecture, pattern, workflow)
        name: Reporting name of the document

    Returns:
        success when all sections are present, warning at 75% or more,
        error otherwise
    """
    required = REQUIRED_SECTIONS[kind]
    found = sum(1 for section in required if has_section(text, section))
    total = len(required)
    percentage = round_half_up(found / total * 100)

    if found == total:
        return Finding.success(f"{name}: all {total} required sections present")
    if percentage >= WARNING_THRESHOLD:
        return Finding.warning(f"{name}: {found}/{total} sections found ({percentage}%)")
    return Finding.error(f"{name}: only {found}/{total} sections found ({percentage}%)")


def collect_domain_files(domains_dir: Path) -> list[tuple[str, Path]]:
    """Domain documents in either layout.

    Flat ``domains/<name>.md`` files are reported by file name; nested
    ``domains/<name>/CONTEXT.md`` files as ``<name>/CONTEXT.md``.
    """
    documents: list[tuple[str, Path]] = []
    for entry in list_dir(domains_dir) or []:
        if entry.is_dir():
            context_file = entry / DOMAIN_CONTEXT_FILE
            if context_file.is_file():
                documents.append((f"{entry.name}/{DOMAIN_CONTEXT_FILE}", context_file))
        elif entry.name.endswith(MARKDOWN_SUFFIX):
            documents.append((entry.name, entry))
    return documents


def collect_flat_files(category_dir: Path) -> list[tuple[str, Path]]:
    """Markdown files directly inside a category folder."""
    return [
        (entry.name, entry)
        for entry in list_dir(category_dir) or []
        if entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX)
    ]


def verify_content(layout: ContextLayout) -> tuple[PhaseResult, DocumentationFiles]:
    """Check required sections in every categorized document.

    A category folder that does not exist emits no findings at all.

    Args:
        layout: Context graph layout

    Returns:
        Tuple of (phase result, discovered documentation files)
    """
    findings: list[Finding] = []
    files = DocumentationFiles()
    inventories = {
        "domain": files.domains,
        "architecture": files.architectures,
        "pattern": files.patterns,
        "workflow": files.workflows,
    }

    for category in CATEGORIES:
        category_dir = layout.context_dir / category.directory
        if not category_dir.is_dir():
            logger.debug("Skipping missing category folder: %s", category_dir)
            continue

        if category.kind == "domain":
            documents = collect_domain_files(category_dir)
        else:
            documents = collect_flat_files(category_dir)

        inventories[category.kind].extend(name for name, _ in documents)

        if not documents:
            findings.append(Finding.warning(category.missing_message))
            continue

        findings.append(Finding.success(f"Found {len(documents)} {category.found_label}"))
        for name, path in documents:
            findings.append(check_sections(read_markdown(path), category.kind, name))

    score = calculate_score(findings)
    logger.debug("Content verification: %d document(s), score %d", files.total, score)
    return PhaseResult(findings=findings, score=score), files
