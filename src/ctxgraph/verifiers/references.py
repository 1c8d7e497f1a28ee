"""Cross-reference and orphan analysis of a context graph.

Reference extraction looks for path-shaped tokens rooted at a common source
folder name (``src/...``, ``lib/...``, ``components/...``) and checks each
one against the project tree.

Orphan detection is a name-mention heuristic: a document is reachable when
its stem or file name appears anywhere in another document or in one of the
root entry files. It does not follow links from an entry point, so two
documents that only mention each other are both reported as reachable.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from ctxgraph.analyzers.base import ScanError
from ctxgraph.models.verification import Finding, PhaseResult
from ctxgraph.verifiers.layout import (
    ENTRY_POINTS,
    MARKDOWN_SUFFIX,
    TEMPLATES_DIR,
    ContextLayout,
    read_markdown,
)
from ctxgraph.verifiers.scoring import calculate_score

logger = logging.getLogger(__name__)

REFERENCE_ROOTS = (
    "src",
    "lib",
    "tests?",
    "components?",
    "utils?",
    "services?",
    "models?",
    "views?",
)
FILE_REFERENCE_PATTERN = re.compile(
    rf"\b(?:{'|'.join(REFERENCE_ROOTS)})/[\w\-./]+\.\w+"
)


@dataclass(frozen=True)
class ContextDocument:
    """A live documentation file and its text."""

    path: Path
    text: str

    @property
    def stem(self) -> str:
        return self.path.stem

    @property
    def name(self) -> str:
        return self.path.name


def find_context_files(context_dir: Path) -> list[Path]:
    """All markdown files under the documentation root, sorted.

    Any folder named ``templates`` is skipped; templates are not live content.

    Raises:
        ScanError: If a folder cannot be read
    """

    def on_error(error: OSError) -> None:
        raise ScanError(Path(error.filename or context_dir), error.strerror or str(error))

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(context_dir, onerror=on_error):
        dirnames[:] = sorted(d for d in dirnames if d != TEMPLATES_DIR)
        files.extend(
            Path(dirpath) / name for name in filenames if name.endswith(MARKDOWN_SUFFIX)
        )
    return sorted(files)


def extract_references(text: str) -> list[str]:
    """Path-shaped references in document text, in order of appearance."""
    return FILE_REFERENCE_PATTERN.findall(text)


def check_file_references(
    documents: list[ContextDocument],
    project_dir: Path,
) -> list[Finding]:
    """Validate every path reference against the project tree.

    Args:
        documents: Live documentation files
        project_dir: Root that references resolve against

    Returns:
        One warning per broken reference followed by the summary findings
    """
    findings: list[Finding] = []
    valid = 0
    broken = 0

    for document in documents:
        for reference in extract_references(document.text):
            if (project_dir / reference).exists():
                valid += 1
            else:
                broken += 1
                findings.append(
                    Finding.warning(
                        f"{document.name}: references non-existent file {reference}"
                    )
                )

    if valid > 0:
        findings.append(Finding.success(f"{valid} valid file reference(s) found"))

    if broken == 0 and valid > 0:
        findings.append(Finding.success("No broken file references detected"))
    elif broken > 0:
        findings.append(Finding.warning(f"{broken} broken file reference(s) detected"))

    logger.debug("File references: %d valid, %d broken", valid, broken)
    return findings


def _mentions(text: str, document: ContextDocument) -> bool:
    return document.stem in text or document.name in text


def find_orphans(
    documents: list[ContextDocument],
    entry_texts: list[str],
) -> list[ContextDocument]:
    """Documents not mentioned by any other document or entry file.

    Args:
        documents: Live documentation files
        entry_texts: Contents of the root entry files that exist

    Returns:
        Orphaned documents in input order
    """
    orphans: list[ContextDocument] = []
    for document in documents:
        referenced = any(
            _mentions(other.text, document)
            for other in documents
            if other.path != document.path
        ) or any(_mentions(text, document) for text in entry_texts)

        if not referenced:
            orphans.append(document)
    return orphans


def verify_cross_references(layout: ContextLayout) -> PhaseResult:
    """Check file references and orphaned documents.

    Args:
        layout: Context graph layout

    Returns:
        PhaseResult; orphan paths are reported as info findings
    """
    documents = [
        ContextDocument(path=path, text=read_markdown(path))
        for path in find_context_files(layout.context_dir)
    ]

    findings = check_file_references(documents, layout.project_dir)

    entry_texts = [
        read_markdown(layout.entry_file(name))
        for name in ENTRY_POINTS
        if layout.entry_file(name).is_file()
    ]
    orphans = find_orphans(documents, entry_texts)

    if not orphans:
        findings.append(Finding.success("No orphaned context files detected"))
    else:
        findings.append(Finding.warning(f"{len(orphans)} orphaned context file(s) detected"))
        findings.extend(
            Finding.info(orphan.path.relative_to(layout.context_dir).as_posix())
            for orphan in orphans
        )

    score = calculate_score(findings)
    logger.debug(
        "Cross-reference verification: %d document(s), %d orphan(s), score %d",
        len(documents),
        len(orphans),
        score,
    )
    return PhaseResult(findings=findings, score=score)
