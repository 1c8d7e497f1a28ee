"""Fixed layout of a context graph.

The documentation root (``context/`` by default) sits in the project root
next to the AI-tool entry files.
"""

from dataclasses import dataclass
from pathlib import Path

from ctxgraph.analyzers.base import ScanError

MASTER_FILE = "AGENTS.md"
ROOT_FILES = ("AGENTS.md", "CLAUDE.md", ".cursorrules")

# Entry files that must mention MASTER_FILE
MASTER_REFERRERS = ("CLAUDE.md", ".cursorrules")

# Entry files consulted by orphan detection
ENTRY_POINTS = ("CLAUDE.md", "AGENTS.md")

REQUIRED_SUBDIRS = ("templates",)
TEMPLATES_DIR = "templates"

DOMAIN_CONTEXT_FILE = "CONTEXT.md"
MARKDOWN_SUFFIX = ".md"


@dataclass(frozen=True)
class ContextLayout:
    """Resolved paths of a project's context graph.

    Attributes:
        project_dir: Project root (holds the entry files)
        context_dir_name: Documentation root relative to the project root
    """

    project_dir: Path
    context_dir_name: str = "context"

    @property
    def context_dir(self) -> Path:
        return self.project_dir / self.context_dir_name

    def exists(self) -> bool:
        """Check whether the documentation root is a directory."""
        return self.context_dir.is_dir()

    def entry_file(self, name: str) -> Path:
        return self.project_dir / name


def read_markdown(path: Path) -> str:
    """Read a documentation file.

    Undecodable bytes are replaced; unreadable files are fatal.

    Raises:
        ScanError: If the file cannot be read
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except PermissionError as e:
        raise ScanError(path, "permission denied") from e
