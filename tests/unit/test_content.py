"""Unit tests for content completeness scoring."""

from pathlib import Path

import pytest

from ctxgraph.models import Severity
from ctxgraph.verifiers import ContextLayout, verify_content
from ctxgraph.verifiers.content import check_sections, has_section
from tests.fixtures import DOMAIN_SECTIONS, PATTERN_SECTIONS, markdown_with_sections


class TestHasSection:
    """Tests for heading detection."""

    @pytest.mark.parametrize(
        "text",
        [
            "# Purpose\n",
            "## purpose of this domain\n",
            "#### PURPOSE\n",
            "intro\n###Purpose\n",
        ],
    )
    def test_matches(self, text: str) -> None:
        """Test line-anchored, case-insensitive heading prefixes."""
        assert has_section(text, "Purpose")

    @pytest.mark.parametrize(
        "text",
        [
            "Purpose\n",
            "##### Purpose\n",
            "  ## Purpose\n",
            "## The Purpose\n",
        ],
    )
    def test_rejects(self, text: str) -> None:
        """Test that plain text, deep headings and mid-line text do not count."""
        assert not has_section(text, "Purpose")


class TestCheckSections:
    """Tests for per-file classification."""

    def test_all_sections(self) -> None:
        """Test a complete domain file."""
        finding = check_sections(markdown_with_sections(DOMAIN_SECTIONS), "domain", "auth.md")

        assert finding.severity is Severity.SUCCESS
        assert finding.message == "auth.md: all 6 required sections present"

    def test_four_of_five_is_warning(self) -> None:
        """Test that 80% coverage is a warning."""
        text = markdown_with_sections(PATTERN_SECTIONS[:4])

        finding = check_sections(text, "pattern", "retry.md")

        assert finding.severity is Severity.WARNING
        assert finding.message == "retry.md: 4/5 sections found (80%)"

    def test_four_of_six_is_error(self) -> None:
        """Test that 67% coverage falls below the warning threshold."""
        text = markdown_with_sections(DOMAIN_SECTIONS[:4])

        finding = check_sections(text, "domain", "auth.md")

        assert finding.severity is Severity.ERROR
        assert "4/6" in finding.message
        assert "67%" in finding.message

    def test_no_sections(self) -> None:
        """Test an empty document."""
        finding = check_sections("", "workflow", "deploy.md")

        assert finding.message == "deploy.md: only 0/5 sections found (0%)"


class TestVerifyContent:
    """Tests for verify_content."""

    def test_healthy_graph(self, context_graph: Path) -> None:
        """Test that complete documents in every category score 100."""
        result, files = verify_content(ContextLayout(context_graph))

        assert result.score == 100
        assert files.domains == ["auth/CONTEXT.md"]
        assert files.architectures == ["overview.md"]
        assert files.patterns == ["error-handling.md"]
        assert files.workflows == ["deploy.md"]
        assert files.total == 4
        assert result.findings[0].message == "Found 1 domain context file(s)"

    def test_flat_and_nested_domains(self, tmp_path: Path, touch) -> None:
        """Test both domain layouts in one folder."""
        touch("context/domains/billing.md", markdown_with_sections(DOMAIN_SECTIONS))
        touch("context/domains/auth/CONTEXT.md", markdown_with_sections(DOMAIN_SECTIONS))
        touch("context/domains/empty/notes.txt")

        _, files = verify_content(ContextLayout(tmp_path))

        assert files.domains == ["auth/CONTEXT.md", "billing.md"]

    def test_missing_category_has_no_findings(self, tmp_path: Path, touch) -> None:
        """Test that an absent category folder is silently skipped."""
        touch("context/patterns/retry.md", markdown_with_sections(PATTERN_SECTIONS))

        result, files = verify_content(ContextLayout(tmp_path))

        assert [f.message for f in result.findings] == [
            "Found 1 pattern file(s)",
            "retry.md: all 5 required sections present",
        ]
        assert files.total == 1

    def test_empty_category_is_warning(self, tmp_path: Path) -> None:
        """Test that an existing but empty folder emits one warning."""
        (tmp_path / "context" / "workflows").mkdir(parents=True)

        result, _ = verify_content(ContextLayout(tmp_path))

        assert len(result.findings) == 1
        assert result.findings[0].severity is Severity.WARNING
        assert result.findings[0].message == "No workflow documentation files found"
        assert result.score == 50

    def test_incomplete_domain_file(self, tmp_path: Path, touch) -> None:
        """Test a domain file missing two of six sections."""
        touch("context/domains/auth/CONTEXT.md", markdown_with_sections(DOMAIN_SECTIONS[:4]))

        result, _ = verify_content(ContextLayout(tmp_path))
        finding = result.findings[-1]

        assert finding.severity is Severity.ERROR
        assert finding.message == "auth/CONTEXT.md: only 4/6 sections found (67%)"
        assert result.score == 50
