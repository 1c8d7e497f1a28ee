"""ctxgraph CLI interface.

Commands:
- scan: Profile a project's stack and source conventions
- verify: Verify context graph integrity and completeness

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log lines
- --version: Show version and exit
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from ctxgraph import __version__
from ctxgraph.analyzers.base import ProfilerError
from ctxgraph.config import ContextGraphConfig, load_config
from ctxgraph.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="ctxgraph",
    help="Generate and verify an AI-agent-friendly context graph for your codebase",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: ContextGraphConfig | None = None
_logger = get_logger()

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_WARNING = 2


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"ctxgraph {__version__}")
        raise typer.Exit()


def _current_config() -> ContextGraphConfig:
    return _config or ContextGraphConfig()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON log output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """ctxgraph - context graph profiler and verifier.

    Profiles a codebase for AI coding assistants and scores the
    completeness of its context/ documentation tree.
    """
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(EXIT_FAILURE)
    except (ValueError, OSError) as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(EXIT_FAILURE)


# =============================================================================
# scan command
# =============================================================================


@app.command()
def scan(
    project_dir: Annotated[
        Path,
        typer.Option(
            "--dir",
            "-d",
            help="Project root directory",
            exists=True,
            file_okay=False,
        ),
    ] = Path("."),
    src: Annotated[
        str | None,
        typer.Option(
            "--src",
            help="Source directory relative to project root (overrides config)",
        ),
    ] = None,
    backend: Annotated[
        str | None,
        typer.Option(
            "--backend",
            help="Hosted-backend directory relative to project root (overrides config)",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output the profile as JSON",
        ),
    ] = False,
) -> None:
    """Profile the technology stack and source conventions of a project.

    Exit codes:
        0: Project profiled
        1: Manifest missing or unreadable, or the tree could not be read
    """
    from ctxgraph.pipeline import ProfilePipeline

    config = _current_config()
    pipeline = ProfilePipeline(config=config)

    try:
        profile = pipeline.run(project_dir, source_dir=src, backend_dir=backend)
    except ProfilerError as e:
        _logger.error(f"✗ {e}")
        raise typer.Exit(EXIT_FAILURE)

    if json_output or config.ci.json_output:
        typer.echo(json.dumps(profile.to_dict(), indent=2))
    else:
        from ctxgraph.templates import ReportRenderer

        typer.echo(ReportRenderer().render_scan(profile))

    raise typer.Exit(EXIT_OK)


# =============================================================================
# verify command
# =============================================================================


def exit_code_for(completeness: int, config: ContextGraphConfig) -> int:
    """Map a completeness score to an exit code tier.

    Args:
        completeness: Completeness score 0-100
        config: Configuration with thresholds

    Returns:
        0 at or above warn_under, 2 at or above fail_under, 1 below it
    """
    if completeness >= config.verify.warn_under:
        return EXIT_OK
    if completeness >= config.verify.fail_under:
        return EXIT_FAILURE if config.ci.fail_on_warning else EXIT_WARNING
    return EXIT_FAILURE


@app.command()
def verify(
    project_dir: Annotated[
        Path,
        typer.Option(
            "--dir",
            "-d",
            help="Project root directory",
            exists=True,
            file_okay=False,
        ),
    ] = Path("."),
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output the verification result as JSON",
        ),
    ] = False,
) -> None:
    """Verify context graph integrity and completeness.

    Exit codes:
        0: Completeness at or above verify.warn_under
        1: Completeness below verify.fail_under, or the tree could not be read
        2: Completeness between the two thresholds
    """
    from ctxgraph.pipeline import VerificationPipeline

    config = _current_config()
    pipeline = VerificationPipeline(config=config)

    try:
        result = pipeline.run(project_dir)
    except ProfilerError as e:
        _logger.error(f"✗ {e}")
        raise typer.Exit(EXIT_FAILURE)

    if json_output or config.ci.json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        from ctxgraph.templates import ReportRenderer

        typer.echo(ReportRenderer().render_verification(result, str(project_dir.resolve())))

    raise typer.Exit(exit_code_for(result.completeness, config))


if __name__ == "__main__":
    app()
