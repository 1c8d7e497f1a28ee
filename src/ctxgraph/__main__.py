"""Entry point for running ctxgraph as a module.

Usage:
    python -m ctxgraph [command] [options]

Example:
    python -m ctxgraph scan --dir path/to/project
    python -m ctxgraph verify --json
"""

from ctxgraph.cli import app

if __name__ == "__main__":
    app()
