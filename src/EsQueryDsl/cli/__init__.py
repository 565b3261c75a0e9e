"""CLI package for EsQueryDsl."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from EsQueryDsl.cli.runner import CommandRunner
from EsQueryDsl.cli.ui import cli


def main() -> None:
    """Run EsQueryDsl CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
