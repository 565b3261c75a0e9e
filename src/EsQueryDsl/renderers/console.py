"""Stdout output writer."""

from __future__ import annotations

import click

from EsQueryDsl.renderers.base import OutputWriter


class ConsoleOutputWriter(OutputWriter):
    """Write rendered text to stdout unchanged."""

    def write(self, text: str) -> None:
        click.echo(text, nl=False)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
