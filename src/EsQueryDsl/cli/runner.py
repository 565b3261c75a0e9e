"""Command runner for coordinating CLI execution.

Configures logging, builds the output writer, and turns failures into
``click.Abort`` at the CLI boundary.
"""

from __future__ import annotations

import click

from EsQueryDsl.cli.commands import BodyCommand, MultiSearchCommand
from EsQueryDsl.config import AppConfig
from EsQueryDsl.core.errors import QueryTypeError
from EsQueryDsl.renderers import create_output_writer
from EsQueryDsl.utils.log import configure_logging, log

_FORMAT_TO_ACTION = {"body": "body", "ndjson": "msearch"}


class CommandRunner:
    """Orchestrates command execution with logging and error handling."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run(self, action: str) -> None:
        """Render the configured documents for one action.

        Args:
            action: ``body``, ``msearch``, or ``render`` (follows ``output.format``).

        Raises:
            click.Abort: When rendering or writing fails.
        """
        if action == "render":
            action = _FORMAT_TO_ACTION[self.config.output.format]
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        docs = self.config.queries.docs
        try:
            output_writer = create_output_writer(self.config)
            if action == "msearch":
                command: BodyCommand | MultiSearchCommand = MultiSearchCommand(docs, output_writer)
            else:
                command = BodyCommand(docs, output_writer)
            command.execute()
            output_writer.finalize(action)
        except QueryTypeError as e:
            log.error("Unsupported query type %s in configured queries", e.query_type)
            raise click.Abort from e
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Render failed: %s", e)
            raise click.Abort from e
