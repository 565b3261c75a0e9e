"""Output writers for rendered query bodies.

Provides the OutputWriter base class and a factory that picks stdout or a
file based on configuration.
"""

from __future__ import annotations

from EsQueryDsl.config import AppConfig
from EsQueryDsl.renderers.base import OutputWriter
from EsQueryDsl.renderers.console import ConsoleOutputWriter
from EsQueryDsl.renderers.file import FileOutputWriter


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        FileOutputWriter when ``output.path`` is set, otherwise ConsoleOutputWriter.
    """
    if config.output.path.strip():
        return FileOutputWriter(config.output.path)
    return ConsoleOutputWriter()


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "FileOutputWriter",
    "create_output_writer",
]
