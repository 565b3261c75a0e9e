"""File output writer."""

from __future__ import annotations

from pathlib import Path

from EsQueryDsl.renderers.base import OutputWriter
from EsQueryDsl.utils.log import log


class FileOutputWriter(OutputWriter):
    """Accumulate text and write it to a file on finalize.

    Nothing is written when the command fails before ``finalize``, so a
    failed batch never leaves a partial file behind.
    """

    def __init__(self, path: str) -> None:
        """Initialize file writer.

        Args:
            path: Output file path; parent directories are created on finalize.
        """
        self.path = Path(path)
        self.chunks: list[str] = []

    def write(self, text: str) -> None:
        self.chunks.append(text)

    def finalize(self, action: str) -> None:
        """Write accumulated text.

        Args:
            action: The CLI command name, used only for logging.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("".join(self.chunks), encoding="utf-8")
        log.info("%s output saved to %s", action, self.path)
