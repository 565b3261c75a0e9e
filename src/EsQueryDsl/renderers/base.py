"""Base class for output writers.

Commands produce text; writers decide where it goes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Write a chunk of rendered text.

        Args:
            text: Rendered text, already newline-terminated.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., flush accumulated text to a file).

        Args:
            action: The CLI command name (e.g., 'msearch').
        """
