"""Command implementations for EsQueryDsl CLI.

Each command renders the configured query documents and hands the text to an
OutputWriter. Rendering finishes before anything is written, so a failing
document produces no output at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from EsQueryDsl.core.query import QueryDoc
from EsQueryDsl.renderers import OutputWriter
from EsQueryDsl.serializer import multi_search_doc, render_query_doc
from EsQueryDsl.utils.log import log


@dataclass(slots=True)
class BodyCommand:
    """Render each document body on its own line."""

    docs: Sequence[QueryDoc]
    output_writer: OutputWriter

    def execute(self) -> None:
        lines: list[str] = []
        for idx, doc in enumerate(self.docs, start=1):
            log.debug("Rendering body %d/%d index=%s", idx, len(self.docs), doc.index)
            lines.append(render_query_doc(doc) + "\n")
        self.output_writer.write("".join(lines))
        log.info("Rendered %d query bodies", len(lines))


@dataclass(slots=True)
class MultiSearchCommand:
    """Render all documents as one multi-search NDJSON batch."""

    docs: Sequence[QueryDoc]
    output_writer: OutputWriter

    def execute(self) -> None:
        payload = multi_search_doc(self.docs)
        self.output_writer.write(payload)
        log.info("Rendered multi-search batch with %d documents", len(self.docs))
