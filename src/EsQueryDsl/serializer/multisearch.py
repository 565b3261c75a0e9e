"""Multi-search (NDJSON) batch assembly."""

from __future__ import annotations

from typing import Iterable

from EsQueryDsl.core.query import QueryDoc
from EsQueryDsl.serializer.body import dumps, query_doc_body
from EsQueryDsl.utils.log import log


def multi_search_doc(docs: Iterable[QueryDoc]) -> str:
    """Assemble a multi-search request body.

    Each document contributes a ``{"index": ...}`` header line followed by its
    body line. Every line ends with ``\\n``, so the text ends with a trailing
    newline as the _msearch endpoint requires.

    Args:
        docs: Documents in request order; any iterable, consumed once.

    Returns:
        NDJSON text; empty string for no documents.

    Raises:
        QueryTypeError: If any document contains an unknown operator kind.
            Nothing is returned for the batch in that case.
    """
    lines: list[str] = []
    count = 0
    for doc in docs:
        body = query_doc_body(doc)
        lines.append(dumps({"index": doc.index}))
        lines.append(dumps(body))
        count += 1
    log.debug("Assembled multi-search batch: %d documents", count)
    return "".join(line + "\n" for line in lines)


def multi_search_doc_bytes(docs: Iterable[QueryDoc]) -> bytes:
    """Assemble a multi-search request body as UTF-8 bytes."""
    return multi_search_doc(docs).encode("utf-8")
