"""Serializers turning query trees into DSL bodies and multi-search batches."""

from __future__ import annotations

from EsQueryDsl.serializer.body import (
    dumps,
    nested_query_body,
    query_doc_body,
    query_item_body,
    render_query_doc,
    render_query_doc_bytes,
    wrapped_query,
)
from EsQueryDsl.serializer.multisearch import multi_search_doc, multi_search_doc_bytes

__all__ = [
    "dumps",
    "nested_query_body",
    "query_doc_body",
    "query_item_body",
    "render_query_doc",
    "render_query_doc_bytes",
    "wrapped_query",
    "multi_search_doc",
    "multi_search_doc_bytes",
]
