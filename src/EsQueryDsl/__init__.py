"""EsQueryDsl: build Elasticsearch query DSL bodies and multi-search batches.

Typical use::

    from EsQueryDsl import QueryDoc, QueryItem, QueryType, render_query_doc

    body = render_query_doc(
        QueryDoc(index="posts", must=(QueryItem("title", "Search", QueryType.MATCH),))
    )
"""

from __future__ import annotations

from EsQueryDsl.core import (
    NestedQueryItem,
    QueryDoc,
    QueryDslError,
    QueryItem,
    QueryType,
    QueryTypeError,
    QueryValueError,
    SortField,
    escape_query_string,
    wrap_query_items,
)
from EsQueryDsl.serializer import (
    multi_search_doc,
    multi_search_doc_bytes,
    query_doc_body,
    query_item_body,
    render_query_doc,
    render_query_doc_bytes,
    wrapped_query,
)

__all__ = [
    "NestedQueryItem",
    "QueryDoc",
    "QueryDslError",
    "QueryItem",
    "QueryType",
    "QueryTypeError",
    "QueryValueError",
    "SortField",
    "escape_query_string",
    "wrap_query_items",
    "multi_search_doc",
    "multi_search_doc_bytes",
    "query_doc_body",
    "query_item_body",
    "render_query_doc",
    "render_query_doc_bytes",
    "wrapped_query",
]
