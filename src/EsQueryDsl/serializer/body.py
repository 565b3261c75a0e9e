"""Query body serializer.

Walks a `QueryDoc` / `NestedQueryItem` tree once and produces the Elasticsearch
query DSL structure as plain dicts and lists. Dict insertion order is the
wire key order, so the rendered JSON is byte-stable across runs.

Rules
- Empty bool clauses are omitted, never emitted as ``[]``.
- ``query`` is always the first key of a document body; ``sort`` comes after it.
- The first unknown operator kind aborts the whole walk with `QueryTypeError`.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from EsQueryDsl.core.errors import QueryValueError
from EsQueryDsl.core.escape import escape_query_string
from EsQueryDsl.core.operators import OperatorSpec, QueryType, ValueShape, lookup_operator
from EsQueryDsl.core.query import CLAUSES, NestedQueryItem, QueryDoc, QueryItem, SortField

_SCALAR_TYPES = (str, int, float, bool)


def query_item_body(item: QueryItem) -> dict[str, Any]:
    """Serialize one query item.

    Args:
        item: Query item to serialize.

    Returns:
        DSL fragment, e.g. ``{"match": {"title": "Search"}}``.

    Raises:
        QueryTypeError: If ``item.type`` (or any nested item's type) is unknown.
        QueryValueError: If a value does not fit its operator.
    """
    spec = lookup_operator(item.type)
    shape = _check_shape(item, spec)

    if item.type == QueryType.QUERY_STRING:
        return {
            spec.key: {
                "analyze_wildcard": True,
                "fields": [item.field],
                "query": escape_query_string(item.value),
            }
        }
    if item.type == QueryType.NESTED:
        return {
            spec.key: {
                "path": [item.field],
                "query": nested_query_body(item.value),
            }
        }
    if item.type == QueryType.BOOL:
        return nested_query_body(item.value)
    return {spec.key: {item.field: _plain_value(item.value, shape)}}


def nested_query_body(nested: NestedQueryItem) -> dict[str, Any]:
    """Serialize a bool combinator to ``{"bool": {...}}`` with empty clauses left out."""
    return {"bool": _bool_clauses(nested.must, nested.must_not, nested.should, nested.filter)}


def wrapped_query(nested: NestedQueryItem) -> dict[str, Any]:
    """Return the standalone ``{"bool": {...}}`` object for an expression not attached to a document.

    Args:
        nested: Combinator to serialize on its own.

    Returns:
        Top-level bool query object.
    """
    return nested_query_body(nested)


def query_doc_body(doc: QueryDoc) -> dict[str, Any]:
    """Serialize a document into a search request body.

    The index is not part of the body; see `multi_search_doc`.

    Args:
        doc: Query document.

    Returns:
        Request body mapping with ``query`` first.
    """
    body: dict[str, Any] = {
        "query": {"bool": _bool_clauses(doc.must, doc.must_not, doc.should, doc.filter)},
    }
    if doc.size is not None:
        body["size"] = doc.size
    if doc.from_ is not None:
        body["from"] = doc.from_
    if doc.sort:
        body["sort"] = [_sort_body(s) for s in doc.sort]
    if doc.search_after:
        body["search_after"] = list(doc.search_after)
    return body


def dumps(obj: Any) -> str:
    """Encode a serialized structure as compact single-line JSON.

    Raises:
        ValueError: For NaN or infinite floats, which JSON cannot represent.
        TypeError: For values ``json`` cannot encode.
    """
    return json.dumps(obj, ensure_ascii=False, allow_nan=False, separators=(",", ":"))


def render_query_doc(doc: QueryDoc) -> str:
    """Render a document body as compact JSON text."""
    return dumps(query_doc_body(doc))


def render_query_doc_bytes(doc: QueryDoc) -> bytes:
    """Render a document body as UTF-8 encoded JSON."""
    return render_query_doc(doc).encode("utf-8")


def _bool_clauses(*clauses: Sequence[QueryItem]) -> dict[str, list[dict[str, Any]]]:
    out: dict[str, list[dict[str, Any]]] = {}
    for name, items in zip(CLAUSES, clauses):
        if items:
            out[name] = [query_item_body(item) for item in items]
    return out


def _sort_body(sort: SortField) -> dict[str, str]:
    return {sort.field: sort.order}


def _check_shape(item: QueryItem, spec: OperatorSpec) -> ValueShape:
    """Return the shape of ``item.value`` if ``spec`` accepts it.

    Raises:
        QueryValueError: If the value matches none of the accepted shapes.
    """
    value = item.value
    for shape in (ValueShape.NESTED, ValueShape.TEXT, ValueShape.SCALAR, ValueShape.LIST, ValueShape.MAPPING):
        if shape in spec.shapes and _has_shape(value, shape):
            return shape
    raise QueryValueError(item.type, item.field, spec.shapes, value)


def _has_shape(value: Any, shape: ValueShape) -> bool:
    if shape is ValueShape.NESTED:
        return isinstance(value, NestedQueryItem)
    if shape is ValueShape.TEXT:
        return isinstance(value, str)
    if shape is ValueShape.SCALAR:
        return isinstance(value, _SCALAR_TYPES)
    if shape is ValueShape.LIST:
        return isinstance(value, (list, tuple))
    return isinstance(value, Mapping)


def _plain_value(value: Any, shape: ValueShape) -> Any:
    if shape is ValueShape.LIST:
        return list(value)
    if shape is ValueShape.MAPPING:
        return dict(value)
    return value
