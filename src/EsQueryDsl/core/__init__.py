"""Query model, operator table, and escaping rules."""

from __future__ import annotations

from EsQueryDsl.core.errors import QueryDslError, QueryTypeError, QueryValueError
from EsQueryDsl.core.escape import RESERVED_CHARACTERS, escape_query_string
from EsQueryDsl.core.operators import OPERATORS, OperatorSpec, QueryType, ValueShape, lookup_operator
from EsQueryDsl.core.query import NestedQueryItem, QueryDoc, QueryItem, SortField, wrap_query_items

__all__ = [
    "QueryDslError",
    "QueryTypeError",
    "QueryValueError",
    "RESERVED_CHARACTERS",
    "escape_query_string",
    "OPERATORS",
    "OperatorSpec",
    "QueryType",
    "ValueShape",
    "lookup_operator",
    "NestedQueryItem",
    "QueryDoc",
    "QueryItem",
    "SortField",
    "wrap_query_items",
]
