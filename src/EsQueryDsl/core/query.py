from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Sequence

from EsQueryDsl.core.operators import QueryType

BOOL_FIELD: Final[str] = "bool"
CLAUSES: Final[tuple[str, ...]] = ("must", "must_not", "should", "filter")


@dataclass(frozen=True, slots=True)
class QueryItem:
    """A single leaf query expression.

    The accepted ``value`` depends on ``type``:

    - MATCH / TERM / EXISTS / MATCH_PHRASE / PREFIX / WILDCARD: a scalar
      (or an options mapping, except EXISTS)
    - TERMS: a list or tuple of scalars
    - RANGE: a mapping such as ``{"gte": "2015-01-01"}``
    - QUERY_STRING: raw text, escaped on output
    - NESTED: a `NestedQueryItem`; ``field`` is the nested path

    ``type`` may also be an arbitrary integer; unknown kinds fail at
    serialization time with `QueryTypeError`.
    """

    field: str
    value: Any
    type: QueryType | int = QueryType.MATCH


@dataclass(frozen=True, slots=True)
class NestedQueryItem:
    """A bool combinator with ordered clause lists.

    Empty clauses are left out of the serialized ``bool`` object.
    """

    must: Sequence[QueryItem] = ()
    must_not: Sequence[QueryItem] = ()
    should: Sequence[QueryItem] = ()
    filter: Sequence[QueryItem] = ()


@dataclass(frozen=True, slots=True)
class SortField:
    """One sort directive, serialized as ``{field: order}``."""

    field: str
    order: str = "asc"


@dataclass(frozen=True, slots=True)
class QueryDoc:
    """Document-level search request.

    Attributes:
        index: Target index. Only used by the multi-search header line.
        must: Scoring AND clauses.
        filter: Non-scoring AND clauses.
        sort: Sort directives in priority order.
        must_not: Excluding clauses.
        should: OR clauses.
        size: Optional page size.
        from_: Optional page offset (``from`` on the wire).
        search_after: Optional cursor values from the previous page.
    """

    index: str
    must: Sequence[QueryItem] = ()
    filter: Sequence[QueryItem] = ()
    sort: Sequence[SortField] = ()
    must_not: Sequence[QueryItem] = ()
    should: Sequence[QueryItem] = ()
    size: int | None = None
    from_: int | None = None
    search_after: Sequence[Any] = ()


def wrap_query_items(clause: str, *items: QueryItem) -> QueryItem:
    """Bundle items into one bool block that can sit inside another clause list.

    Args:
        clause: Target clause: must / must_not / should / filter.
        *items: Items placed in that clause, in order.

    Returns:
        A BOOL query item whose value is a `NestedQueryItem`.

    Raises:
        ValueError: If ``clause`` is not a bool clause name.
    """
    if clause not in CLAUSES:
        raise ValueError(f"Unknown bool clause: {clause}")
    nested = NestedQueryItem(**{clause: tuple(items)})
    return QueryItem(field=BOOL_FIELD, value=nested, type=QueryType.BOOL)
