"""Operator table.

Maps every supported query type to the Elasticsearch DSL key it emits and the
value shapes it accepts.

Mapping to DSL keys
- MATCH        -> match
- TERM         -> term
- TERMS        -> terms         (list value)
- RANGE        -> range         (mapping value, e.g. {"gte": ...})
- EXISTS       -> exists
- QUERY_STRING -> query_string  (text value, escaped)
- NESTED       -> nested        (NestedQueryItem value, field is the path)
- MATCH_PHRASE -> match_phrase
- PREFIX       -> prefix
- WILDCARD     -> wildcard
- BOOL         -> bool          (built by ``wrap_query_items`` only)

The table is built once at import time and is read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Final, Mapping

from EsQueryDsl.core.errors import QueryTypeError


class QueryType(IntEnum):
    """Operator kinds understood by the serializer."""

    MATCH = 0
    TERM = 1
    TERMS = 2
    RANGE = 3
    EXISTS = 4
    QUERY_STRING = 5
    NESTED = 6
    MATCH_PHRASE = 7
    PREFIX = 8
    WILDCARD = 9
    BOOL = 10


class ValueShape(str, Enum):
    """Value variants an operator may accept."""

    SCALAR = "scalar"
    TEXT = "text"
    LIST = "list"
    MAPPING = "mapping"
    NESTED = "nested"


@dataclass(frozen=True, slots=True)
class OperatorSpec:
    """Table entry for one operator kind."""

    key: str
    shapes: frozenset[ValueShape]


_SCALAR_OR_MAPPING = frozenset({ValueShape.SCALAR, ValueShape.MAPPING})

OPERATORS: Final[Mapping[int, OperatorSpec]] = MappingProxyType(
    {
        QueryType.MATCH: OperatorSpec("match", _SCALAR_OR_MAPPING),
        QueryType.TERM: OperatorSpec("term", _SCALAR_OR_MAPPING),
        QueryType.TERMS: OperatorSpec("terms", frozenset({ValueShape.LIST})),
        QueryType.RANGE: OperatorSpec("range", frozenset({ValueShape.MAPPING})),
        QueryType.EXISTS: OperatorSpec("exists", frozenset({ValueShape.SCALAR})),
        QueryType.QUERY_STRING: OperatorSpec("query_string", frozenset({ValueShape.TEXT})),
        QueryType.NESTED: OperatorSpec("nested", frozenset({ValueShape.NESTED})),
        QueryType.MATCH_PHRASE: OperatorSpec("match_phrase", _SCALAR_OR_MAPPING),
        QueryType.PREFIX: OperatorSpec("prefix", _SCALAR_OR_MAPPING),
        QueryType.WILDCARD: OperatorSpec("wildcard", _SCALAR_OR_MAPPING),
        QueryType.BOOL: OperatorSpec("bool", frozenset({ValueShape.NESTED})),
    }
)


def lookup_operator(query_type: int) -> OperatorSpec:
    """Return the table entry for a query type.

    Args:
        query_type: A ``QueryType`` member or raw integer code.

    Returns:
        Operator key and accepted value shapes.

    Raises:
        QueryTypeError: If the kind is not in the table.
    """
    # bool is an int subclass and would otherwise alias MATCH/TERM.
    if isinstance(query_type, bool) or not isinstance(query_type, int):
        raise QueryTypeError(query_type)
    spec = OPERATORS.get(query_type)
    if spec is None:
        raise QueryTypeError(query_type)
    return spec


def query_type_from_name(name: str) -> QueryType:
    """Resolve a case-insensitive operator name (``query_string``, ``match`` ...).

    Both enum member names and DSL keys are accepted.

    Raises:
        ValueError: If the name is unknown.
    """
    normalized = name.strip().lower()
    for query_type, spec in OPERATORS.items():
        if normalized in (spec.key, QueryType(query_type).name.lower()):
            return QueryType(query_type)
    raise ValueError(f"Unknown query type: {name}")
