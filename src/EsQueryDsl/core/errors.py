"""Error types raised while serializing query trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from EsQueryDsl.core.operators import ValueShape


class QueryDslError(Exception):
    """Base class for query construction and serialization errors."""


class QueryTypeError(QueryDslError):
    """Raised when a query item's operator kind is not in the operator table.

    Attributes:
        query_type: The unresolved operator kind, as carried by the item.
    """

    def __init__(self, query_type: int) -> None:
        self.query_type = query_type
        super().__init__(f"Invalid query type {query_type}")


class QueryValueError(QueryDslError, TypeError):
    """Raised when a value does not have a shape accepted by its operator.

    Attributes:
        query_type: Operator kind of the offending item.
        field: Field name of the offending item.
        expected: Shapes the operator accepts.
    """

    def __init__(self, query_type: int, field: str, expected: Iterable[ValueShape], value: object) -> None:
        self.query_type = query_type
        self.field = field
        self.expected = tuple(sorted(expected, key=lambda shape: shape.value))
        names = "/".join(shape.value for shape in self.expected)
        super().__init__(
            f"Query type {int(query_type)} on field {field!r} expects {names} value, got {type(value).__name__}"
        )
