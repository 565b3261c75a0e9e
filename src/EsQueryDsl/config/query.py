"""Query document configuration and YAML query DSL parsing.

Example::

    queries:
      - index: posts
        sort:
          - id: asc
        must:
          - {field: title, type: match, value: Search}
        filter:
          - {field: publish_date, type: range, value: {gte: 2015-01-01}}
          - field: comments
            type: nested
            value:
              must:
                - {field: comments.author, type: term, value: kimchy}
          - bool:
              must_not:
                - {field: status, type: term, value: draft}
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from EsQueryDsl.config.common import (
    expect_int,
    expect_list,
    expect_mapping,
    expect_str,
    get_required_value,
)
from EsQueryDsl.core.operators import QueryType, query_type_from_name
from EsQueryDsl.core.query import BOOL_FIELD, CLAUSES, NestedQueryItem, QueryDoc, QueryItem, SortField

_ALLOWED_ORDERS = {"asc", "desc"}
_DOC_KEYS = {"index", "sort", "size", "from", "search_after", *CLAUSES}
_ITEM_KEYS = {"field", "type", "value"}


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Store validated query documents in request order."""

    docs: tuple[QueryDoc, ...]


def load_queries(raw: Mapping[str, Any]) -> QueryConfig:
    """Load the ``queries`` list from the root mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed query documents.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or names are unknown.
    """
    queries_obj = raw.get("queries")
    if queries_obj is None:
        raise ValueError("Missing required config: queries")
    items = expect_list(queries_obj, "queries")
    return QueryConfig(docs=tuple(parse_query_doc(item, f"queries[{idx}]") for idx, item in enumerate(items)))


def check_queries(config: QueryConfig) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If no documents are configured.
    """
    if not config.docs:
        raise ValueError("queries must include at least one query")


def parse_query_doc(value: Any, config_key: str) -> QueryDoc:
    """Parse one document mapping into ``QueryDoc``.

    Args:
        value: Document mapping.
        config_key: Full key path used in error messages.

    Returns:
        Parsed document.

    Raises:
        TypeError: If document shape/types are invalid.
        ValueError: If keys are unknown or required keys are missing.
    """
    section = expect_mapping(value, config_key)
    unknown = {str(k) for k in section.keys()} - _DOC_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    index = expect_str(get_required_value(section, "index", f"{config_key}.index"), f"{config_key}.index").strip()
    if not index:
        raise ValueError(f"{config_key}.index must not be empty")

    size = section.get("size")
    from_ = section.get("from")
    search_after = section.get("search_after")
    if search_after is not None:
        search_after = _plain_config_value(expect_list(search_after, f"{config_key}.search_after"))
    return QueryDoc(
        index=index,
        sort=_parse_sort(section.get("sort"), f"{config_key}.sort"),
        size=None if size is None else expect_int(size, f"{config_key}.size"),
        from_=None if from_ is None else expect_int(from_, f"{config_key}.from"),
        search_after=() if search_after is None else tuple(search_after),
        **_parse_clauses(section, config_key),
    )


def parse_query_item(value: Any, config_key: str) -> QueryItem:
    """Parse one ``{field, type, value}`` item, or a ``{bool: {...}}`` block.

    ``type`` may be an operator name (``match``, ``query_string`` ...) or an
    integer code. Integer codes are not checked here; unknown codes fail at
    serialization time.

    Raises:
        TypeError: If item shape/types are invalid.
        ValueError: If keys or operator names are unknown.
    """
    section = expect_mapping(value, config_key)
    if BOOL_FIELD in section:
        if len(section) != 1:
            raise ValueError(f"{config_key} bool block must not have sibling keys")
        nested = _parse_nested(section[BOOL_FIELD], f"{config_key}.{BOOL_FIELD}")
        return QueryItem(field=BOOL_FIELD, value=nested, type=QueryType.BOOL)

    unknown = {str(k) for k in section.keys()} - _ITEM_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    field = expect_str(get_required_value(section, "field", f"{config_key}.field"), f"{config_key}.field")
    query_type = _parse_type(section.get("type", "match"), f"{config_key}.type")
    raw_value = get_required_value(section, "value", f"{config_key}.value")

    if query_type in (QueryType.NESTED, QueryType.BOOL):
        item_value: Any = _parse_nested(raw_value, f"{config_key}.value")
    else:
        item_value = _plain_config_value(raw_value)
        if isinstance(item_value, list):
            item_value = tuple(item_value)
    return QueryItem(field=field, value=item_value, type=query_type)


def _parse_type(value: Any, config_key: str) -> QueryType | int:
    if isinstance(value, str):
        return query_type_from_name(value)
    code = expect_int(value, config_key)
    try:
        return QueryType(code)
    except ValueError:
        return code


def _parse_nested(value: Any, config_key: str) -> NestedQueryItem:
    section = expect_mapping(value, config_key)
    unknown = {str(k) for k in section.keys()} - set(CLAUSES)
    if unknown:
        raise ValueError(f"{config_key} has unknown clauses: {sorted(unknown)}")
    return NestedQueryItem(**_parse_clauses(section, config_key))


def _parse_clauses(section: Mapping[str, Any], config_key: str) -> dict[str, tuple[QueryItem, ...]]:
    out: dict[str, tuple[QueryItem, ...]] = {}
    for clause in CLAUSES:
        items = section.get(clause)
        if items is None:
            continue
        clause_key = f"{config_key}.{clause}"
        out[clause] = tuple(
            parse_query_item(item, f"{clause_key}[{idx}]")
            for idx, item in enumerate(expect_list(items, clause_key))
        )
    return out


def _parse_sort(value: Any, config_key: str) -> tuple[SortField, ...]:
    """Parse sort directives.

    Accepts ``[{id: asc}, {date: desc}]`` or bare field names (ascending).

    Raises:
        TypeError: If entries are neither strings nor single-key mappings.
        ValueError: If an order is not asc/desc.
    """
    if value is None:
        return ()
    out: list[SortField] = []
    for idx, entry in enumerate(expect_list(value, config_key)):
        entry_key = f"{config_key}[{idx}]"
        if isinstance(entry, str):
            out.append(SortField(field=entry))
            continue
        mapping = expect_mapping(entry, entry_key)
        if len(mapping) != 1:
            raise ValueError(f"{entry_key} must have exactly one field")
        ((field, order),) = mapping.items()
        order = expect_str(order, f"{entry_key}.{field}").lower()
        if order not in _ALLOWED_ORDERS:
            raise ValueError(f"{entry_key}.{field} must be one of {sorted(_ALLOWED_ORDERS)}")
        out.append(SortField(field=expect_str(field, entry_key), order=order))
    return tuple(out)


def _plain_config_value(value: Any) -> Any:
    """Return ``value`` with YAML dates and timestamps turned into ISO strings.

    YAML reads an unquoted ``2015-01-01`` as ``datetime.date``, which JSON
    cannot encode. Lists and mappings are converted recursively.
    """
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, list):
        return [_plain_config_value(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _plain_config_value(item) for key, item in value.items()}
    return value
