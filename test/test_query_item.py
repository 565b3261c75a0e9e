"""Tests for query item and bool combinator serialization."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from EsQueryDsl.core.errors import QueryTypeError, QueryValueError
from EsQueryDsl.core.operators import QueryType
from EsQueryDsl.core.query import NestedQueryItem, QueryItem, wrap_query_items
from EsQueryDsl.serializer import dumps, nested_query_body, query_item_body, wrapped_query


class TestQueryItemBody(unittest.TestCase):
    def test_scalar_operators(self) -> None:
        for query_type, key in (
            (QueryType.MATCH, "match"),
            (QueryType.TERM, "term"),
            (QueryType.EXISTS, "exists"),
            (QueryType.MATCH_PHRASE, "match_phrase"),
            (QueryType.PREFIX, "prefix"),
            (QueryType.WILDCARD, "wildcard"),
        ):
            with self.subTest(query_type=query_type):
                body = query_item_body(QueryItem(field="F", value="V", type=query_type))
                self.assertEqual(body, {key: {"F": "V"}})

    def test_numeric_and_boolean_scalars(self) -> None:
        self.assertEqual(query_item_body(QueryItem("age", 42, QueryType.TERM)), {"term": {"age": 42}})
        self.assertEqual(query_item_body(QueryItem("active", True, QueryType.TERM)), {"term": {"active": True}})

    def test_terms_tuple_becomes_list(self) -> None:
        body = query_item_body(QueryItem("id", ("a", "b"), QueryType.TERMS))
        self.assertEqual(dumps(body), '{"terms":{"id":["a","b"]}}')

    def test_range_keeps_mapping_order(self) -> None:
        body = query_item_body(QueryItem("publish_date", {"gte": "2015-01-01", "lt": "2016-01-01"}, QueryType.RANGE))
        self.assertEqual(dumps(body), '{"range":{"publish_date":{"gte":"2015-01-01","lt":"2016-01-01"}}}')

    def test_match_with_options_mapping(self) -> None:
        body = query_item_body(QueryItem("title", {"query": "quick fox", "operator": "and"}, QueryType.MATCH))
        self.assertEqual(body, {"match": {"title": {"query": "quick fox", "operator": "and"}}})

    def test_query_string_shape_and_escape(self) -> None:
        body = query_item_body(QueryItem("user.id", "kimchy!", QueryType.QUERY_STRING))
        self.assertEqual(
            dumps(body),
            r'{"query_string":{"analyze_wildcard":true,"fields":["user.id"],"query":"kimchy\\!"}}',
        )

    def test_nested_item(self) -> None:
        nested = NestedQueryItem(must=(QueryItem("comments.author", "kimchy", QueryType.TERM),))
        body = query_item_body(QueryItem("comments", nested, QueryType.NESTED))
        self.assertEqual(
            dumps(body),
            '{"nested":{"path":["comments"],"query":{"bool":{"must":[{"term":{"comments.author":"kimchy"}}]}}}}',
        )

    def test_unknown_type(self) -> None:
        with self.assertRaises(QueryTypeError) as ctx:
            query_item_body(QueryItem("f", "v", 100001))
        self.assertEqual(ctx.exception.query_type, 100001)

    def test_unknown_type_deep_in_tree(self) -> None:
        inner = wrap_query_items("must_not", QueryItem("f", "v", 100001))
        outer = NestedQueryItem(filter=(inner,))
        item = QueryItem("path", NestedQueryItem(must=(QueryItem("deep", outer, QueryType.NESTED),)), QueryType.NESTED)
        with self.assertRaises(QueryTypeError) as ctx:
            query_item_body(item)
        self.assertEqual(ctx.exception.query_type, 100001)

    def test_terms_rejects_scalar(self) -> None:
        with self.assertRaises(QueryValueError) as ctx:
            query_item_body(QueryItem("id", "abc", QueryType.TERMS))
        self.assertEqual(ctx.exception.field, "id")
        self.assertIsInstance(ctx.exception, TypeError)

    def test_range_rejects_list(self) -> None:
        with self.assertRaises(QueryValueError):
            query_item_body(QueryItem("date", ["2015"], QueryType.RANGE))

    def test_query_string_rejects_non_text(self) -> None:
        with self.assertRaises(QueryValueError):
            query_item_body(QueryItem("user.id", 42, QueryType.QUERY_STRING))

    def test_nested_rejects_plain_mapping(self) -> None:
        with self.assertRaises(QueryValueError):
            query_item_body(QueryItem("path", {"must": []}, QueryType.NESTED))

    def test_unencodable_scalar_container_passes_through(self) -> None:
        body = query_item_body(QueryItem("id", (object(),), QueryType.TERMS))
        with self.assertRaises(TypeError) as ctx:
            dumps(body)
        self.assertNotIsInstance(ctx.exception, QueryValueError)


class TestBoolCombinator(unittest.TestCase):
    def test_filter_only(self) -> None:
        nested = NestedQueryItem(filter=(QueryItem("status", "published", QueryType.TERM),))
        self.assertEqual(dumps(nested_query_body(nested)), '{"bool":{"filter":[{"term":{"status":"published"}}]}}')

    def test_empty_clauses_are_omitted(self) -> None:
        self.assertEqual(nested_query_body(NestedQueryItem()), {"bool": {}})

    def test_clause_order(self) -> None:
        item = QueryItem("f", "v", QueryType.TERM)
        nested = NestedQueryItem(filter=(item,), should=(item,), must_not=(item,), must=(item,))
        self.assertEqual(list(nested_query_body(nested)["bool"]), ["must", "must_not", "should", "filter"])

    def test_wrapped_query_must_not(self) -> None:
        nested = NestedQueryItem(must_not=(QueryItem("field", "value", QueryType.EXISTS),))
        self.assertEqual(dumps(wrapped_query(nested)), '{"bool":{"must_not":[{"exists":{"field":"value"}}]}}')

    def test_wrap_query_items(self) -> None:
        wrapped = wrap_query_items("filter", QueryItem("id", ["x"], QueryType.TERMS))
        self.assertEqual(wrapped.field, "bool")
        self.assertIs(wrapped.type, QueryType.BOOL)
        self.assertEqual(dumps(query_item_body(wrapped)), '{"bool":{"filter":[{"terms":{"id":["x"]}}]}}')

    def test_wrap_query_items_keeps_order(self) -> None:
        wrapped = wrap_query_items("must", QueryItem("a", 1, QueryType.TERM), QueryItem("b", 2, QueryType.TERM))
        self.assertEqual(
            dumps(query_item_body(wrapped)),
            '{"bool":{"must":[{"term":{"a":1}},{"term":{"b":2}}]}}',
        )

    def test_wrap_query_items_unknown_clause(self) -> None:
        with self.assertRaises(ValueError):
            wrap_query_items("or", QueryItem("a", 1, QueryType.TERM))


if __name__ == "__main__":
    unittest.main()
