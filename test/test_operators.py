"""Tests for the operator table."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from EsQueryDsl.core.errors import QueryDslError, QueryTypeError
from EsQueryDsl.core.operators import OPERATORS, QueryType, ValueShape, lookup_operator, query_type_from_name


class TestLookupOperator(unittest.TestCase):
    def test_known_keys(self) -> None:
        expected = {
            QueryType.MATCH: "match",
            QueryType.TERM: "term",
            QueryType.TERMS: "terms",
            QueryType.RANGE: "range",
            QueryType.EXISTS: "exists",
            QueryType.QUERY_STRING: "query_string",
            QueryType.NESTED: "nested",
        }
        for query_type, key in expected.items():
            with self.subTest(query_type=query_type):
                self.assertEqual(lookup_operator(query_type).key, key)

    def test_every_query_type_resolves(self) -> None:
        for query_type in QueryType:
            with self.subTest(query_type=query_type):
                self.assertIs(lookup_operator(query_type), OPERATORS[query_type])

    def test_raw_int_code_resolves(self) -> None:
        self.assertEqual(lookup_operator(2).key, "terms")

    def test_unknown_code_raises_structured_error(self) -> None:
        with self.assertRaises(QueryTypeError) as ctx:
            lookup_operator(100001)
        self.assertEqual(ctx.exception.query_type, 100001)
        self.assertIsInstance(ctx.exception, QueryDslError)

    def test_bool_is_not_a_query_type(self) -> None:
        with self.assertRaises(QueryTypeError):
            lookup_operator(True)

    def test_value_shapes(self) -> None:
        self.assertEqual(OPERATORS[QueryType.TERMS].shapes, frozenset({ValueShape.LIST}))
        self.assertEqual(OPERATORS[QueryType.RANGE].shapes, frozenset({ValueShape.MAPPING}))
        self.assertEqual(OPERATORS[QueryType.NESTED].shapes, frozenset({ValueShape.NESTED}))
        self.assertEqual(OPERATORS[QueryType.QUERY_STRING].shapes, frozenset({ValueShape.TEXT}))

    def test_table_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            OPERATORS[99] = OPERATORS[QueryType.MATCH]  # type: ignore[index]


class TestQueryTypeFromName(unittest.TestCase):
    def test_dsl_key_and_member_name(self) -> None:
        self.assertIs(query_type_from_name("query_string"), QueryType.QUERY_STRING)
        self.assertIs(query_type_from_name("QUERY_STRING"), QueryType.QUERY_STRING)
        self.assertIs(query_type_from_name(" Nested "), QueryType.NESTED)

    def test_unknown_name(self) -> None:
        with self.assertRaises(ValueError):
            query_type_from_name("fuzzy")


if __name__ == "__main__":
    unittest.main()
