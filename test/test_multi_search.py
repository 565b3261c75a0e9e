"""Tests for multi-search NDJSON assembly."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from EsQueryDsl import QueryDoc, QueryItem, QueryType, QueryTypeError, render_query_doc
from EsQueryDsl.serializer import multi_search_doc, multi_search_doc_bytes


def _docs() -> list[QueryDoc]:
    return [
        QueryDoc(index="index1", must=(QueryItem("user.id", "kimchy!", QueryType.QUERY_STRING),)),
        QueryDoc(index="index2", must=(QueryItem("some_index_id", "some-long-key-id-value", QueryType.MATCH),)),
    ]


class TestMultiSearchDoc(unittest.TestCase):
    def test_two_documents(self) -> None:
        expected = (
            '{"index":"index1"}\n'
            r'{"query":{"bool":{"must":[{"query_string":{"analyze_wildcard":true,"fields":["user.id"],"query":"kimchy\\!"}}]}}}'
            "\n"
            '{"index":"index2"}\n'
            '{"query":{"bool":{"must":[{"match":{"some_index_id":"some-long-key-id-value"}}]}}}\n'
        )
        self.assertEqual(multi_search_doc(_docs()), expected)

    def test_bodies_match_standalone_render(self) -> None:
        docs = _docs()
        lines = multi_search_doc(docs).split("\n")
        self.assertEqual(lines[-1], "")
        self.assertEqual(len(lines[:-1]), 2 * len(docs))
        for idx, doc in enumerate(docs):
            self.assertEqual(lines[2 * idx], f'{{"index":"{doc.index}"}}')
            self.assertEqual(lines[2 * idx + 1], render_query_doc(doc))

    def test_generator_input(self) -> None:
        self.assertEqual(multi_search_doc(doc for doc in _docs()), multi_search_doc(_docs()))
        self.assertEqual(multi_search_doc_bytes(iter(_docs())), multi_search_doc_bytes(_docs()))

    def test_empty_batch(self) -> None:
        self.assertEqual(multi_search_doc([]), "")

    def test_failure_aborts_whole_batch(self) -> None:
        docs = _docs() + [QueryDoc(index="index3", must=(QueryItem("f", "v", 100001),))]
        with self.assertRaises(QueryTypeError) as ctx:
            multi_search_doc(docs)
        self.assertEqual(ctx.exception.query_type, 100001)

    def test_bytes_variant(self) -> None:
        self.assertEqual(multi_search_doc_bytes(_docs()), multi_search_doc(_docs()).encode("utf-8"))
        self.assertTrue(multi_search_doc_bytes(_docs()).endswith(b"\n"))


if __name__ == "__main__":
    unittest.main()
