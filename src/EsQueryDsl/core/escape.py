"""Escaping for ``query_string`` query text.

Reserved characters of the query_string grammar are each prefixed with a
single backslash. The two-character operators ``&&`` and ``||`` are covered
by escaping every ``&`` and ``|``.
"""

from __future__ import annotations

from typing import Final

RESERVED_CHARACTERS: Final[frozenset[str]] = frozenset('+-=&|><!(){}[]^"~*?:\\/')

_TRANSLATION: Final[dict[int, str]] = {ord(ch): "\\" + ch for ch in RESERVED_CHARACTERS}


def escape_query_string(text: str) -> str:
    """Escape reserved characters in free text for a query_string query.

    Args:
        text: Raw user text.

    Returns:
        Text safe to place in the ``query`` key, e.g. ``kimchy!`` -> ``kimchy\\!``.
    """
    return text.translate(_TRANSLATION)
