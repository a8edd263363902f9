"""utils/encoding.py

Percent/plus encoding helpers for query components.
"""

import urllib.parse

__all__ = ["QUERY_SAFE", "encode_query_component", "decode_query_component"]

# Characters RFC 3986 allows verbatim in a query, minus the ones that
# delimit pairs ("&", "="), carry meaning inside a pair ("+") or would
# add a second query delimiter ("?").
QUERY_SAFE = "/:@!$'()*,;"


def encode_query_component(text: str) -> str:
    """Encode a query name or value, spaces as ``+``."""
    return urllib.parse.quote_plus(text, safe=QUERY_SAFE)


def decode_query_component(text: str) -> str:
    """Decode a query name or value, ``+`` as space."""
    return urllib.parse.unquote_plus(text)
