"""src/serpurl/__init__.py

Serpurl - URL builder, snapshot and RFC 3986 resolver for Python.

Serpurl models a URL as scheme, authority, path, ordered query parameters
and fragment. It comes in two forms sharing the same read operations: a
mutable builder (``Url``) and an immutable snapshot (``UrlArchive``).
Both resolve relative references exactly as RFC 3986 section 5 describes.

Key Features:
    - Zero external dependencies
    - Ordered query parameters with in-place overwrite
    - Raw (unencoded) parameter values on demand
    - RFC 3986 dot-segment removal and reference resolution
    - Typed resolve output (same type, another URL type, or ``str``)
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    Builder usage::

        from serpurl import Url

        url = Url('example.com')
        url.set_path('search').set_param('q', 'foo bar')
        print(url.build_url())  # https://example.com/search?q=foo+bar

    Resolve usage::

        from serpurl import UrlArchive

        base = UrlArchive.from_string('http://a/b/c/d;p?q')
        print(base.resolve('../g'))  # http://a/b/g
        print(base.resolve('//g', str))  # 'http://g'
"""

import logging

from serpurl.exceptions import InvalidArgumentError, ParseError, SerpUrlError
from serpurl.uri.params import QueryParam, QueryParams
from serpurl.uri.parser import UrlParser
from serpurl.url import BaseUrl, Url, UrlArchive, UrlInterface
from serpurl.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Url",
    "UrlArchive",
    "UrlInterface",
    "BaseUrl",
    "QueryParam",
    "QueryParams",
    "UrlParser",
    "SerpUrlError",
    "ParseError",
    "InvalidArgumentError",
    "__version__",
]
