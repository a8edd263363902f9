"""src/serpurl/uri/__init__.py

URI model module for Serpurl.

This module provides the internal pieces behind the public URL types: the
ordered query parameter store, the component model, the RFC 3986 parser
and the relative reference resolver.
"""

from .components import UrlComponents
from .params import QueryParam, QueryParams
from .parser import ReferenceParts, UrlParser, split_reference
from .resolver import merge_paths, remove_dot_segments, resolve_reference

__all__ = [
    "UrlComponents",
    "QueryParam",
    "QueryParams",
    "ReferenceParts",
    "UrlParser",
    "split_reference",
    "merge_paths",
    "remove_dot_segments",
    "resolve_reference",
]
