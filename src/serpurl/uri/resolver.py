"""src/serpurl/uri/resolver.py

Relative reference resolution (RFC 3986 section 5.2).
"""

import logging
from typing import List

from serpurl.uri.components import UrlComponents
from serpurl.uri.params import QueryParams
from serpurl.uri.parser import ReferenceParts, UrlParser

__all__ = ["remove_dot_segments", "merge_paths", "resolve_reference"]

logger = logging.getLogger(__name__)


def remove_dot_segments(path: str) -> str:
    """
    Remove ``.`` and ``..`` segments from a path (RFC 3986 section 5.2.4).

    ``..`` never climbs above the root, and a trailing dot segment leaves
    a trailing slash behind: ``/a/b/..`` gives ``/a/``.

    Args:
        path: Path to normalize.

    Returns:
        The normalized path.
    """
    output: List[str] = []
    while path:
        # A. Leading "../" or "./" of a relative path
        if path.startswith("../"):
            path = path[3:]
        elif path.startswith("./"):
            path = path[2:]
        # B. "/./" or a final "/."
        elif path.startswith("/./"):
            path = path[2:]
        elif path == "/.":
            path = "/"
        # C. "/../" or a final "/..", popping the last output segment
        elif path.startswith("/../"):
            path = path[3:]
            if output:
                output.pop()
        elif path == "/..":
            path = "/"
            if output:
                output.pop()
        # D. A lone "." or ".."
        elif path in (".", ".."):
            path = ""
        # E. Move the first segment, with its leading slash, to the output
        else:
            start = 1 if path.startswith("/") else 0
            end = path.find("/", start)
            if end == -1:
                end = len(path)
            output.append(path[:end])
            path = path[end:]
    return "".join(output)


def merge_paths(base: UrlComponents, reference_path: str) -> str:
    """
    Merge a relative-path reference with the base path (RFC 3986 section 5.2.3).

    Args:
        base: Base URL components.
        reference_path: Relative path, not starting with ``/``.

    Returns:
        The merged path, not yet stripped of dot segments.
    """
    if base.has_authority() and not base.path:
        return f"/{reference_path}"
    slash = base.path.rfind("/")
    if slash == -1:
        return reference_path
    return base.path[: slash + 1] + reference_path


def resolve_reference(base: UrlComponents, reference: ReferenceParts) -> UrlComponents:
    """
    Transform a reference into a target URL (RFC 3986 section 5.2.2).

    The base is never modified; the target always owns fresh components.

    Args:
        base: Base URL components; must carry a scheme.
        reference: Split reference, see :func:`~serpurl.uri.parser.split_reference`.

    Returns:
        Target URL components.

    Raises:
        ParseError: If the reference authority is malformed.
    """
    if reference.scheme is not None:
        logger.debug("Reference %r is absolute", reference)
        target = UrlParser.from_parts(reference)
        target.path = remove_dot_segments(reference.path)
        return target

    if reference.authority is not None:
        logger.debug("Reference %r is network-path", reference)
        target = UrlParser.from_parts(reference)
        target.scheme = base.scheme
        target.path = remove_dot_segments(reference.path)
        return target

    target = base.copy()
    target.fragment = reference.fragment

    if not reference.path:
        logger.debug("Reference %r keeps the base path", reference)
        if reference.query is not None:
            target.params = QueryParams.from_query_string(reference.query)
        return target

    if reference.path.startswith("/"):
        target.path = remove_dot_segments(reference.path)
    else:
        target.path = remove_dot_segments(merge_paths(base, reference.path))
    target.params = QueryParams.from_query_string(reference.query or "")
    logger.debug("Reference %r resolved to path %r", reference, target.path)
    return target
