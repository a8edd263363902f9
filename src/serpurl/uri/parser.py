"""src/serpurl/uri/parser.py

RFC 3986 URI reference parser.
"""

import logging
import re
from typing import NamedTuple, Optional, Tuple

from serpurl.exceptions import ParseError
from serpurl.uri.components import UrlComponents
from serpurl.uri.params import QueryParams
from serpurl.utils.validators import (
    MAX_PORT,
    find_forbidden_char,
    has_bad_percent_escape,
    is_valid_scheme,
)

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_PARSER",
    "ReferenceParts",
    "UrlParser",
    "split_reference",
    "split_authority",
]

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 8192

# RFC 3986 Appendix B
_REFERENCE_RE = re.compile(r"^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?$")


class ReferenceParts(NamedTuple):
    """
    The five components of a URI reference, undecoded.

    ``authority``, ``query`` and ``fragment`` are None when the reference
    does not contain them at all, and may be "" when present but empty.
    """

    scheme: Optional[str]
    authority: Optional[str]
    path: str
    query: Optional[str]
    fragment: Optional[str]


def _fail(message: str, text: str) -> ParseError:
    logger.debug("Rejecting %r: %s", text, message)
    return ParseError(message, url=text)


def split_reference(text: str) -> ReferenceParts:
    """
    Split a URI reference into its five components.

    Args:
        text: Absolute URI or relative reference.

    Returns:
        ReferenceParts with the scheme lowercased.

    Raises:
        ParseError: If the string cannot be a URI reference.
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected a string, got {type(text).__name__}")

    position = find_forbidden_char(text)
    if position != -1:
        raise _fail(f"Invalid character {text[position]!r} at position {position}", text)

    if has_bad_percent_escape(text):
        raise _fail("Malformed percent-encoding", text)

    match = _REFERENCE_RE.match(text)
    if match is None:  # pragma: no cover - the pattern matches any string
        raise _fail("Unparsable URI reference", text)

    scheme = match.group(2)
    if scheme is not None:
        if not is_valid_scheme(scheme):
            # A colon in the first segment of a relative path is not allowed
            raise _fail(f"Invalid scheme {scheme!r}", text)
        scheme = scheme.lower()

    fragment = match.group(9)
    if fragment is not None and "#" in fragment:
        raise _fail("More than one fragment delimiter", text)

    return ReferenceParts(
        scheme=scheme,
        authority=match.group(4),
        path=match.group(5),
        query=match.group(7),
        fragment=fragment,
    )


def split_authority(authority: str) -> Tuple[Optional[str], str, Optional[int]]:
    """
    Split an authority into user info, host and port.

    Args:
        authority: ``[user_info@]host[:port]`` without the leading ``//``.

    Returns:
        Tuple of (user_info, host, port).

    Raises:
        ParseError: On unbalanced IPv6 brackets or a bad port.
    """
    user_info: Optional[str] = None
    if "@" in authority:
        user_info, authority = authority.rsplit("@", 1)

    port_text = ""
    if authority.startswith("["):
        end = authority.find("]")
        if end == -1:
            raise _fail("Unbalanced '[' in authority", authority)
        host, rest = authority[: end + 1], authority[end + 1 :]
        if rest:
            if not rest.startswith(":"):
                raise _fail(f"Unexpected text after IP literal: {rest!r}", authority)
            port_text = rest[1:]
    else:
        if "[" in authority or "]" in authority:
            raise _fail("Unbalanced ']' in authority", authority)
        host, _, port_text = authority.partition(":")

    port: Optional[int] = None
    if port_text:
        if not port_text.isdigit():
            raise _fail(f"Invalid port {port_text!r}", authority)
        port = int(port_text)
        if port > MAX_PORT:
            raise _fail(f"Port out of range: {port}", authority)

    return user_info, host, port


class UrlParser:
    """
    URI reference parser producing :class:`UrlComponents`.

    Handles:
    - RFC 3986 generic syntax and relative references.
    - Authority splitting, including IPv6 literals.
    - Query decoding into an ordered parameter store.
    - Defensive sizing.
    """

    __slots__ = ("max_length",)

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH):
        self.max_length = max_length

    def parse(self, text: str) -> UrlComponents:
        """
        Parse a URI reference.

        Args:
            text: Absolute URI or relative reference.

        Returns:
            A new UrlComponents.

        Raises:
            ParseError: If the string is too long or syntactically invalid.
        """
        if isinstance(text, str) and len(text) > self.max_length:
            raise _fail(f"URI exceeds maximum length of {self.max_length}", text[:64])

        return self.from_parts(split_reference(text))

    @staticmethod
    def from_parts(parts: ReferenceParts) -> UrlComponents:
        """
        Build components from an already split reference.

        Args:
            parts: Output of :func:`split_reference` (or an equivalent).

        Returns:
            A new UrlComponents.

        Raises:
            ParseError: If the authority is malformed.
        """
        user_info: Optional[str] = None
        host: Optional[str] = None
        port: Optional[int] = None
        if parts.authority is not None:
            user_info, host, port = split_authority(parts.authority)

        params = (
            QueryParams.from_query_string(parts.query) if parts.query else QueryParams()
        )

        return UrlComponents(
            scheme=parts.scheme or "",
            host=host,
            path=parts.path,
            params=params,
            fragment=parts.fragment,
            port=port,
            user_info=user_info,
        )


DEFAULT_PARSER = UrlParser()
