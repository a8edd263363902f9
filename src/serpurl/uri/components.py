"""src/serpurl/uri/components.py

Internal URL component model shared by the mutable and immutable URL types.
"""

from typing import List, Optional

from serpurl.uri.params import QueryParams

__all__ = ["UrlComponents"]


class UrlComponents:
    """
    Plain container for the components of a URI reference.

    This class carries no mutability policy of its own: ``Url`` mutates
    it through setters, ``UrlArchive`` never does.

    Attributes:
        scheme: Lowercase scheme, empty for relative references.
        user_info: ``user[:password]`` authority prefix, or None.
        host: Host (IPv6 literals keep their brackets); None when there is
            no authority, "" for an empty one (``file:///x``).
        port: Port number, or None.
        path: Path as a single string.
        params: Ordered query parameters.
        fragment: Fragment, None when absent, "" for a bare ``#``.
    """

    # pylint: disable=too-many-instance-attributes,too-many-arguments
    __slots__ = ("scheme", "user_info", "host", "port", "path", "params", "fragment")

    def __init__(
        self,
        scheme: str = "",
        host: Optional[str] = None,
        path: str = "",
        params: Optional[QueryParams] = None,
        fragment: Optional[str] = None,
        port: Optional[int] = None,
        user_info: Optional[str] = None,
    ) -> None:
        self.scheme = scheme
        self.user_info = user_info
        self.host = host
        self.port = port
        self.path = path
        self.params = params if params is not None else QueryParams()
        self.fragment = fragment

    def copy(self) -> "UrlComponents":
        """Return a copy with an independent parameter store."""
        return UrlComponents(
            scheme=self.scheme,
            host=self.host,
            path=self.path,
            params=self.params.copy(),
            fragment=self.fragment,
            port=self.port,
            user_info=self.user_info,
        )

    def has_authority(self) -> bool:
        """An authority is emitted whenever a host is set, even an empty one."""
        return self.host is not None

    def get_authority(self) -> str:
        """Build ``[user_info@]host[:port]``."""
        authority = self.host or ""
        if self.user_info is not None:
            authority = f"{self.user_info}@{authority}"
        if self.port is not None:
            authority = f"{authority}:{self.port}"
        return authority

    def get_path_segments(self) -> List[str]:
        """
        Split the path into segments.

        A leading slash is not a segment: ``/a/b/`` gives
        ``["a", "b", ""]`` and ``a`` gives ``["a"]``. An empty path gives
        an empty list.
        """
        if not self.path:
            return []
        path = self.path[1:] if self.path.startswith("/") else self.path
        return path.split("/")

    def get_query_string(self) -> str:
        """Serialize the query parameters."""
        return self.params.to_query_string()

    def build_url(self) -> str:
        """
        Recompose the components into a URI string (RFC 3986 section 5.3).

        Returns:
            ``[scheme:][//authority][path][?query][#fragment]``.
        """
        parts: List[str] = []
        if self.scheme:
            parts.append(f"{self.scheme}:")

        path = self.path
        if self.has_authority():
            parts.append(f"//{self.get_authority()}")
            if path and not path.startswith("/"):
                path = f"/{path}"
        elif path.startswith("//"):
            # Keep a rootless "//x" path from reading as an authority
            path = f"/.{path}"
        parts.append(path)

        query = self.get_query_string()
        if query:
            parts.append(f"?{query}")
        if self.fragment is not None:
            parts.append(f"#{self.fragment}")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"UrlComponents({self.build_url()!r})"
