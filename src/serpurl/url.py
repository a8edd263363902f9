"""src/serpurl/url.py

Public URL types for Serpurl.

This module provides the mutable :class:`Url` builder, the immutable
:class:`UrlArchive` snapshot, and :class:`UrlInterface`, the capability
contract ``resolve`` accepts as an output type.
"""

# pylint: disable=redefined-builtin

import abc
import inspect
import logging
from typing import (
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    overload,
)

from serpurl.exceptions import InvalidArgumentError
from serpurl.uri.components import UrlComponents
from serpurl.uri.params import QueryParams
from serpurl.uri.parser import DEFAULT_PARSER, UrlParser, split_reference
from serpurl.uri.resolver import resolve_reference
from serpurl.utils.validators import is_valid_port

__all__ = ["DEFAULT_SCHEME", "UrlInterface", "BaseUrl", "Url", "UrlArchive"]

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "https"

_T = TypeVar("_T", bound="UrlInterface")
_B = TypeVar("_B", bound="BaseUrl")


class UrlInterface(abc.ABC):
    """
    Capability contract for URL types.

    Any class accepted by ``resolve`` as an output type must be a subclass
    (or a registered virtual subclass) of this class: it can be built from
    a URI string and exposes the read operations below.
    """

    __slots__ = ()

    @classmethod
    @abc.abstractmethod
    def from_string(cls: Type[_T], url: str) -> _T:
        """Build an instance from a URI string."""

    @abc.abstractmethod
    def build_url(self) -> str:
        """Compose the URI string."""

    @abc.abstractmethod
    def get_query_string(self) -> str:
        """Serialized query, without the leading ``?``."""

    @abc.abstractmethod
    def get_scheme(self) -> str:
        """Scheme, empty for relative references."""

    @abc.abstractmethod
    def get_host(self) -> str:
        """Host, empty when there is no authority."""

    @abc.abstractmethod
    def get_port(self) -> Optional[int]:
        """Explicit port, or None."""

    @abc.abstractmethod
    def get_path(self) -> str:
        """Path as a single string."""

    @abc.abstractmethod
    def get_hash(self) -> Optional[str]:
        """Fragment, or None when absent."""

    @abc.abstractmethod
    def get_params(self) -> QueryParams:
        """Query parameters, in order."""

    @abc.abstractmethod
    def get_param_value(self, name: str, default: Any = None) -> Any:
        """Value of a query parameter, or ``default``."""


def _check_output(output: Any) -> None:
    """
    Validate a ``resolve`` output selector.

    Raises:
        InvalidArgumentError: Unless ``output`` is None, ``str`` or a
            concrete class implementing :class:`UrlInterface`.
    """
    if output is None or output is str:
        return
    if (
        isinstance(output, type)
        and issubclass(output, UrlInterface)
        and not inspect.isabstract(output)
    ):
        return
    raise InvalidArgumentError(
        f"Cannot resolve as {output!r}: expected str or a UrlInterface class"
    )


class BaseUrl(UrlInterface):
    """
    Shared read behavior of :class:`Url` and :class:`UrlArchive`.

    Wraps a single :class:`UrlComponents` and delegates every read to it.
    """

    __slots__ = ("_components",)

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        host: Optional[str] = None,
        path: str = "",
        scheme: str = DEFAULT_SCHEME,
        params: Optional[Mapping[str, Any]] = None,
        hash: Optional[str] = None,
        port: Optional[int] = None,
        user_info: Optional[str] = None,
    ) -> None:
        """
        Initialize a URL from explicit components.

        Args:
            host: Host name; the only component most callers need. None
                means no authority, "" an empty one.
            path: Path, with or without a leading slash.
            scheme: Scheme, ``https`` unless given.
            params: Mapping of name to value (or to a QueryParam).
            hash: Fragment, None for none.
            port: Explicit port.
            user_info: ``user[:password]`` authority prefix.

        Raises:
            InvalidArgumentError: If ``port`` is not a valid port.
        """
        if port is not None and not is_valid_port(port):
            raise InvalidArgumentError(f"Invalid port: {port!r}")
        self._init_components(
            UrlComponents(
                scheme=scheme.lower(),
                host=host,
                path=path,
                params=QueryParams(params),
                fragment=hash,
                port=port,
                user_info=user_info,
            )
        )

    def _init_components(self, components: UrlComponents) -> None:
        self._components = components

    @classmethod
    def _from_components(cls: Type[_B], components: UrlComponents) -> _B:
        instance = cls.__new__(cls)
        instance._init_components(components)
        return instance

    @classmethod
    def from_string(cls: Type[_B], url: str, parser: Optional[UrlParser] = None) -> _B:
        """
        Parse a URI string.

        Args:
            url: Absolute URI or relative reference.
            parser: Parser to use instead of the default one.

        Returns:
            A new instance of ``cls``.

        Raises:
            ParseError: If ``url`` is not a valid URI reference.
        """
        return cls._from_components((parser or DEFAULT_PARSER).parse(url))

    def get_scheme(self) -> str:
        return self._components.scheme

    def get_user_info(self) -> Optional[str]:
        return self._components.user_info

    def get_host(self) -> str:
        return self._components.host or ""

    def get_port(self) -> Optional[int]:
        return self._components.port

    def get_authority(self) -> str:
        """``[user_info@]host[:port]``, empty when there is no authority."""
        if not self._components.has_authority():
            return ""
        return self._components.get_authority()

    def get_path(self) -> str:
        return self._components.path

    def get_path_segments(self) -> List[str]:
        """Path segments; see :meth:`UrlComponents.get_path_segments`."""
        return self._components.get_path_segments()

    def get_hash(self) -> Optional[str]:
        return self._components.fragment

    def get_params(self) -> QueryParams:
        """Return a copy of the query parameters."""
        return self._components.params.copy()

    def has_param(self, name: str) -> bool:
        return name in self._components.params

    def get_param_value(self, name: str, default: Any = None) -> Any:
        """
        Get the value of a query parameter.

        Args:
            name: Parameter name (exact match).
            default: Returned when the parameter is absent.
        """
        return self._components.params.get_value(name, default)

    def get_query_string(self) -> str:
        return self._components.get_query_string()

    def build_url(self) -> str:
        return self._components.build_url()

    @overload
    def resolve(self: _B, reference: str) -> _B: ...

    @overload
    def resolve(self, reference: str, output: Type[str]) -> str: ...

    @overload
    def resolve(self, reference: str, output: Type[_T]) -> _T: ...

    def resolve(self, reference: str, output: Any = None) -> Any:
        """
        Resolve a reference against this URL (RFC 3986 section 5.2).

        This URL is never modified.

        Args:
            reference: Absolute URI or relative reference.
            output: None for the same type as this URL, ``str`` for a
                plain string, or any concrete UrlInterface class.

        Returns:
            The target URL in the requested form.

        Raises:
            InvalidArgumentError: If ``output`` is not supported, or this
                URL has no scheme to serve as a base.
            ParseError: If ``reference`` is not a valid URI reference.
        """
        _check_output(output)
        if not self._components.scheme:
            raise InvalidArgumentError(
                f"Cannot resolve against {self.build_url()!r}: base URL has no scheme"
            )

        target = resolve_reference(self._components, split_reference(reference))
        logger.debug("Resolved %r against %r", reference, self)

        if output is str:
            return target.build_url()
        output_type = type(self) if output is None else output
        if issubclass(output_type, BaseUrl):
            return output_type._from_components(target)
        return output_type.from_string(target.build_url())

    def __str__(self) -> str:
        return self.build_url()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.build_url()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseUrl):
            return NotImplemented
        return type(self) is type(other) and self.build_url() == other.build_url()

    __hash__ = None  # type: ignore[assignment]


class Url(BaseUrl):
    """
    Mutable URL builder.

    Setters modify the URL in place and return it, so calls can be
    chained. Not safe for concurrent mutation.

    Example::

        url = Url("example.com").set_path("search").set_param("q", "foo bar")
        url.build_url()  # 'https://example.com/search?q=foo+bar'
    """

    __slots__ = ()

    def set_scheme(self, scheme: str) -> "Url":
        """Set the scheme (lowercased); empty for protocol-relative."""
        self._components.scheme = scheme.lower()
        return self

    def set_user_info(self, user_info: Optional[str]) -> "Url":
        self._components.user_info = user_info
        return self

    def set_host(self, host: Optional[str]) -> "Url":
        """Set the host; None removes the authority, "" keeps an empty one."""
        self._components.host = host
        return self

    def set_port(self, port: Optional[int]) -> "Url":
        """
        Set or clear the explicit port.

        Raises:
            InvalidArgumentError: If ``port`` is not None or an int in range.
        """
        if port is not None and not is_valid_port(port):
            raise InvalidArgumentError(f"Invalid port: {port!r}")
        self._components.port = port
        return self

    def set_path(self, path: str) -> "Url":
        self._components.path = path
        return self

    def set_hash(self, hash: Optional[str]) -> "Url":
        """Set the fragment; None removes it, "" keeps a bare ``#``."""
        self._components.fragment = hash
        return self

    def set_param(self, name: str, value: Any, raw: bool = False) -> "Url":
        """
        Set a query parameter.

        An existing parameter keeps its position; a new one is appended.

        Args:
            name: Parameter name.
            value: Parameter value, stored as ``str``; None for a bare name.
            raw: Emit the value verbatim, without encoding.
        """
        self._components.params.set(name, value, raw)
        return self

    def remove_param(self, name: str) -> "Url":
        """Remove a query parameter; absent names are ignored."""
        self._components.params.remove(name)
        return self

    def to_archive(self) -> "UrlArchive":
        """Snapshot the current state as an immutable UrlArchive."""
        return UrlArchive._from_components(self._components.copy())


class UrlArchive(BaseUrl):
    """
    Immutable URL snapshot.

    Once created it never changes: the ``with_*`` helpers and ``resolve``
    return new instances. Safe to share between threads.
    """

    __slots__ = ()

    def _init_components(self, components: UrlComponents) -> None:
        object.__setattr__(self, "_components", components)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __hash__(self) -> int:
        return hash(self.build_url())

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self)._from_components, (self._components,))

    def __copy__(self) -> "UrlArchive":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "UrlArchive":
        return self

    def _replace(self, **changes: Any) -> "UrlArchive":
        components = self._components.copy()
        for name, value in changes.items():
            setattr(components, name, value)
        return type(self)._from_components(components)

    def with_scheme(self, scheme: str) -> "UrlArchive":
        return self._replace(scheme=scheme.lower())

    def with_host(self, host: Optional[str]) -> "UrlArchive":
        return self._replace(host=host)

    def with_port(self, port: Optional[int]) -> "UrlArchive":
        """
        Return a copy with another port.

        Raises:
            InvalidArgumentError: If ``port`` is not None or an int in range.
        """
        if port is not None and not is_valid_port(port):
            raise InvalidArgumentError(f"Invalid port: {port!r}")
        return self._replace(port=port)

    def with_path(self, path: str) -> "UrlArchive":
        return self._replace(path=path)

    def with_hash(self, hash: Optional[str]) -> "UrlArchive":
        return self._replace(fragment=hash)

    def with_param(
        self, name: str, value: Any, raw: bool = False
    ) -> "UrlArchive":
        """Return a copy with a query parameter set (position kept if present)."""
        params = self._components.params.copy()
        params.set(name, value, raw)
        return self._replace(params=params)

    def without_param(self, name: str) -> "UrlArchive":
        """Return a copy without a query parameter."""
        params = self._components.params.copy()
        params.remove(name)
        return self._replace(params=params)

    def to_url(self) -> Url:
        """Return a mutable Url with the same components."""
        return Url._from_components(self._components.copy())
