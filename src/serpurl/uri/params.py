"""src/serpurl/uri/params.py

Ordered query parameter store for Serpurl.
"""

from typing import Any, Dict, Iterator, Mapping, Optional

from serpurl.utils.encoding import decode_query_component, encode_query_component

__all__ = ["QueryParam", "QueryParams"]


class QueryParam:
    """
    A single query parameter.

    Attributes are read-only; replacing a parameter in a store swaps the
    whole object. Non-string values are stored as ``str(value)``.
    """

    __slots__ = ("_name", "_value", "_raw", "_text")

    def __init__(self, name: str, value: Any, raw: bool = False):
        self._name = str(name)
        self._value = None if value is None else str(value)
        self._raw = raw
        self._text: Optional[str] = None

    @classmethod
    def from_pair(cls, pair: str) -> "QueryParam":
        """
        Build a parameter from one encoded ``name=value`` pair.

        The name and value are decoded, and the pair text is kept so that
        :meth:`format` gives it back unchanged.

        Args:
            pair: Encoded pair, without ``&``.
        """
        if "=" in pair:
            name, value = pair.split("=", 1)
            param = cls(decode_query_component(name), decode_query_component(value))
        else:
            param = cls(decode_query_component(pair), None)
        param._text = pair
        return param

    def get_name(self) -> str:
        """Parameter name."""
        return self._name

    def get_value(self) -> Optional[str]:
        """Parameter value, ``None`` for a bare name (``?flag``)."""
        return self._value

    def is_raw(self) -> bool:
        """Whether the value is emitted without encoding."""
        return self._raw

    def format(self) -> str:
        """
        Serialize as ``name=value``.

        A parameter read from a query string gives back its original text.
        Otherwise the name is always encoded, and the value is encoded with
        spaces as ``+`` unless the raw flag is set, in which case it is
        inserted verbatim. A ``None`` value yields the bare encoded name.
        """
        if self._text is not None:
            return self._text
        name = encode_query_component(self._name)
        if self._value is None:
            return name
        value = self._value if self._raw else encode_query_component(self._value)
        return f"{name}={value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParam):
            return NotImplemented
        return (self._name, self._value, self._raw) == (
            other._name,
            other._value,
            other._raw,
        )

    def __hash__(self) -> int:
        return hash((self._name, self._value, self._raw))

    def __repr__(self) -> str:
        return f"QueryParam({self._name!r}, {self._value!r}, raw={self._raw!r})"


class QueryParams(Mapping[str, QueryParam]):
    """
    Insertion-ordered mapping of parameter name to :class:`QueryParam`.

    Setting an existing name replaces its entry in place, so the name
    keeps its original position. Removing a name keeps the relative order
    of the remaining entries. Names are matched exactly, without any
    percent-decoding.
    """

    __slots__ = ("_params",)

    def __init__(self, params: Optional[Mapping[str, Any]] = None):
        self._params: Dict[str, QueryParam] = {}
        if params:
            for name, value in params.items():
                # A ready-made QueryParam is keyed by its own name
                if isinstance(value, QueryParam):
                    self._params[value.get_name()] = value
                else:
                    self.set(name, value)

    @classmethod
    def from_query_string(cls, query: str) -> "QueryParams":
        """
        Build a store from an encoded query string.

        Pairs are split on ``&`` and on the first ``=``; names and values
        are decoded, and each pair keeps its encoded text for output. Empty
        pairs are skipped. A repeated name keeps the position of its first
        occurrence and the value of its last.

        Args:
            query: Query string without the leading ``?``.

        Returns:
            A new QueryParams.
        """
        store = cls()
        for pair in query.split("&"):
            if not pair:
                continue
            param = QueryParam.from_pair(pair)
            store._params[param.get_name()] = param
        return store

    def __getitem__(self, name: str) -> QueryParam:
        return self._params[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def set(self, name: str, value: Any, raw: bool = False) -> None:
        """
        Set a parameter.

        Args:
            name: Parameter name (exact match).
            value: Parameter value (stored as ``str``), ``None`` for a bare name.
            raw: Emit the value without encoding.
        """
        param = QueryParam(name, value, raw)
        self._params[param.get_name()] = param

    def remove(self, name: str) -> None:
        """Remove a parameter; absent names are ignored."""
        self._params.pop(name, None)

    def get_value(self, name: str, default: Any = None) -> Any:
        """
        Get a parameter value.

        Args:
            name: Parameter name (exact match).
            default: Returned when the parameter is absent.

        Returns:
            The stored value, or ``default``.
        """
        param = self._params.get(name)
        if param is None:
            return default
        return param.get_value()

    def copy(self) -> "QueryParams":
        """Return an independent store with the same entries."""
        return QueryParams(self._params)

    def to_query_string(self) -> str:
        """Serialize all parameters joined by ``&``."""
        return "&".join(param.format() for param in self._params.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return list(self._params.values()) == list(other._params.values())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"QueryParams({list(self._params.values())!r})"
