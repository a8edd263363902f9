"""src/serpurl/exceptions.py

Serpurl Exceptions hierarchy.
"""

from typing import Optional


class SerpUrlError(Exception):
    """Base exception for all Serpurl errors."""


class ParseError(SerpUrlError, ValueError):
    """
    The input string violates the RFC 3986 generic URI syntax.

    No partial object is ever returned alongside this error.
    """

    def __init__(self, message: str = "Malformed URI", url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class InvalidArgumentError(SerpUrlError, ValueError):
    """
    An argument cannot be used for the requested operation.

    Raised by ``resolve`` for an unsupported output selector or a base
    URL that lacks a scheme, and by ``set_port`` for an invalid port.
    """
