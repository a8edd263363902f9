"""utils/validators.py

Validation utilities for Serpurl.
"""

import re
from typing import Any

MAX_PORT = 65535

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_FORBIDDEN_RE = re.compile(r"[\x00-\x20\x7f-\U0010ffff]")
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_valid_scheme(scheme: str) -> bool:
    """Check ``ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )``."""
    return bool(_SCHEME_RE.match(scheme))


def is_valid_port(port: Any) -> bool:
    """Check that ``port`` is an int in the TCP/UDP range."""
    return isinstance(port, int) and not isinstance(port, bool) and 0 <= port <= MAX_PORT


def find_forbidden_char(text: str) -> int:
    """
    Find the first whitespace, control or non-ASCII character.

    Returns:
        Index of the offending character, or -1 if there is none.
    """
    match = _FORBIDDEN_RE.search(text)
    return match.start() if match else -1


def has_bad_percent_escape(text: str) -> bool:
    """Check for a ``%`` not followed by two hex digits."""
    return bool(_BAD_PERCENT_RE.search(text))
