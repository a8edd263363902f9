import pytest

from serpurl import Url, UrlArchive

RFC3986_BASE = "http://a/b/c/d;p?q"


@pytest.fixture
def rfc_base() -> Url:
    """Base URL used by the RFC 3986 section 5.4 examples."""
    return Url.from_string(RFC3986_BASE)


@pytest.fixture
def rfc_archive() -> UrlArchive:
    """Immutable form of the RFC 3986 section 5.4 base URL."""
    return UrlArchive.from_string(RFC3986_BASE)
