"""Request construction: URI normalization, header merging, body mapping."""

from __future__ import annotations

from typing import Any, Mapping, Sized, Union
from urllib.parse import ParseResult, SplitResult, urlsplit

from .errors import InvalidURIError
from .mapper import BodyMapper
from .types import DEFAULT_PORTS, Origin, Request

URI = Union[str, SplitResult, ParseResult]


def _as_url(uri: URI) -> str:
    if isinstance(uri, (SplitResult, ParseResult)):
        return uri.geturl()
    return str(uri)


def normalize_uri(uri: URI) -> str:
    """Return ``uri`` as an absolute http(s) URL string.

    Raises:
        InvalidURIError: If the URI has no http(s) scheme, no host, or a
            malformed port.
    """
    url = _as_url(uri)
    origin_of(url)
    return url


def origin_of(uri: URI) -> Origin:
    """Extract the (scheme, host, port) pool key of ``uri``."""
    url = _as_url(uri)
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme not in DEFAULT_PORTS:
        raise InvalidURIError(f"unsupported URI scheme in {url!r}")
    if not parts.hostname:
        raise InvalidURIError(f"URI has no host: {url!r}")
    try:
        port = parts.port
    except ValueError as exc:
        raise InvalidURIError(f"invalid port in {url!r}") from exc
    return Origin(scheme, parts.hostname, port or DEFAULT_PORTS[scheme])


def _is_empty(body: Any) -> bool:
    return body is None or (isinstance(body, Sized) and len(body) == 0)


def build_request(
    method: str,
    uri: URI,
    headers: Mapping[str, str] | None,
    body: Any,
    default_headers: Mapping[str, str],
    mapper: BodyMapper,
) -> Request:
    """Build a request with merged headers and a mapped body.

    Per-call headers win over defaults. An empty body is never mapped and
    leaves the request without a body.
    """
    final_headers = dict(default_headers)
    final_headers.update(headers or {})
    mapped = None if _is_empty(body) else mapper.map(final_headers, body)
    return Request(
        method=method,
        url=normalize_uri(uri),
        headers=final_headers,
        body=mapped,
    )
