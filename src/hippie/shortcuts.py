"""Module-level request functions backed by a default client.

The default client is an ordinary ``HttpClient`` built from
``HttpClientConfig()`` on first use. Replace it with
``set_default_client`` or pass ``client=`` per call.
"""

from __future__ import annotations

from threading import Lock
from typing import Any, Mapping

from .networking.client import Callback, HttpClient
from .networking.request import URI

_default_client: HttpClient | None = None
_default_lock = Lock()


def default_client() -> HttpClient:
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = HttpClient()
        return _default_client


def set_default_client(client: HttpClient | None) -> HttpClient | None:
    """Install ``client`` as the default and return the previous one.

    Passing ``None`` makes the next call build a fresh default client.
    """
    global _default_client
    with _default_lock:
        previous, _default_client = _default_client, client
    return previous


def _client(client: HttpClient | None) -> HttpClient:
    return client if client is not None else default_client()


def get(
    uri: URI,
    *,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    callback: Callback[Any] | None = None,
    client: HttpClient | None = None,
) -> Any:
    return _client(client).get(uri, headers=headers, body=body, callback=callback)


def post(
    uri: URI,
    *,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    callback: Callback[Any] | None = None,
    client: HttpClient | None = None,
) -> Any:
    return _client(client).post(uri, headers=headers, body=body, callback=callback)


def put(
    uri: URI,
    *,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    callback: Callback[Any] | None = None,
    client: HttpClient | None = None,
) -> Any:
    return _client(client).put(uri, headers=headers, body=body, callback=callback)


def patch(
    uri: URI,
    *,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    callback: Callback[Any] | None = None,
    client: HttpClient | None = None,
) -> Any:
    return _client(client).patch(uri, headers=headers, body=body, callback=callback)


def delete(
    uri: URI,
    *,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    callback: Callback[Any] | None = None,
    client: HttpClient | None = None,
) -> Any:
    return _client(client).delete(uri, headers=headers, body=body, callback=callback)
