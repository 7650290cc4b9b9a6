"""Synchronous JSON-first HTTP client.

The client pools one Connection per origin, builds requests with the
configured default headers and body mapper, and follows redirects up to
the configured limit. Retrying is opt-in through ``with_retry``.
"""

from __future__ import annotations

from dataclasses import replace
from threading import Lock
from typing import Any, Callable, Mapping, TypeVar

from .config import HttpClientConfig
from .connection import Connection
from .request import URI, build_request, origin_of
from .retry import RetryExecutor
from .types import Origin, Request, Response

T = TypeVar("T")
Callback = Callable[[Request, Response], T]


class HttpClient:
    """Core HTTP client (sync).

    Connections are created lazily, one per (scheme, host, port), and kept
    until the client is closed. The pool is never pruned.
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        """Create a new HttpClient.

        Args:
            config: Timeouts, TLS, headers and redirect settings. Defaults
                to ``HttpClientConfig()``.
        """
        self._config = config if config is not None else HttpClientConfig()
        self._connections: dict[Origin, Connection] = {}
        self._pool_lock = Lock()
        self._retry = RetryExecutor(self._config.logger)

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    @property
    def follow_redirects(self) -> int:
        return self._config.follow_redirects

    @property
    def connections(self) -> Mapping[Origin, Connection]:
        return dict(self._connections)

    def reconfigure(self, **changes: Any) -> None:
        """Replace config fields for connections created from now on.

        Connections already in the pool keep the config they were built
        with.
        """
        self._config = replace(self._config, **changes)
        self._retry.logger = self._config.logger

    def connection_for(self, uri: URI) -> Connection:
        """Return the pooled connection for ``uri``'s origin."""
        origin = origin_of(uri)
        with self._pool_lock:
            connection = self._connections.get(origin)
            if connection is None:
                connection = Connection(*origin, config=self._config)
                self._connections[origin] = connection
        return connection

    def _request_for(
        self,
        method: str,
        uri: URI,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> Request:
        return build_request(
            method,
            uri,
            headers,
            body,
            self._config.default_headers,
            self._config.mapper,
        )

    def execute(
        self,
        uri: URI,
        request: Request,
        *,
        limit: int | None = None,
        callback: Callback[Any] | None = None,
    ) -> Any:
        """Send ``request`` and follow redirects.

        Each redirect hop is re-issued as a GET with the default headers
        and no body. When ``limit`` hops have been followed the last
        redirect response is returned unresolved.

        Args:
            uri: Target whose origin selects the pooled connection.
            request: Prepared request.
            limit: Redirects to follow; defaults to ``follow_redirects``.
            callback: Optional ``callback(request, response)`` whose return
                value replaces the response.

        Returns:
            The final response, or the callback's result.
        """
        remaining = self.follow_redirects if limit is None else limit
        while True:
            connection = self.connection_for(uri)
            response = connection.run(request)
            location = response.headers.get("Location")
            if remaining <= 0 or not response.is_redirect or not location:
                break
            uri = connection.build_url(location)
            request = self._request_for("GET", uri)
            remaining -= 1
        if callback is not None:
            return callback(request, response)
        return response

    def _run(
        self,
        method: str,
        uri: URI,
        headers: Mapping[str, str] | None,
        body: Any,
        callback: Callback[Any] | None,
    ) -> Any:
        request = self._request_for(method, uri, headers, body)
        return self.execute(uri, request, callback=callback)

    def get(
        self,
        uri: URI,
        *,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        callback: Callback[Any] | None = None,
    ) -> Any:
        """Perform an HTTP GET request.

        Args:
            uri: Absolute http(s) URL, as a string or parsed URL.
            headers: Per-request headers merged over the defaults.
            body: Optional body; empty bodies are not sent.
            callback: Optional ``callback(request, response)``.

        Returns:
            The response, or the callback's result when one is given.
        """
        return self._run("GET", uri, headers, body, callback)

    def post(
        self,
        uri: URI,
        *,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        callback: Callback[Any] | None = None,
    ) -> Any:
        """Perform an HTTP POST request; see ``get`` for arguments."""
        return self._run("POST", uri, headers, body, callback)

    def put(
        self,
        uri: URI,
        *,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        callback: Callback[Any] | None = None,
    ) -> Any:
        return self._run("PUT", uri, headers, body, callback)

    def patch(
        self,
        uri: URI,
        *,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        callback: Callback[Any] | None = None,
    ) -> Any:
        return self._run("PATCH", uri, headers, body, callback)

    def delete(
        self,
        uri: URI,
        *,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        callback: Callback[Any] | None = None,
    ) -> Any:
        return self._run("DELETE", uri, headers, body, callback)

    def with_retry(
        self, operation: Callable[[HttpClient], T], *, retries: int | None = 3
    ) -> T:
        """Run ``operation(self)`` with retry on transient transport errors.

        Example:
            >>> client.with_retry(lambda c: c.get(url), retries=5)
        """
        return self._retry.run(lambda: operation(self), retries)

    def close(self) -> None:
        """Close every pooled connection and empty the pool."""
        with self._pool_lock:
            connections = list(self._connections.values())
            self._connections.clear()
        for connection in connections:
            connection.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
