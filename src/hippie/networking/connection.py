"""A transport handle bound to a single origin.

Each Connection owns one ``requests.Session`` configured from the client
config at construction time. It sends exactly one exchange per ``run``
call and leaves redirects and retries to its caller.
"""

from __future__ import annotations

import os
import ssl
import tempfile
from threading import Lock
from typing import Any

import requests
from requests.adapters import HTTPAdapter

from .config import HttpClientConfig, VerifyMode
from .types import DEFAULT_PORTS, Request, Response


class ClientCertificateAdapter(HTTPAdapter):
    """HTTPAdapter that presents a client certificate from an SSL context."""

    def __init__(self, ssl_context: ssl.SSLContext, **kwargs: Any) -> None:
        # HTTPAdapter.__init__ builds the pool manager, so set this first.
        self._ssl_context = ssl_context
        super().__init__(**kwargs)

    def init_poolmanager(self, *args: Any, **kwargs: Any) -> None:
        kwargs["ssl_context"] = self._ssl_context
        super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, *args: Any, **kwargs: Any) -> Any:
        kwargs["ssl_context"] = self._ssl_context
        return super().proxy_manager_for(*args, **kwargs)


def build_ssl_context(config: HttpClientConfig) -> ssl.SSLContext:
    """Build an SSL context carrying the configured client certificate.

    The PEM material only exists in memory, but ``load_cert_chain`` needs
    file paths, so it is staged in a private temporary directory that is
    removed before returning.
    """
    if not config.client_tls_enabled:
        raise ValueError("client certificate and key are both required")

    context = ssl.create_default_context()
    if config.verify_mode is VerifyMode.VERIFY_NONE:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

    with tempfile.TemporaryDirectory(prefix="hippie-tls-") as tmpdir:
        cert_path = os.path.join(tmpdir, "client.crt")
        key_path = os.path.join(tmpdir, "client.key")
        for path, pem in ((cert_path, config.certificate), (key_path, config.key)):
            with open(path, "wb") as handle:
                handle.write(pem)  # type: ignore[arg-type]
        context.load_cert_chain(
            cert_path, key_path, password=config.passphrase or None
        )
    return context


class Connection:
    """Execute request/response exchanges against one origin."""

    def __init__(
        self, scheme: str, host: str, port: int, config: HttpClientConfig
    ) -> None:
        self.scheme = scheme
        self.host = host
        self.port = port
        self._config = config
        self._logger = config.logger
        self._timeout = config.timeout
        self._verify = config.verify_mode is VerifyMode.VERIFY_PEER
        self._lock = Lock()
        self._session = self._build_session(config)

    @property
    def use_ssl(self) -> bool:
        return self.scheme == "https"

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    @property
    def timeout(self) -> tuple[float, float]:
        return self._timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    def _build_session(self, config: HttpClientConfig) -> requests.Session:
        session = requests.Session()
        # Outbound headers are exactly the ones on each Request.
        session.headers.clear()
        session.verify = self._verify
        if self.use_ssl and config.client_tls_enabled:
            adapter = ClientCertificateAdapter(build_ssl_context(config))
            session.mount("https://", adapter)
        return session

    def run(self, request: Request) -> Response:
        """Send ``request`` and return the response as received."""
        if self._logger is not None:
            self._logger.debug("-> %s %s", request.method, request.url)
        with self._lock:
            raw = self._session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body,
                timeout=self._timeout,
                allow_redirects=False,
                # Per-call verify is not overridden by REQUESTS_CA_BUNDLE.
                verify=self._verify,
            )
        response = Response(
            status_code=raw.status_code,
            headers=raw.headers,
            content=raw.content,
            url=raw.url or request.url,
            reason=raw.reason or "",
        )
        if self._logger is not None:
            self._logger.debug(
                "<- %s %s %s", response.status_code, response.reason, response.url
            )
        return response

    def build_url(self, path: str) -> str:
        """Resolve ``path`` against this connection's origin.

        Absolute URLs (anything starting with ``http``) pass through. Other
        values are taken relative to the origin root, not the current
        request path: ``next`` and ``../x`` become ``/next`` and ``/../x``.
        """
        if path.startswith("http"):
            return path
        if not path.startswith("/"):
            path = "/" + path
        netloc = f"[{self.host}]" if ":" in self.host else self.host
        if self.port != DEFAULT_PORTS.get(self.scheme):
            netloc = f"{netloc}:{self.port}"
        return f"{self.scheme}://{netloc}{path}"

    def close(self) -> None:
        self._session.close()

    def __repr__(self) -> str:
        return f"Connection({self.scheme!r}, {self.host!r}, {self.port!r})"
