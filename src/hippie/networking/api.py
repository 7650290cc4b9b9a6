"""Single-endpoint convenience wrapper."""

from __future__ import annotations

from .client import HttpClient
from .config import HttpClientConfig, VerifyMode
from .request import normalize_uri
from .types import Request, Response


class Api:
    """Talk to one fixed URL without default headers.

    The underlying client is created on first use.
    """

    def __init__(self, url: str, *, verify_none: bool = False) -> None:
        self.url = normalize_uri(url)
        self.verify_mode = (
            VerifyMode.VERIFY_NONE if verify_none else VerifyMode.VERIFY_PEER
        )
        self._client: HttpClient | None = None

    @property
    def client(self) -> HttpClient:
        if self._client is None:
            self._client = HttpClient(
                HttpClientConfig(default_headers={}, verify_mode=self.verify_mode)
            )
        return self._client

    def get(self) -> bytes:
        """GET the URL and return the response body."""
        return self.client.get(self.url).content

    def execute(self, request: Request) -> Response:
        return self.client.execute(self.url, request)
