"""Request/response value types shared across the networking layer."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

from requests.structures import CaseInsensitiveDict

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

DEFAULT_PORTS: Mapping[str, int] = MappingProxyType({"http": 80, "https": 443})


class Origin(NamedTuple):
    """Connection target; the key of a client's connection pool."""

    scheme: str
    host: str
    port: int


class StatusCategory(Enum):
    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5

    @classmethod
    def for_status(cls, status_code: int) -> StatusCategory:
        """Classify a status code by its hundreds digit."""
        try:
            return cls(status_code // 100)
        except ValueError:
            raise ValueError(f"unsupported status code: {status_code}") from None


def _empty_headers() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Request:
    """A single outbound HTTP request.

    Header keys are stored exactly as given; lookups are case-sensitive.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=_empty_headers)
    body: Any = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"unsupported HTTP method: {self.method}")
        object.__setattr__(self, "method", method)
        object.__setattr__(
            self, "headers", MappingProxyType(dict(self.headers))
        )


@dataclass(frozen=True)
class Response:
    """An HTTP response as returned by a connection.

    4xx and 5xx responses are ordinary values; callers inspect
    ``status_code`` or ``category`` themselves.
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=_empty_headers)
    content: bytes = b""
    url: str = ""
    reason: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "headers",
            MappingProxyType(CaseInsensitiveDict(self.headers)),
        )

    @property
    def category(self) -> StatusCategory | None:
        """Return the status class, or None for codes outside 100-599."""
        if not 100 <= self.status_code < 600:
            return None
        return StatusCategory.for_status(self.status_code)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content)
