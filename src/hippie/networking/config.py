"""Configuration models for the HttpClient."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..version import __version__
from .mapper import BodyMapper, ContentTypeMapper

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": f"hippie/{__version__}",
    }
)


class VerifyMode(Enum):
    """TLS peer verification mode."""

    VERIFY_PEER = "verify_peer"
    VERIFY_NONE = "verify_none"


def _default_headers() -> Mapping[str, str]:
    """Return a fresh copy of the JSON default headers."""

    return MappingProxyType(dict(DEFAULT_HEADERS))


def _default_logger() -> logging.Logger:
    return logging.getLogger("hippie")


def _as_pem(value: bytes | str | None) -> bytes | None:
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration for HttpClient behavior.

    Connections read this once, when they are created. Client TLS
    authentication is applied only when both ``certificate`` and ``key``
    are set.
    """

    default_headers: Mapping[str, str] = field(default_factory=_default_headers)
    read_timeout_seconds: float = 10.0
    open_timeout_seconds: float = 10.0
    verify_mode: VerifyMode = VerifyMode.VERIFY_PEER
    certificate: bytes | None = None
    key: bytes | None = None
    passphrase: str | None = None
    follow_redirects: int = 0
    logger: logging.Logger | None = field(default_factory=_default_logger)
    mapper: BodyMapper = field(default_factory=ContentTypeMapper)

    def __post_init__(self) -> None:
        if self.follow_redirects < 0:
            raise ValueError("follow_redirects must be >= 0")
        if self.read_timeout_seconds <= 0:
            raise ValueError("read_timeout_seconds must be > 0")
        if self.open_timeout_seconds <= 0:
            raise ValueError("open_timeout_seconds must be > 0")
        if not isinstance(self.verify_mode, VerifyMode):
            raise ValueError(f"unknown verify_mode: {self.verify_mode!r}")

        object.__setattr__(self, "certificate", _as_pem(self.certificate))
        object.__setattr__(self, "key", _as_pem(self.key))

        # Freeze copied headers to avoid post-init mutation side effects.
        object.__setattr__(
            self,
            "default_headers",
            MappingProxyType(dict(self.default_headers)),
        )

    @property
    def client_tls_enabled(self) -> bool:
        return self.certificate is not None and self.key is not None

    @property
    def timeout(self) -> tuple[float, float]:
        """Return the (connect, read) timeout pair used by requests."""
        return (self.open_timeout_seconds, self.read_timeout_seconds)
