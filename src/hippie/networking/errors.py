"""Error types and the transient-failure taxonomy for the networking layer.

Transport errors are never wrapped: they reach callers as the exception
objects raised by ``requests``, ``urllib3`` or the socket layer. The
``TRANSIENT_ERRORS`` tuple and ``is_transient`` decide which of them the
retry executor may absorb.
"""

from __future__ import annotations

import errno
import http.client
import socket
import ssl

import requests
import urllib3.exceptions


class HippieError(Exception):
    """Base class for errors raised by hippie itself."""


class InvalidURIError(HippieError, ValueError):
    """Raised when a target URI cannot be used for a request."""


class SerializationError(HippieError, ValueError):
    """Raised when a request body cannot be serialized."""


TRANSIENT_ERRORS: tuple[type[BaseException], ...] = (
    EOFError,
    ConnectionRefusedError,
    ConnectionResetError,
    TimeoutError,
    socket.timeout,
    socket.gaierror,
    ssl.SSLError,
    http.client.HTTPException,
    urllib3.exceptions.ProtocolError,
    urllib3.exceptions.TimeoutError,
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
    requests.exceptions.ChunkedEncodingError,
)

# Raw socket errors that only carry their kind in errno.
_TRANSIENT_ERRNOS = frozenset({errno.EHOSTUNREACH, errno.EINVAL})

_NEVER_TRANSIENT: tuple[type[BaseException], ...] = (
    http.client.InvalidURL,
    HippieError,
)


def is_transient(error: BaseException) -> bool:
    """Return True when ``error`` is worth retrying."""
    if isinstance(error, _NEVER_TRANSIENT):
        return False
    if isinstance(error, TRANSIENT_ERRORS):
        return True
    return isinstance(error, OSError) and error.errno in _TRANSIENT_ERRNOS
