"""Client, connection, request building and retry for hippie."""

from .api import Api
from .auth import basic_auth, bearer_auth
from .client import HttpClient
from .config import DEFAULT_HEADERS, HttpClientConfig, VerifyMode
from .connection import ClientCertificateAdapter, Connection
from .errors import (
    TRANSIENT_ERRORS,
    HippieError,
    InvalidURIError,
    SerializationError,
    is_transient,
)
from .mapper import BodyMapper, ContentTypeMapper, JsonMapper
from .request import build_request, normalize_uri, origin_of
from .retry import RetryExecutor
from .types import Origin, Request, Response, StatusCategory

__all__ = [
    "Api",
    "BodyMapper",
    "ClientCertificateAdapter",
    "Connection",
    "ContentTypeMapper",
    "DEFAULT_HEADERS",
    "HippieError",
    "HttpClient",
    "HttpClientConfig",
    "InvalidURIError",
    "JsonMapper",
    "Origin",
    "Request",
    "Response",
    "RetryExecutor",
    "SerializationError",
    "StatusCategory",
    "TRANSIENT_ERRORS",
    "VerifyMode",
    "basic_auth",
    "bearer_auth",
    "build_request",
    "is_transient",
    "normalize_uri",
    "origin_of",
]
