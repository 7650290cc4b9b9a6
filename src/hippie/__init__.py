"""hippie: a JSON-first HTTP client on top of requests.

Typical use::

    from hippie import HttpClient, HttpClientConfig

    client = HttpClient(HttpClientConfig(follow_redirects=3))
    response = client.with_retry(lambda c: c.get("https://example.com/widgets"))
"""

from .networking import (
    Api,
    HttpClient,
    HttpClientConfig,
    HippieError,
    InvalidURIError,
    Request,
    Response,
    SerializationError,
    VerifyMode,
    basic_auth,
    bearer_auth,
)
from .shortcuts import (
    default_client,
    delete,
    get,
    patch,
    post,
    put,
    set_default_client,
)
from .version import __version__

__all__ = [
    "Api",
    "HippieError",
    "HttpClient",
    "HttpClientConfig",
    "InvalidURIError",
    "Request",
    "Response",
    "SerializationError",
    "VerifyMode",
    "__version__",
    "basic_auth",
    "bearer_auth",
    "default_client",
    "delete",
    "get",
    "patch",
    "post",
    "put",
    "set_default_client",
]
