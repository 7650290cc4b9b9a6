"""Request body mappers.

A mapper turns a structured request body into the text sent on the wire.
The client accepts any object with a matching ``map`` method.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Protocol

from .errors import SerializationError

_RAW_BODY_TYPES = (str, bytes, bytearray)


class BodyMapper(Protocol):
    def map(self, headers: Mapping[str, str], body: Any) -> Any: ...


def _to_json(body: Any) -> str:
    try:
        return json.dumps(body, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"body is not JSON serializable: {exc}") from exc


class ContentTypeMapper:
    """Serialize bodies to JSON when the declared content type is JSON.

    Only the exact ``Content-Type`` key is consulted; a ``content-type``
    header leaves the body untouched.
    """

    def map(self, headers: Mapping[str, str], body: Any) -> Any:
        if isinstance(body, _RAW_BODY_TYPES):
            return body
        content_type = headers.get("Content-Type") or ""
        if "json" in content_type:
            return _to_json(body)
        return body


class JsonMapper:
    """Serialize every structured body to JSON, ignoring headers."""

    def map(self, headers: Mapping[str, str], body: Any) -> Any:
        if isinstance(body, _RAW_BODY_TYPES):
            return body
        return _to_json(body)
