"""Authorization header helpers."""

from __future__ import annotations

import base64


def basic_auth(username: str, password: str) -> str:
    credentials = f"{username}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def bearer_auth(token: str) -> str:
    return f"Bearer {token}"
