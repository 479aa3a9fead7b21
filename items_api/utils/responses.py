"""Helpers for consistent JSON responses."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify


def ok(data: Any, status_code: int = 200, headers: dict[str, str] | None = None) -> Response:
    """Success response: the payload itself is the body."""

    resp = jsonify(data)
    resp.status_code = status_code
    if headers:
        resp.headers.update(headers)
    return resp


def no_content() -> Response:
    """Empty 204 response."""

    return Response(status=204)


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> Response:
    """Error response."""

    resp = jsonify({"error": {"code": code, "message": message, "details": details}})
    resp.status_code = status_code
    return resp
