"""Response error extraction for load test observability.

Parses SwiftCart API error responses into human-readable messages.
Handles three response shapes:

- Request validation (400): {"error": [{"loc": [...], "msg": "...", "type": "..."}]}
- Domain errors (400/404): {"error": "msg"} or {"error": {"field": ["msg"]}}
- Auth errors (401): {"detail": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def _validation_errors(errors: list) -> str:
    parts = []
    for err in errors:
        if not isinstance(err, dict):
            parts.append(str(err))
            continue
        loc = ".".join(str(p) for p in err.get("loc", []))
        msg = err.get("msg", str(err))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return " | ".join(parts)


def extract_error_detail(response: Response) -> str:
    """Extract a compact error message from an API error response.

    Unparseable bodies fall back to the raw text, truncated.
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    if "error" in body:
        error = body["error"]
        if isinstance(error, list):
            return _validation_errors(error)
        if isinstance(error, dict):
            return " | ".join(f"{k}: {v}" for k, v in error.items())
        return str(error)

    if "detail" in body:
        return str(body["detail"])

    return str(body)[:300]
