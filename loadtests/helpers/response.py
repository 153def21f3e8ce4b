"""Response error extraction for load test observability.

Parses Guest Reviews API error responses into human-readable messages.
Handles two response shapes:

- Review service errors (400/500): {"error": "msg"}
- Framework errors (404/405): {"detail": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    if "error" in body:
        return str(body["error"])

    if "detail" in body:
        return str(body["detail"])

    return str(body)[:300]
