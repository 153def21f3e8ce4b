"""Pydantic request/response schemas for the Reviews API.

The read envelope reuses ``QueryResult`` from the query service; only the
write path and error bodies need dedicated shapes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class ApproveReviewRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"approved": True}]}}

    # Left untyped so the strict boolean check happens in the mutator
    # and a wrong type is reported as 400, not coerced.
    approved: Any = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ApprovalResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"id": "hostaway-7453", "approved": True}]}}

    id: str
    approved: bool


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    source: str
