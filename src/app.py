"""Guest Reviews FastAPI application.

Serves normalized Hostaway reviews with filtering and per-listing
aggregation, and lets an operator toggle which reviews are shown publicly.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 5000 --reload
    python src/server.py
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from reviews.api import register_exception_handlers, review_router
from reviews.api.schemas import HealthResponse
from reviews.config import load_settings
from reviews.utils.logging import add_context, clear_context, configure_logging

configure_logging()

settings = load_settings()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Guest Reviews API",
    description="Hostaway review normalization, filtering, and moderation",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Bind a request id into the log context for the duration of a request."""
    request_id = request.headers.get("x-request-id") or uuid4().hex
    add_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_context()
    response.headers["x-request-id"] = request_id
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(review_router)
register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(source=settings.source_name)
