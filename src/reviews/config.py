"""Runtime configuration for the Guest Reviews service.

All settings come from environment variables so the same build can run
locally, under test, and in production without code changes.
"""

import os

from pydantic import BaseModel, Field

DEFAULT_SOURCE_PATH = "mock/hostaway_reviews.json"
DEFAULT_APPROVALS_PATH = "mock/approvals.json"


class Settings(BaseModel):
    review_source_path: str = DEFAULT_SOURCE_PATH
    approvals_path: str = DEFAULT_APPROVALS_PATH
    review_source_adapter: str = "json"
    approval_store_adapter: str = "json"
    source_name: str = "hostaway"
    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=1, le=65535)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])


def load_settings() -> Settings:
    """Build settings from the current environment."""
    origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return Settings(
        review_source_path=os.getenv("REVIEW_SOURCE_PATH", DEFAULT_SOURCE_PATH),
        approvals_path=os.getenv("APPROVALS_PATH", DEFAULT_APPROVALS_PATH),
        review_source_adapter=os.getenv("REVIEW_SOURCE_ADAPTER", "json").lower(),
        approval_store_adapter=os.getenv("APPROVAL_STORE_ADAPTER", "json").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT") or 5000),
        cors_allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )
