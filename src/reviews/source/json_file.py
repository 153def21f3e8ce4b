"""JSON file review source.

Reads a Hostaway API dump of the form ``{"result": [...]}`` from disk on
every call, so edits to the file are picked up without a restart.
"""

import json
from pathlib import Path
from typing import Any

import structlog

from reviews.exceptions import SourceUnavailable
from reviews.source.port import ReviewSourcePort

logger = structlog.get_logger(__name__)


class JsonFileReviewSource(ReviewSourcePort):
    def __init__(self, path: str | Path, name: str = "hostaway"):
        self.path = Path(path)
        self.name = name

    def load(self) -> list[dict[str, Any]]:
        try:
            with self.path.open(encoding="utf-8") as fh:
                parsed = json.load(fh)
        except FileNotFoundError as exc:
            raise SourceUnavailable(f"Review source {self.path} not found") from exc
        except (OSError, ValueError) as exc:
            raise SourceUnavailable(f"Review source {self.path} is unreadable: {exc}") from exc

        if not isinstance(parsed, dict) or not isinstance(parsed.get("result"), list):
            raise SourceUnavailable(f"Review source {self.path} has no 'result' array")

        for position, record in enumerate(parsed["result"]):
            if not isinstance(record, dict):
                raise SourceUnavailable(
                    f"Review source {self.path} record {position} is {type(record).__name__}, not an object"
                )

        logger.debug("review_source_loaded", path=str(self.path), records=len(parsed["result"]))
        return parsed["result"]
