"""JSON file approval store.

The whole mapping lives in one small JSON object. Writes go to a sibling
temporary file that is then renamed over the original, so readers see
either the old or the new mapping and never a partial one.
"""

import json
import os
import tempfile
from pathlib import Path

import structlog

from reviews.approvals.port import ApprovalStorePort
from reviews.exceptions import ApprovalsUnavailable, PersistenceFailure

logger = structlog.get_logger(__name__)


class JsonFileApprovalStore(ApprovalStorePort):
    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)

    def load(self) -> dict[str, bool]:
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            raise ApprovalsUnavailable(f"Approval store {self.path} is unreadable: {exc}") from exc

        if not isinstance(data, dict):
            raise ApprovalsUnavailable(f"Approval store {self.path} is not a JSON object")
        return data

    def save(self, approvals: dict[str, bool]) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(approvals, fh, indent=2)
                fh.write("\n")
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceFailure(f"Could not write approval store {self.path}: {exc}") from exc

        logger.debug("approval_store_written", path=str(self.path), entries=len(approvals))
