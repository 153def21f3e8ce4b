"""In-memory approval store for testing and development."""

from reviews.approvals.port import ApprovalStorePort
from reviews.exceptions import ApprovalsUnavailable, PersistenceFailure


class FakeApprovalStore(ApprovalStorePort):
    """Keeps approvals in a dict; reads and writes can be made to fail."""

    def __init__(self, approvals: dict[str, bool] | None = None):
        super().__init__()
        self.approvals = dict(approvals or {})
        self.fail_reads = False
        self.fail_writes = False
        self.save_count = 0

    def configure(self, fail_reads: bool = False, fail_writes: bool = False):
        """Configure the fake store behavior for testing."""
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def load(self) -> dict[str, bool]:
        if self.fail_reads:
            raise ApprovalsUnavailable("Approval store unavailable")
        return dict(self.approvals)

    def save(self, approvals: dict[str, bool]) -> None:
        if self.fail_writes:
            raise PersistenceFailure("Approval store is read-only")
        self.approvals = dict(approvals)
        self.save_count += 1
