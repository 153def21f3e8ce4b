"""Approval store port — persistence for the per-review moderation flag."""

import threading
from abc import ABC, abstractmethod


class ApprovalStorePort(ABC):
    """Abstract interface for approval stores.

    ``lock`` serializes read-modify-write cycles issued through this
    instance; it does not coordinate separate processes.
    """

    def __init__(self):
        self.lock = threading.Lock()

    @abstractmethod
    def load(self) -> dict[str, bool]:
        """Return the full ``review id -> approved`` mapping.

        Raises:
            ApprovalsUnavailable: when existing state cannot be read.
        """
        ...

    @abstractmethod
    def save(self, approvals: dict[str, bool]) -> None:
        """Replace the stored mapping with ``approvals``.

        Raises:
            PersistenceFailure: when the mapping cannot be written.
        """
        ...
