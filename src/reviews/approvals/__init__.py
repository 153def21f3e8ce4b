"""Approval store abstraction — pluggable moderation-state persistence."""

from reviews.config import load_settings

_store_instance = None


def get_approval_store():
    """Return the configured approval store (singleton).

    Uses the JSON file store by default. Set APPROVAL_STORE_ADAPTER=fake
    for an in-memory store.
    """
    global _store_instance
    if _store_instance is None:
        settings = load_settings()
        adapter = settings.approval_store_adapter
        if adapter == "json":
            from reviews.approvals.json_file import JsonFileApprovalStore

            _store_instance = JsonFileApprovalStore(settings.approvals_path)
        elif adapter == "fake":
            from reviews.approvals.fake_adapter import FakeApprovalStore

            _store_instance = FakeApprovalStore()
        else:
            raise ValueError(f"Unknown approval store adapter: {adapter}")
    return _store_instance


def set_approval_store(store):
    """Install an explicit approval store (useful for testing)."""
    global _store_instance
    _store_instance = store


def reset_approval_store():
    """Reset the approval store singleton (useful for testing)."""
    global _store_instance
    _store_instance = None
