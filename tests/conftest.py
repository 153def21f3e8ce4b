import json
import os
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SAMPLE_SOURCE = ROOT / "mock" / "hostaway_reviews.json"


def pytest_sessionstart(session):
    """Quiet the application loggers before any module configures them."""
    os.environ.setdefault("ENVIRONMENT", "test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Drop cached adapters so every test resolves its own source and store."""
    from reviews.approvals import reset_approval_store
    from reviews.source import reset_review_source

    reset_review_source()
    reset_approval_store()

    yield

    reset_review_source()
    reset_approval_store()


@pytest.fixture()
def sample_records():
    """Raw records from the bundled Hostaway sample file."""
    return json.loads(SAMPLE_SOURCE.read_text(encoding="utf-8"))["result"]
