"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state; nothing is shared across
users.
"""

from dataclasses import dataclass, field


@dataclass
class ModerationState:
    """Tracks the flags a simulated operator has set."""

    review_ids: list[str] = field(default_factory=list)
    approved: dict[str, bool] = field(default_factory=dict)
