"""Review source port — abstract interface for raw review providers.

The query pipeline programs against this port; adapters are swapped via
configuration.
"""

from abc import ABC, abstractmethod
from typing import Any


class ReviewSourcePort(ABC):
    """Abstract interface for raw review sources."""

    name: str = "hostaway"

    @abstractmethod
    def load(self) -> list[dict[str, Any]]:
        """Return every raw review record.

        Raises:
            SourceUnavailable: when the source cannot be read or is malformed.
        """
        ...
