from __future__ import annotations
from abc import ABC, abstractmethod
from ..models import Finding


class BaseDetector(ABC):
    """Finds identifiers in free text.

    Each Finding carries the matched span as written (separators included)
    together with its kind, category and masked rendering.
    """

    @abstractmethod
    def detect(self, text: str) -> list[Finding]:
        """Return the valid identifiers in text, ordered by start offset."""
        ...
