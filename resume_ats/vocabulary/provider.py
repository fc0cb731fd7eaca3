from __future__ import annotations

from typing import Protocol


class VocabularyProvider(Protocol):
    def terms(self) -> tuple[str, ...]:
        """Return the reference terms in their canonical order."""
