from __future__ import annotations

import json
from pathlib import Path

from .provider import VocabularyProvider


class LocalVocabulary(VocabularyProvider):
    def __init__(self, terms_path: str | Path | None = None) -> None:
        path = Path(terms_path) if terms_path else Path(__file__).with_name("professional_terms.json")
        self._terms = self._load_terms(path)

    @staticmethod
    def _load_terms(path: Path) -> tuple[str, ...]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, list):
            raise RuntimeError(f"Invalid vocabulary file '{path}': expected a JSON list of terms.")

        terms: list[str] = []
        seen: set[str] = set()
        for item in raw:
            term = str(item).strip().lower()
            if term and term not in seen:
                seen.add(term)
                terms.append(term)
        return tuple(terms)

    def terms(self) -> tuple[str, ...]:
        return self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().lower() in self._terms
