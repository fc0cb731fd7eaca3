from __future__ import annotations

import logging
import threading
from typing import Protocol

logger = logging.getLogger(__name__)


class Lemmatizer(Protocol):
    def lemmatize(self, text: str) -> list[str]:
        """Return word lemmas in text order, without punctuation or whitespace tokens."""


class SpacyLemmatizer(Lemmatizer):
    def __init__(self, model_name: str = "en_core_web_sm") -> None:
        self.model_name = model_name
        self._nlp = None
        self._lock = threading.Lock()

    def _get_nlp(self):
        if self._nlp is None:
            with self._lock:
                if self._nlp is None:
                    import spacy

                    logger.info("spacy_model_load model=%s", self.model_name)
                    # Only the tagger/lemmatizer chain is needed for lemmas.
                    self._nlp = spacy.load(self.model_name, disable=["parser", "ner"])
        return self._nlp

    def lemmatize(self, text: str) -> list[str]:
        if not text or not text.strip():
            return []
        doc = self._get_nlp()(text)
        lemmas: list[str] = []
        for token in doc:
            if token.is_punct or token.is_space:
                continue
            lemma = token.lemma_ or token.text
            lemmas.append(lemma)
        return lemmas
