from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from resume_ats.schemas.analysis import KeywordMatch, SemanticReport
from resume_ats.schemas.rubric import SemanticSettings

from .embeddings import EmbeddingService
from .keywords import keywords_from_lemmas, ordered_keywords
from .lemmatizer import Lemmatizer

logger = logging.getLogger(__name__)


class SemanticScorer:
    """Scores how much of a text's vocabulary sits near the reference terms.

    Keywords are taken in order of first appearance and truncated to
    ``settings.max_keywords``. Each keyword's best similarity
    (``1 - distance``) against the vocabulary decides a match; the score is
    ``min(matches * points_per_match, 1.0)``.

    Scoring never raises: a missing or failing embedding service or
    lemmatizer yields a zero score flagged as ``degraded``.
    """

    def __init__(
        self,
        embedding_service: EmbeddingService | None,
        lemmatizer: Lemmatizer | None,
        vocabulary: Sequence[str],
        settings: SemanticSettings | None = None,
    ) -> None:
        self.embedding_service = embedding_service
        self.lemmatizer = lemmatizer
        self.vocabulary = tuple(vocabulary)
        self.settings = settings or SemanticSettings()

    @property
    def available(self) -> bool:
        return self.embedding_service is not None and self.lemmatizer is not None

    def keywords(self, text: str) -> list[str]:
        if self.lemmatizer is None:
            return []
        return ordered_keywords(text, self.lemmatizer, min_length=self.settings.min_keyword_length)

    def score(self, text: str) -> float:
        return self.evaluate(text).score

    def evaluate(self, text: str) -> SemanticReport:
        if not text or not text.strip():
            return SemanticReport()
        if not self.available:
            logger.warning("semantic_score_degraded reason=service_unavailable")
            return SemanticReport(degraded=True)

        try:
            lemmas = self.lemmatizer.lemmatize(text)  # type: ignore[union-attr]
        except Exception as exc:
            logger.warning("semantic_score_degraded stage=lemmatize reason=%s", exc)
            return SemanticReport(degraded=True)

        keywords = keywords_from_lemmas(lemmas, min_length=self.settings.min_keyword_length)
        if not keywords:
            return SemanticReport()

        selected = keywords[: self.settings.max_keywords]
        try:
            matches = [self._best_match(keyword) for keyword in selected]
        except Exception as exc:
            logger.warning("semantic_score_degraded stage=distance reason=%s", exc)
            return SemanticReport(keywords_considered=selected, degraded=True)

        match_count = sum(1 for match in matches if match.matched)
        score = min(match_count * self.settings.points_per_match, 1.0)
        return SemanticReport(
            score=score,
            keywords_considered=selected,
            matches=matches,
            match_count=match_count,
        )

    def _similarity(self, word: str, term: str) -> float:
        distance = float(self.embedding_service.distance(word, term))  # type: ignore[union-attr]
        if math.isnan(distance):
            return 0.0
        return 1.0 - distance

    def _best_match(self, keyword: str) -> KeywordMatch:
        best_term: str | None = None
        best_similarity = 0.0
        for term in self.vocabulary:
            similarity = self._similarity(keyword, term)
            if similarity > best_similarity:
                best_similarity = similarity
                best_term = term
        return KeywordMatch(
            keyword=keyword,
            closest_term=best_term,
            similarity=round(best_similarity, 4),
            matched=best_similarity > self.settings.match_threshold,
        )

    def suggest_alternatives(self, word: str, limit: int = 5) -> list[str]:
        """Vocabulary terms closest to ``word``, nearest first."""
        target = (word or "").strip().lower()
        if not target or limit <= 0 or self.embedding_service is None:
            return []
        try:
            ranked = sorted(
                (term for term in self.vocabulary if term != target),
                key=lambda term: (-self._similarity(target, term), term),
            )
        except Exception as exc:
            logger.warning("alternatives_unavailable word=%s reason=%s", target, exc)
            return []
        return ranked[:limit]
