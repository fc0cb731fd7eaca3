from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache

from resume_ats.core.config import Settings
from resume_ats.core.config.scoring import (
    get_feedback_settings,
    get_scoring_rubric,
    get_semantic_settings,
)
from resume_ats.rules.structural import evaluate_rule_results
from resume_ats.schemas.analysis import ResumeAnalysis
from resume_ats.schemas.resume import ResumeRecord
from resume_ats.schemas.rubric import FeedbackSettings, ScoringRubric, SemanticSettings
from resume_ats.semantic.embeddings import EmbeddingService
from resume_ats.semantic.factory import get_embedding_service, get_lemmatizer
from resume_ats.semantic.keywords import extract_keywords
from resume_ats.semantic.lemmatizer import Lemmatizer
from resume_ats.semantic.scorer import SemanticScorer
from resume_ats.vocabulary import get_default_vocabulary

from .calculator import ScoreCalculator
from .feedback import pending_feedback, success_message

logger = logging.getLogger(__name__)


class ResumeAnalyzer:
    """Scores a résumé and turns the result into ordered suggestions.

    The embedding service and lemmatizer are shared by reference; build one
    analyzer per process and reuse it across requests.
    """

    def __init__(
        self,
        embedding_service: EmbeddingService | None,
        lemmatizer: Lemmatizer | None,
        *,
        vocabulary: Sequence[str] | None = None,
        rubric: ScoringRubric | None = None,
        semantic_settings: SemanticSettings | None = None,
        feedback_settings: FeedbackSettings | None = None,
    ) -> None:
        terms = vocabulary if vocabulary is not None else get_default_vocabulary().terms()
        self.semantic_scorer = SemanticScorer(
            embedding_service=embedding_service,
            lemmatizer=lemmatizer,
            vocabulary=terms,
            settings=semantic_settings,
        )
        self.calculator = ScoreCalculator(self.semantic_scorer, rubric=rubric)
        self.feedback_settings = feedback_settings or FeedbackSettings()

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "ResumeAnalyzer":
        embedding_service = get_embedding_service(config)
        if embedding_service is None:
            logger.warning("embedding_service_disabled semantic_bucket=0")
        return cls(
            embedding_service=embedding_service,
            lemmatizer=get_lemmatizer(config),
            rubric=get_scoring_rubric(),
            semantic_settings=get_semantic_settings(),
            feedback_settings=get_feedback_settings(),
        )

    @property
    def lemmatizer(self) -> Lemmatizer | None:
        return self.semantic_scorer.lemmatizer

    @property
    def embedding_service(self) -> EmbeddingService | None:
        return self.semantic_scorer.embedding_service

    def extract_keywords(self, text: str) -> set[str]:
        if self.lemmatizer is None:
            return set()
        return extract_keywords(
            text,
            self.lemmatizer,
            min_length=self.semantic_scorer.settings.min_keyword_length,
        )

    def semantic_score(self, text: str) -> float:
        return self.semantic_scorer.score(text)

    def suggest_alternatives(self, word: str, limit: int = 5) -> list[str]:
        return self.semantic_scorer.suggest_alternatives(word, limit=limit)

    def ats_score(self, resume: ResumeRecord) -> int:
        return self.calculator.ats_score(resume)

    def report(self, resume: ResumeRecord) -> ResumeAnalysis:
        breakdown = self.calculator.breakdown(resume)
        pending = pending_feedback(evaluate_rule_results(resume), breakdown.total, self.feedback_settings)
        is_complete = not pending
        feedback = [success_message(breakdown.total)] if is_complete else pending
        logger.debug(
            "resume_analyzed score=%s suggestions=%s semantic_matches=%s degraded=%s",
            breakdown.total,
            len(feedback),
            breakdown.semantic.match_count,
            breakdown.semantic.degraded,
        )
        return ResumeAnalysis(
            score=breakdown.total,
            feedback=feedback,
            breakdown=breakdown,
            is_complete=is_complete,
        )

    def analyze(self, resume: ResumeRecord) -> list[str]:
        return self.report(resume).feedback


@lru_cache(maxsize=1)
def get_default_analyzer() -> ResumeAnalyzer:
    return ResumeAnalyzer.from_settings()
