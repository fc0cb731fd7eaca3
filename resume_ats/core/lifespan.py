from contextlib import asynccontextmanager
import logging

from resume_ats.scoring.analyzer import get_default_analyzer
from resume_ats.semantic.embeddings import SentenceTransformerEmbeddingService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    analyzer = get_default_analyzer()

    service = analyzer.embedding_service
    if isinstance(service, SentenceTransformerEmbeddingService):
        try:
            service.warmup(analyzer.semantic_scorer.vocabulary)
        except Exception as exc:
            logger.warning("embedding_warmup_failed model=%s reason=%s", service.model_name, exc)
            analyzer.semantic_scorer.embedding_service = None

    lemmatizer = analyzer.lemmatizer
    if lemmatizer is not None:
        try:
            lemmatizer.lemmatize("Developed services")
        except Exception as exc:
            logger.warning("lemmatizer_warmup_failed reason=%s", exc)
            analyzer.semantic_scorer.lemmatizer = None

    app.state.analyzer = analyzer
    logger.info(
        "resume_analyzer_ready semantic=%s vocabulary_terms=%s",
        analyzer.semantic_scorer.available,
        len(analyzer.semantic_scorer.vocabulary),
    )
    yield
