from __future__ import annotations

from resume_ats.core.config import Settings, settings as default_settings

from .embeddings import EmbeddingService, HashingEmbeddingService, SentenceTransformerEmbeddingService
from .lemmatizer import Lemmatizer, SpacyLemmatizer


def get_embedding_service(config: Settings | None = None) -> EmbeddingService | None:
    cfg = config or default_settings

    if cfg.embedding_backend == "sentence-transformers":
        return SentenceTransformerEmbeddingService(model_name=cfg.embedding_model)

    if cfg.embedding_backend == "hashing":
        return HashingEmbeddingService()

    if cfg.embedding_backend == "none":
        return None

    raise ValueError(f"Unsupported EMBEDDING_BACKEND='{cfg.embedding_backend}'")


def get_lemmatizer(config: Settings | None = None) -> Lemmatizer:
    cfg = config or default_settings
    return SpacyLemmatizer(model_name=cfg.spacy_model)
