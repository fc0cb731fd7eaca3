from .embeddings import (
    EmbeddingService,
    HashingEmbeddingService,
    SentenceTransformerEmbeddingService,
    cosine_distance,
    cosine_similarity,
)
from .keywords import extract_keywords, keywords_from_lemmas, ordered_keywords
from .lemmatizer import Lemmatizer, SpacyLemmatizer
from .scorer import SemanticScorer

__all__ = [
    "EmbeddingService",
    "HashingEmbeddingService",
    "SentenceTransformerEmbeddingService",
    "cosine_distance",
    "cosine_similarity",
    "extract_keywords",
    "keywords_from_lemmas",
    "ordered_keywords",
    "Lemmatizer",
    "SpacyLemmatizer",
    "SemanticScorer",
]
