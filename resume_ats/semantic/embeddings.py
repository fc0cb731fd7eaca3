from __future__ import annotations

import hashlib
import math
import threading
from collections import OrderedDict
from typing import Protocol

import numpy as np


class EmbeddingService(Protocol):
    def distance(self, word_a: str, word_b: str) -> float:
        """Return a non-negative distance; 0.0 means identical meaning."""


def cosine_similarity(left: list[float], right: list[float]) -> float:
    if len(left) != len(right):
        return 0.0
    dot = sum(a * b for a, b in zip(left, right))
    left_norm = math.sqrt(sum(a * a for a in left))
    right_norm = math.sqrt(sum(b * b for b in right))
    if left_norm <= 0 or right_norm <= 0:
        return 0.0
    return dot / (left_norm * right_norm)


def cosine_distance(left: list[float], right: list[float]) -> float:
    """Map cosine similarity [-1, 1] onto a distance in [0, 2]."""
    return max(0.0, min(2.0, 1.0 - cosine_similarity(left, right)))


class HashingEmbeddingService(EmbeddingService):
    """Character n-gram hashing vectors.

    Deterministic and model-free, so related spellings ("develop",
    "developed") land close together while unrelated words sit near 1.0.
    """

    def __init__(self, dimension: int = 256, ngram: int = 3) -> None:
        if dimension <= 0:
            raise ValueError("dimension must be greater than 0")
        if ngram <= 0:
            raise ValueError("ngram must be greater than 0")
        self.dimension = dimension
        self.ngram = ngram

    def distance(self, word_a: str, word_b: str) -> float:
        if word_a.strip().lower() == word_b.strip().lower():
            return 0.0
        return cosine_distance(self.embed(word_a), self.embed(word_b))

    def embed(self, word: str) -> list[float]:
        vector = [0.0] * self.dimension
        padded = f"<{word.strip().lower()}>"
        if len(padded) <= self.ngram:
            grams = [padded]
        else:
            grams = [padded[idx : idx + self.ngram] for idx in range(len(padded) - self.ngram + 1)]
        for gram in grams:
            digest = hashlib.sha256(gram.encode("utf-8")).hexdigest()
            index = int(digest[:8], 16) % self.dimension
            vector[index] += 1.0

        norm = math.sqrt(sum(value * value for value in vector))
        if norm <= 0:
            return vector
        return [value / norm for value in vector]


class SentenceTransformerEmbeddingService(EmbeddingService):
    """Word distances from a sentence-transformers model.

    The model loads lazily on first use; word vectors are kept in a bounded
    LRU cache so repeated vocabulary lookups skip the encoder.
    """

    def __init__(self, model_name: str = "all-MiniLM-L6-v2", cache_size: int = 4096) -> None:
        if cache_size <= 0:
            raise ValueError("cache_size must be greater than 0")
        self.model_name = model_name
        self.cache_size = cache_size
        self._model = None
        self._model_lock = threading.Lock()
        self._cache: OrderedDict[str, np.ndarray] = OrderedDict()
        self._cache_lock = threading.Lock()

    def _get_model(self):
        if self._model is None:
            with self._model_lock:
                if self._model is None:
                    from sentence_transformers import SentenceTransformer

                    self._model = SentenceTransformer(self.model_name)
        return self._model

    def warmup(self, words: list[str] | tuple[str, ...] = ()) -> None:
        self._get_model()
        if words:
            self._vectors(list(words))

    def _vectors(self, words: list[str]) -> list[np.ndarray]:
        keys = [word.strip().lower() for word in words]
        found: dict[str, np.ndarray] = {}
        with self._cache_lock:
            for key in keys:
                vector = self._cache.get(key)
                if vector is not None:
                    self._cache.move_to_end(key)
                    found[key] = vector

        missing = [key for key in dict.fromkeys(keys) if key not in found]
        if missing:
            encoded = self._get_model().encode(
                missing,
                normalize_embeddings=True,
                show_progress_bar=False,
            )
            encoded = np.asarray(encoded, dtype=np.float32)
            with self._cache_lock:
                for key, vector in zip(missing, encoded):
                    found[key] = vector
                    self._cache[key] = vector
                while len(self._cache) > self.cache_size:
                    self._cache.popitem(last=False)

        return [found[key] for key in keys]

    def distance(self, word_a: str, word_b: str) -> float:
        left, right = self._vectors([word_a, word_b])
        cos = float(np.dot(left, right))
        return max(0.0, min(2.0, 1.0 - cos))
