from __future__ import annotations

import logging
from collections.abc import Iterable

from .lemmatizer import Lemmatizer

logger = logging.getLogger(__name__)

DEFAULT_MIN_KEYWORD_LENGTH = 3


def _is_word(lemma: str) -> bool:
    return any(char.isalnum() for char in lemma)


def keywords_from_lemmas(lemmas: Iterable[str], *, min_length: int = DEFAULT_MIN_KEYWORD_LENGTH) -> list[str]:
    """Unique lowercase lemmas longer than ``min_length``, in order of first appearance."""
    out: list[str] = []
    seen: set[str] = set()
    for lemma in lemmas:
        keyword = (lemma or "").strip().lower()
        if len(keyword) <= min_length or not _is_word(keyword):
            continue
        if keyword not in seen:
            seen.add(keyword)
            out.append(keyword)
    return out


def ordered_keywords(
    text: str,
    lemmatizer: Lemmatizer,
    *,
    min_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
) -> list[str]:
    if not text or not text.strip():
        return []

    try:
        lemmas = lemmatizer.lemmatize(text)
    except Exception as exc:
        logger.warning("keyword_extraction_failed reason=%s", exc)
        return []
    return keywords_from_lemmas(lemmas, min_length=min_length)


def extract_keywords(
    text: str,
    lemmatizer: Lemmatizer,
    *,
    min_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
) -> set[str]:
    return set(ordered_keywords(text, lemmatizer, min_length=min_length))
