"""Résumé ATS scoring and feedback engine."""

from __future__ import annotations

from resume_ats.schemas.resume import ResumeRecord
from resume_ats.scoring.analyzer import ResumeAnalyzer, get_default_analyzer

__version__ = "0.1.0"


def analyze(resume: ResumeRecord) -> list[str]:
    return get_default_analyzer().analyze(resume)


def ats_score(resume: ResumeRecord) -> int:
    return get_default_analyzer().ats_score(resume)


def extract_keywords(text: str) -> set[str]:
    return get_default_analyzer().extract_keywords(text)


def semantic_score(text: str) -> float:
    return get_default_analyzer().semantic_score(text)


__all__ = [
    "ResumeAnalyzer",
    "ResumeRecord",
    "analyze",
    "ats_score",
    "extract_keywords",
    "get_default_analyzer",
    "semantic_score",
]
