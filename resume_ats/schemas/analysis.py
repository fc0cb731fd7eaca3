from __future__ import annotations

from pydantic import BaseModel, Field


class KeywordMatch(BaseModel):
    keyword: str
    closest_term: str | None = None
    similarity: float
    matched: bool


class SemanticReport(BaseModel):
    score: float = Field(default=0.0, ge=0.0, le=1.0)
    keywords_considered: list[str] = Field(default_factory=list)
    matches: list[KeywordMatch] = Field(default_factory=list)
    match_count: int = 0
    degraded: bool = False

    @property
    def matched_keywords(self) -> list[str]:
        return [match.keyword for match in self.matches if match.matched]


class ScoreBreakdown(BaseModel):
    contact: int = 0
    education: int = 0
    experience: int = 0
    skills: int = 0
    content_depth: int = 0
    total: int = Field(default=0, ge=0, le=100)
    semantic: SemanticReport = Field(default_factory=SemanticReport)


class ResumeAnalysis(BaseModel):
    score: int = Field(ge=0, le=100)
    feedback: list[str] = Field(min_length=1)
    breakdown: ScoreBreakdown
    is_complete: bool = False


class ScoreResponse(BaseModel):
    score: int = Field(ge=0, le=100)


class KeywordsRequest(BaseModel):
    text: str = Field(default="", max_length=20000)


class KeywordsResponse(BaseModel):
    keywords: list[str] = Field(default_factory=list)


class AlternativesResponse(BaseModel):
    word: str
    alternatives: list[str] = Field(default_factory=list)
