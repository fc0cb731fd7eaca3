from .analysis import (
    AlternativesResponse,
    KeywordMatch,
    KeywordsRequest,
    KeywordsResponse,
    ResumeAnalysis,
    ScoreBreakdown,
    ScoreResponse,
    SemanticReport,
)
from .resume import (
    COUNTRY_CODES,
    DEFAULT_COUNTRY_CODE,
    Certification,
    CountryCode,
    Education,
    EducationType,
    Experience,
    Project,
    ResumeRecord,
    SkillCategory,
)
from .rubric import FeedbackSettings, ScoringRubric, SemanticSettings

__all__ = [
    "AlternativesResponse",
    "KeywordMatch",
    "KeywordsRequest",
    "KeywordsResponse",
    "ResumeAnalysis",
    "ScoreBreakdown",
    "ScoreResponse",
    "SemanticReport",
    "COUNTRY_CODES",
    "DEFAULT_COUNTRY_CODE",
    "Certification",
    "CountryCode",
    "Education",
    "EducationType",
    "Experience",
    "Project",
    "ResumeRecord",
    "SkillCategory",
    "FeedbackSettings",
    "ScoringRubric",
    "SemanticSettings",
]
