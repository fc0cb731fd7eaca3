from fastapi import APIRouter, Depends, Header, Query, Request

from resume_ats.core.rate_limit import rate_limit
from resume_ats.core.security import check_api_key
from resume_ats.schemas.analysis import (
    AlternativesResponse,
    KeywordsRequest,
    KeywordsResponse,
    ResumeAnalysis,
    ScoreResponse,
)
from resume_ats.schemas.resume import ResumeRecord
from resume_ats.scoring.analyzer import ResumeAnalyzer, get_default_analyzer

router = APIRouter()


def get_analyzer(request: Request) -> ResumeAnalyzer:
    analyzer = getattr(request.app.state, "analyzer", None)
    if analyzer is None:
        analyzer = get_default_analyzer()
    return analyzer


def _auth(x_api_key: str | None = Header(default=None, alias="X-API-Key")):
    check_api_key(x_api_key)


@router.post("/resume/analyze", response_model=ResumeAnalysis)
@rate_limit()
def analyze_resume(
    request: Request,
    payload: ResumeRecord,
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
    _: None = Depends(_auth),
):
    _ = request
    return analyzer.report(payload)


@router.post("/resume/score", response_model=ScoreResponse)
@rate_limit()
def score_resume(
    request: Request,
    payload: ResumeRecord,
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
    _: None = Depends(_auth),
):
    _ = request
    return ScoreResponse(score=analyzer.ats_score(payload))


@router.post("/keywords", response_model=KeywordsResponse)
@rate_limit()
def keywords(
    request: Request,
    payload: KeywordsRequest,
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
    _: None = Depends(_auth),
):
    _ = request
    return KeywordsResponse(keywords=analyzer.semantic_scorer.keywords(payload.text))


@router.get("/vocabulary/alternatives", response_model=AlternativesResponse)
@rate_limit()
def vocabulary_alternatives(
    request: Request,
    word: str = Query(min_length=1, max_length=64),
    limit: int = Query(default=5, ge=1, le=20),
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
    _: None = Depends(_auth),
):
    _ = request
    return AlternativesResponse(word=word, alternatives=analyzer.suggest_alternatives(word, limit=limit))
