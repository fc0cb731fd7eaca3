from fastapi import APIRouter, Request

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report service status and whether embedding-based scoring is available.",
)
async def health_check(request: Request):
    analyzer = getattr(request.app.state, "analyzer", None)
    semantic = analyzer is not None and analyzer.semantic_scorer.available
    return {"status": "healthy", "semantic_scoring": semantic}
