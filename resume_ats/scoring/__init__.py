from .analyzer import ResumeAnalyzer, get_default_analyzer
from .calculator import ScoreCalculator
from .feedback import compose_feedback, pending_feedback, score_tier_message

__all__ = [
    "ResumeAnalyzer",
    "get_default_analyzer",
    "ScoreCalculator",
    "compose_feedback",
    "pending_feedback",
    "score_tier_message",
]
