from __future__ import annotations

from resume_ats.rules.structural import RuleResult
from resume_ats.schemas.rubric import FeedbackSettings


def low_score_message(score: int) -> str:
    return f"Your ATS Score is low ({score}/100). Add more detailed descriptions and skills."


def good_start_message(score: int) -> str:
    return f"Good start! boost your ATS score ({score}/100) by adding more measurable results (numbers, %)."


def success_message(score: int) -> str:
    return f"Your resume looks strong and well-structured! ATS Score: {score}/100"


def score_tier_message(score: int, settings: FeedbackSettings) -> str | None:
    if score < settings.low_score_below:
        return low_score_message(score)
    if score < settings.good_score_below:
        return good_start_message(score)
    return None


def pending_feedback(
    rule_results: list[RuleResult],
    score: int,
    settings: FeedbackSettings | None = None,
) -> list[str]:
    """Rule messages in rule order, then the score-tier message if any."""
    cfg = settings or FeedbackSettings()
    feedback = [result.message for result in rule_results if result.message is not None]
    tier = score_tier_message(score, cfg)
    if tier is not None:
        feedback.append(tier)
    return feedback


def compose_feedback(
    rule_results: list[RuleResult],
    score: int,
    settings: FeedbackSettings | None = None,
) -> list[str]:
    """Pending feedback, or the success message alone when nothing is pending."""
    feedback = pending_feedback(rule_results, score, settings)
    if not feedback:
        return [success_message(score)]
    return feedback
