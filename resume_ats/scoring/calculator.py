from __future__ import annotations

import math

from resume_ats.schemas.analysis import ScoreBreakdown, SemanticReport
from resume_ats.schemas.resume import ResumeRecord
from resume_ats.schemas.rubric import ScoringRubric
from resume_ats.semantic.scorer import SemanticScorer

# Absorbs float noise such as 0.06 * 5 * 40 == 11.999999999999998.
_FLOOR_TOLERANCE = 1e-9


def _present(value: str | None) -> bool:
    return bool((value or "").strip())


def _floor_points(value: float) -> int:
    return int(math.floor(value + _FLOOR_TOLERANCE))


def contact_points(resume: ResumeRecord, rubric: ScoringRubric) -> int:
    weights = rubric.contact
    points = 0
    if _present(resume.first_name) and _present(resume.last_name):
        points += weights.full_name
    if _present(resume.email):
        points += weights.email
    if _present(resume.phone):
        points += weights.phone
    if _present(resume.linkedin) or _present(resume.github):
        points += weights.profile_link
    if _present(resume.location):
        points += weights.location
    return min(points, weights.max_points)


def education_points(resume: ResumeRecord, rubric: ScoringRubric) -> int:
    weights = rubric.education
    points = weights.has_entry if resume.education else 0
    return min(points, weights.max_points)


def experience_points(resume: ResumeRecord, rubric: ScoringRubric) -> int:
    weights = rubric.experience
    points = 0
    if resume.experience:
        points += weights.experience
    if resume.projects:
        points += weights.projects
    return min(points, weights.max_points)


def skills_points(resume: ResumeRecord, rubric: ScoringRubric) -> int:
    weights = rubric.skills
    total = resume.total_skill_count()
    for tier in weights.tiers:
        if total >= tier.min_count:
            return min(tier.points, weights.max_points)
    return 0


def bullet_length_points(bullets: list[str], rubric: ScoringRubric) -> int:
    bonus = rubric.content_depth.bullet_length
    if not bonus.enabled or not bullets:
        return 0
    average_words = sum(len(bullet.split()) for bullet in bullets) / len(bullets)
    ratio = min(average_words / bonus.target_words, 1.0)
    return _floor_points(ratio * bonus.points)


def content_depth_points(bullets: list[str], semantic: SemanticReport, rubric: ScoringRubric) -> int:
    weights = rubric.content_depth
    if not bullets:
        return 0
    points = _floor_points(semantic.score * weights.max_points)
    points += bullet_length_points(bullets, rubric)
    return min(points, weights.max_points)


class ScoreCalculator:
    def __init__(self, semantic_scorer: SemanticScorer, rubric: ScoringRubric | None = None) -> None:
        self.semantic_scorer = semantic_scorer
        self.rubric = rubric or ScoringRubric()

    def breakdown(self, resume: ResumeRecord) -> ScoreBreakdown:
        rubric = self.rubric
        bullets = resume.all_bullets()
        semantic = self.semantic_scorer.evaluate(" ".join(bullets)) if bullets else SemanticReport()

        contact = contact_points(resume, rubric)
        education = education_points(resume, rubric)
        experience = experience_points(resume, rubric)
        skills = skills_points(resume, rubric)
        depth = content_depth_points(bullets, semantic, rubric)
        total = min(rubric.max_score, contact + education + experience + skills + depth, 100)

        return ScoreBreakdown(
            contact=contact,
            education=education,
            experience=experience,
            skills=skills,
            content_depth=depth,
            total=max(0, total),
            semantic=semantic,
        )

    def ats_score(self, resume: ResumeRecord) -> int:
        return self.breakdown(resume).total
