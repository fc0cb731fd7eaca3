from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator


class ContactWeights(BaseModel):
    max_points: int = Field(default=20, ge=0)
    full_name: int = Field(default=3, ge=0)
    email: int = Field(default=3, ge=0)
    phone: int = Field(default=3, ge=0)
    profile_link: int = Field(default=3, ge=0)
    location: int = Field(default=3, ge=0)


class EducationWeights(BaseModel):
    max_points: int = Field(default=10, ge=0)
    has_entry: int = Field(default=10, ge=0)


class ExperienceWeights(BaseModel):
    max_points: int = Field(default=15, ge=0)
    experience: int = Field(default=10, ge=0)
    projects: int = Field(default=5, ge=0)


class SkillTier(BaseModel):
    min_count: int = Field(ge=1)
    points: int = Field(ge=0)


def _default_skill_tiers() -> list[SkillTier]:
    return [
        SkillTier(min_count=5, points=20),
        SkillTier(min_count=3, points=10),
        SkillTier(min_count=1, points=5),
    ]


class SkillsWeights(BaseModel):
    max_points: int = Field(default=20, ge=0)
    tiers: list[SkillTier] = Field(default_factory=_default_skill_tiers)

    @field_validator("tiers")
    @classmethod
    def _sort_tiers(cls, value: list[SkillTier]) -> list[SkillTier]:
        # Highest threshold first so the first satisfied tier wins.
        return sorted(value, key=lambda tier: tier.min_count, reverse=True)


class BulletLengthBonus(BaseModel):
    enabled: bool = False
    points: int = Field(default=10, ge=0)
    target_words: int = Field(default=12, ge=1)


class ContentDepthWeights(BaseModel):
    max_points: int = Field(default=40, ge=0)
    bullet_length: BulletLengthBonus = Field(default_factory=BulletLengthBonus)


class ScoringRubric(BaseModel):
    max_score: int = Field(default=100, ge=1)
    contact: ContactWeights = Field(default_factory=ContactWeights)
    education: EducationWeights = Field(default_factory=EducationWeights)
    experience: ExperienceWeights = Field(default_factory=ExperienceWeights)
    skills: SkillsWeights = Field(default_factory=SkillsWeights)
    content_depth: ContentDepthWeights = Field(default_factory=ContentDepthWeights)


class SemanticSettings(BaseModel):
    max_keywords: int = Field(default=50, ge=1)
    min_keyword_length: int = Field(default=3, ge=0)
    match_threshold: float = 0.4
    points_per_match: float = Field(default=0.06, gt=0.0)


class FeedbackSettings(BaseModel):
    low_score_below: int = 50
    good_score_below: int = 80

    @model_validator(mode="after")
    def _check_order(self) -> "FeedbackSettings":
        if self.low_score_below > self.good_score_below:
            raise ValueError("low_score_below must not exceed good_score_below")
        return self
